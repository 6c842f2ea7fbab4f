from i18n_sync.main import run

run()
