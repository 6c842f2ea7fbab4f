"""Run configuration for i18n-sync."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError

REFERENCE_LOCALE = "en"
PLACEHOLDER_PREFIX = "TODO_TRANSLATE: "
DEFAULT_FILE_NAME = "common.json"
DEFAULT_LOCALES_DIR = "locales"


@dataclass(frozen=True)
class DetailLimits:
    """How many keys of each kind the per-locale report lists."""
    missing: int = 10
    extra: int = 5
    pending: int = 5


@dataclass(frozen=True)
class SyncConfig:
    """Immutable settings shared by the store, reconciler and validator."""
    locales_dir: Path = Path(DEFAULT_LOCALES_DIR)
    file_name: str = DEFAULT_FILE_NAME
    reference_locale: str = REFERENCE_LOCALE
    placeholder_prefix: str = PLACEHOLDER_PREFIX
    strict: bool = False
    detail_limits: DetailLimits = field(default_factory=DetailLimits)

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "locales_dir", Path(self.locales_dir))

        if not self.placeholder_prefix:
            raise ConfigurationError("Placeholder prefix must not be empty", config_key="placeholder_prefix")
        if not self.reference_locale:
            raise ConfigurationError("Reference locale must not be empty", config_key="reference_locale")
        if not self.file_name or "/" in self.file_name:
            raise ConfigurationError(
                f"Invalid locale file name: {self.file_name!r}", config_key="file_name"
            )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SyncConfig":
        """Build config from parsed command line arguments."""
        return cls(
            locales_dir=Path(args.locales_dir),
            file_name=args.file_name,
            strict=args.strict,
        )
