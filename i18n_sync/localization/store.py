"""Locale storage: one translation tree per locale directory."""

import copy
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from ..config import SyncConfig
from ..errors import LocaleStoreError, TranslationFileError

logger = structlog.get_logger()


class LocaleStore(ABC):
    """Contract shared by the file-backed and in-memory stores."""

    @abstractmethod
    def list_locales(self) -> List[str]:
        """Return the available locale identifiers, sorted."""
        pass

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Return the locale's tree, empty if it has none."""
        pass

    @abstractmethod
    def save(self, locale: str, tree: Dict[str, Any]) -> None:
        """Persist the locale's tree."""
        pass


def dump_tree(tree: Dict[str, Any]) -> str:
    """Serialize a tree the way it is written to disk."""
    return json.dumps(tree, indent=2, ensure_ascii=False) + "\n"


class FileLocaleStore(LocaleStore):
    """Stores trees as ``<locales_dir>/<locale>/<file_name>`` JSON files."""

    def __init__(self, config: SyncConfig):
        """Initialize the store.

        Args:
            config: Run configuration holding the root directory, the file
                name and the strict flag
        """
        self.config = config
        self.root = config.locales_dir
        self.logger = logger.bind(component="locale_store", root=str(self.root))

    def path_for(self, locale: str) -> Path:
        return self.root / locale / self.config.file_name

    def list_locales(self) -> List[str]:
        """Return every locale directory under the root, sorted.

        Raises:
            LocaleStoreError: the root does not exist or cannot be read
        """
        try:
            entries = list(self.root.iterdir())
        except OSError as e:
            raise LocaleStoreError(
                f"Cannot read translations directory {self.root}: {e.strerror or e}",
                root=str(self.root),
                previous_error=e,
            ) from e

        locales = sorted(entry.name for entry in entries if entry.is_dir())
        self.logger.debug("Locales discovered", locales=locales)
        return locales

    def load(self, locale: str) -> Dict[str, Any]:
        """Load a locale's tree.

        A missing file yields an empty tree. A malformed file yields an
        empty tree too unless the store is strict, in which case
        ``TranslationFileError`` is raised.
        """
        file_path = self.path_for(locale)
        if not file_path.exists():
            self.logger.warning("Translation file does not exist", locale=locale, file=str(file_path))
            return {}

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        except (OSError, ValueError) as e:
            if self.config.strict:
                raise TranslationFileError(
                    f"Cannot load {file_path}: {e}",
                    locale=locale,
                    file=str(file_path),
                    previous_error=e,
                ) from e
            self.logger.error(
                "Failed to load translation file, treating it as empty; "
                "its content will be replaced on the next reconcile",
                locale=locale,
                file=str(file_path),
                error=str(e),
            )
            return {}

        return data

    def save(self, locale: str, tree: Dict[str, Any]) -> None:
        """Write a locale's tree, creating its directory if needed."""
        file_path = self.path_for(locale)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(dump_tree(tree), encoding="utf-8")
        self.logger.debug("Translation file written", locale=locale, file=str(file_path))


class MemoryLocaleStore(LocaleStore):
    """Keeps trees in a dict; used for tests and embedding."""

    def __init__(self, trees: Optional[Dict[str, Dict[str, Any]]] = None):
        self.trees: Dict[str, Dict[str, Any]] = copy.deepcopy(trees or {})
        self.writes: List[str] = []
        self.logger = logger.bind(component="locale_store")

    def list_locales(self) -> List[str]:
        return sorted(self.trees)

    def load(self, locale: str) -> Dict[str, Any]:
        if locale not in self.trees:
            self.logger.warning("Translation tree does not exist", locale=locale)
            return {}
        return copy.deepcopy(self.trees[locale])

    def save(self, locale: str, tree: Dict[str, Any]) -> None:
        self.trees[locale] = copy.deepcopy(tree)
        self.writes.append(locale)
