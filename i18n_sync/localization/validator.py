"""Read-only audit of every locale against the reference locale."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import structlog

from ..config import SyncConfig
from .keypath import flatten, get_by_path
from .store import LocaleStore

logger = structlog.get_logger()


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up; 100 when ``whole`` is 0."""
    if whole == 0:
        return 100
    return (200 * part + whole) // (2 * whole)


@dataclass
class LocaleStats:
    """Coverage of one locale against the reference key set."""
    locale: str
    total: int
    key_count: int
    missing: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)
    pending: List[str] = field(default_factory=list)

    @property
    def translated(self) -> int:
        return self.key_count - len(self.pending)

    @property
    def coverage(self) -> int:
        # not clamped: extras count as translated keys
        return percent(self.translated, self.total)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "locale": self.locale,
            "total": self.total,
            "translated": self.translated,
            "missing": len(self.missing),
            "extra": len(self.extra),
            "todo": len(self.pending),
            "coverage": self.coverage,
        }


@dataclass
class ValidationReport:
    """Stats for every locale of one validation run."""
    locales: List[LocaleStats] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Missing keys fail a run; extras and placeholders only warn."""
        return any(stats.missing for stats in self.locales)

    def get(self, locale: str) -> Optional[LocaleStats]:
        for stats in self.locales:
            if stats.locale == locale:
                return stats
        return None


class Validator:
    """Computes missing, extra and pending keys per locale. Never writes."""

    def __init__(self, store: LocaleStore, config: SyncConfig):
        self.store = store
        self.config = config
        self.logger = logger.bind(component="validator")

    def is_pending(self, value: Any) -> bool:
        return isinstance(value, str) and value.startswith(self.config.placeholder_prefix)

    def compare(self, locale: str, tree: Dict[str, Any], reference_keys: List[str]) -> LocaleStats:
        """Compare one tree with the reference key list."""
        keys = flatten(tree)
        key_set = set(keys)
        reference_set = set(reference_keys)

        return LocaleStats(
            locale=locale,
            total=len(reference_keys),
            key_count=len(keys),
            missing=[key for key in reference_keys if key not in key_set],
            extra=[key for key in keys if key not in reference_set],
            pending=[key for key in keys if self.is_pending(get_by_path(tree, key))],
        )

    def validate_locale(self, locale: str, reference_keys: List[str]) -> LocaleStats:
        self.logger.info("Checking locale", locale=locale)
        stats = self.compare(locale, self.store.load(locale), reference_keys)
        self.logger.debug("Locale checked", **stats.to_dict())
        return stats

    def run(self) -> ValidationReport:
        """Validate every locale, the reference one included."""
        locales = self.store.list_locales()
        reference_keys = flatten(self.store.load(self.config.reference_locale))

        report = ValidationReport()
        for locale in locales:
            report.locales.append(self.validate_locale(locale, reference_keys))

        if report.failed:
            self.logger.warning(
                "Validation failed",
                locales=[stats.locale for stats in report.locales if stats.missing],
            )
        return report
