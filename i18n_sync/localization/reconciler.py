"""Bring every locale's key set in line with the reference locale."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import structlog

from ..config import SyncConfig
from .keypath import (
    MISSING,
    delete_by_path,
    flatten,
    get_by_path,
    is_namespace,
    leaf_text,
    prune_empty,
    set_by_path,
)
from .store import LocaleStore

logger = structlog.get_logger()


@dataclass
class ReconcileResult:
    """What reconciling one locale changed."""
    locale: str
    removed: List[str] = field(default_factory=list)
    added: List[str] = field(default_factory=list)
    refreshed: List[str] = field(default_factory=list)
    adopted: List[str] = field(default_factory=list)
    saved: bool = False

    @property
    def filled(self) -> int:
        """Number of keys written during the fill phase."""
        return len(self.added) + len(self.refreshed) + len(self.adopted)

    @property
    def changed(self) -> bool:
        return bool(self.removed) or self.filled > 0


class Reconciler:
    """Prunes extra keys, fills missing ones and promotes manual drafts."""

    def __init__(self, store: LocaleStore, config: SyncConfig):
        self.store = store
        self.config = config
        self.prefix = config.placeholder_prefix
        self.logger = logger.bind(component="reconciler")

    def is_placeholder(self, value: Any) -> bool:
        return isinstance(value, str) and value.startswith(self.prefix)

    def resolve(self, english: Any, existing: Any) -> Tuple[Any, str]:
        """Return the value a key needing attention should hold, and why.

        A placeholder whose text differs from the English source is a
        manual translation and is adopted as is. Non-string reference
        leaves are placeholdered through their text form.
        """
        source = leaf_text(english)
        if self.is_placeholder(existing):
            manual = existing[len(self.prefix):]
            if manual and manual != source:
                return manual, "adopted"

        placeholder = f"{self.prefix}{source}"
        if existing is MISSING:
            return placeholder, "added"
        return placeholder, "refreshed"

    def reconcile_tree(
        self,
        locale: str,
        tree: Dict[str, Any],
        reference: Dict[str, Any],
        reference_keys: Optional[List[str]] = None,
    ) -> ReconcileResult:
        """Reconcile ``tree`` against ``reference`` in place."""
        if reference_keys is None:
            reference_keys = flatten(reference)
        valid_keys = set(reference_keys)
        result = ReconcileResult(locale=locale)

        extra = [key for key in flatten(tree) if key not in valid_keys]
        if extra:
            for key in extra:
                delete_by_path(tree, key)
            prune_empty(tree)
            result.removed = extra
            self.logger.info("Removed extra keys", locale=locale, count=len(extra))

        for key in reference_keys:
            english = get_by_path(reference, key)
            existing = get_by_path(tree, key)
            if is_namespace(existing):
                # an empty namespace sitting where the reference has a leaf
                existing = MISSING
            elif existing is not MISSING and not self.is_placeholder(existing):
                continue

            value, reason = self.resolve(english, existing)
            if value == existing:
                continue

            set_by_path(tree, key, value)
            getattr(result, reason).append(key)
            if reason == "adopted":
                self.logger.info("Using manual translation", locale=locale, key=key)

        if result.added or result.refreshed:
            self.logger.info(
                "Manual translation needed",
                locale=locale,
                count=len(result.added) + len(result.refreshed),
            )
        return result

    def reconcile_locale(
        self,
        locale: str,
        reference: Dict[str, Any],
        reference_keys: Optional[List[str]] = None,
    ) -> ReconcileResult:
        """Load, reconcile and (if changed) save one locale."""
        self.logger.info("Processing locale", locale=locale)
        tree = self.store.load(locale)
        result = self.reconcile_tree(locale, tree, reference, reference_keys)

        if result.changed:
            self.store.save(locale, tree)
            result.saved = True
            self.logger.info(
                "Locale updated",
                locale=locale,
                filled=result.filled,
                removed=len(result.removed),
            )
        else:
            self.logger.info("No changes needed", locale=locale)
        return result

    def run(self) -> List[ReconcileResult]:
        """Reconcile every locale except the reference one."""
        locales = self.store.list_locales()
        reference = self.store.load(self.config.reference_locale)
        reference_keys = flatten(reference)

        results = []
        for locale in locales:
            if locale == self.config.reference_locale:
                continue
            results.append(self.reconcile_locale(locale, reference, reference_keys))

        self.logger.info("Reconcile complete", locales=len(results))
        return results
