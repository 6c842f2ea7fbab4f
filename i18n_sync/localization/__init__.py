"""Translation tree reconciliation and validation."""

from .keypath import MISSING, NodeKind, flatten, get_by_path, node_kind, set_by_path
from .reconciler import ReconcileResult, Reconciler
from .store import FileLocaleStore, LocaleStore, MemoryLocaleStore
from .validator import LocaleStats, ValidationReport, Validator

__all__ = [
    "MISSING",
    "NodeKind",
    "flatten",
    "get_by_path",
    "node_kind",
    "set_by_path",
    "ReconcileResult",
    "Reconciler",
    "FileLocaleStore",
    "LocaleStore",
    "MemoryLocaleStore",
    "LocaleStats",
    "ValidationReport",
    "Validator",
]
