"""Console presentation of validation results.

Everything here is a pure function of the computed stats; nothing reads
storage or touches the logger.
"""

from typing import List, Sequence, Tuple

from ..config import DetailLimits
from .validator import LocaleStats, ValidationReport

# title, minimum width, right-aligned
COLUMNS: Tuple[Tuple[str, int, bool], ...] = (
    ("Locale", 7, False),
    ("Total", 7, True),
    ("Translated", 9, True),
    ("Missing", 7, True),
    ("Extra", 5, True),
    ("TODO", 8, True),
    ("Coverage", 8, True),
)


def format_key_list(title: str, keys: Sequence[str], limit: int) -> List[str]:
    """Heading plus the first ``limit`` keys and a continuation line."""
    if not keys:
        return []
    lines = [f"{title}:"]
    lines.extend(f"    - {key}" for key in keys[:limit])
    if len(keys) > limit:
        lines.append(f"  ... and {len(keys) - limit} more")
    return lines


def format_locale_details(stats: LocaleStats, limits: DetailLimits = DetailLimits()) -> List[str]:
    lines = [f"Checking {stats.locale}..."]
    lines += format_key_list(f"  Missing {len(stats.missing)} keys", stats.missing, limits.missing)
    lines += format_key_list(f"  Extra {len(stats.extra)} keys", stats.extra, limits.extra)
    lines += format_key_list(
        f"  {len(stats.pending)} TODO_TRANSLATE strings", stats.pending, limits.pending
    )
    lines.append(f"  Coverage: {stats.coverage}%")
    return lines


def _widths(locales: Sequence[LocaleStats]) -> List[int]:
    widths = [max(width, len(title)) for title, width, _ in COLUMNS]
    # the locale column grows to fit the longest identifier
    widths[0] = max([widths[0]] + [len(stats.locale) for stats in locales])
    return widths


def _border(widths: Sequence[int], left: str, middle: str, right: str) -> str:
    return left + middle.join("─" * (width + 2) for width in widths) + right


def _row(widths: Sequence[int], cells: Sequence[str], header: bool = False) -> str:
    parts = []
    for cell, width, (_, _, right) in zip(cells, widths, COLUMNS):
        text = cell.rjust(width) if right and not header else cell.ljust(width)
        parts.append(f" {text} ")
    return "│" + "│".join(parts) + "│"


def format_summary_table(locales: Sequence[LocaleStats]) -> str:
    """Box-drawn summary table, one row per locale."""
    widths = _widths(locales)
    lines = [
        "Translation Coverage Summary:",
        _border(widths, "┌", "┬", "┐"),
        _row(widths, [title for title, _, _ in COLUMNS], header=True),
        _border(widths, "├", "┼", "┤"),
    ]
    for stats in locales:
        lines.append(_row(widths, [
            stats.locale,
            str(stats.total),
            str(stats.translated),
            str(len(stats.missing)),
            str(len(stats.extra)),
            str(len(stats.pending)),
            f"{stats.coverage}%",
        ]))
    lines.append(_border(widths, "└", "┴", "┘"))
    return "\n".join(lines)


def format_verdict(report: ValidationReport) -> str:
    if report.failed:
        return "❌ Validation failed! Please fix the missing translations."
    return "✅ All translations are valid!"


def format_report(report: ValidationReport, limits: DetailLimits = DetailLimits()) -> str:
    """Full validate output: details per locale, table, verdict."""
    blocks = ["\n".join(format_locale_details(stats, limits)) for stats in report.locales]
    blocks.append(format_summary_table(report.locales))
    blocks.append(format_verdict(report))
    return "\n\n".join(blocks)
