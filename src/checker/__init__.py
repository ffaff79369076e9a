"""Consistency checking engine."""

from .differ import check_translations, diff_language
from .findings import (
    ExtraKey,
    FindingKind,
    LanguageReport,
    MissingKey,
    Report,
    UnusedKeyStillTranslated,
    VariableMismatch,
)
from .placeholders import extract_placeholders
from .report import UNKNOWN_FILE, render_report, write_json_report
from .usage import discover_source_files, find_translated_unused, find_unused

__all__ = [
    "ExtraKey",
    "FindingKind",
    "LanguageReport",
    "MissingKey",
    "Report",
    "UNKNOWN_FILE",
    "UnusedKeyStillTranslated",
    "VariableMismatch",
    "check_translations",
    "diff_language",
    "discover_source_files",
    "extract_placeholders",
    "find_translated_unused",
    "find_unused",
    "render_report",
    "write_json_report",
]
