"""Human-readable and JSON rendering of a consistency report."""

import json
from datetime import datetime
from pathlib import Path
from typing import AbstractSet, List, Optional

import structlog

from src.errors import ReportExportError

from .findings import LanguageReport, Report

logger = structlog.get_logger(__name__)

UNKNOWN_FILE = "Unknown file"


def display_file(path: Optional[str]) -> str:
    """Provenance as shown to the user."""
    return path if path else UNKNOWN_FILE


def format_variables(names: AbstractSet[str]) -> str:
    return "{" + ", ".join(sorted(names)) + "}"


def render_language(report: LanguageReport, base_language: str) -> List[str]:
    lines = [f"🔍 Checking {report.language.upper()}"]

    if report.missing:
        lines.append("❌ Missing keys:")
        for finding in report.missing:
            lines.append(f"   - Key: {finding.key} | File: {display_file(finding.file)}")

    if report.extra:
        lines.append("⚠️ Extra keys:")
        for finding in report.extra:
            lines.append(f"   - Key: {finding.key} | File: {display_file(finding.file)}")

    for mismatch in report.mismatches:
        lines.extend([
            "🔄 Variable mismatch detected!",
            f"   - Key: {mismatch.key}",
            f"   - Expected variables ({base_language.upper()}): {format_variables(mismatch.expected)}",
            f"   - Found variables ({report.language.upper()}): {format_variables(mismatch.found)}",
            f"   - Location: Expected in {display_file(mismatch.base_file)}"
            f" but found in {display_file(mismatch.file)}",
        ])
        if mismatch.missing_variables:
            lines.append(f"   - Missing variables: {format_variables(mismatch.missing_variables)}")
        if mismatch.unexpected_variables:
            lines.append(f"   - Unexpected variables: {format_variables(mismatch.unexpected_variables)}")

    if report.unused_translated:
        lines.append("🗑️ Unused keys still translated:")
        for finding in report.unused_translated:
            lines.append(f"   - Key: {finding.key} | File: {display_file(finding.file)}")

    if not report.has_errors:
        lines.append("✅ No issues")

    return lines


def render_summary(report: Report) -> List[str]:
    lines = ["🌍 Translation Consistency Check Complete"]

    if report.unused_keys is not None:
        lines.append(f"ℹ️ Info: {len(report.unused_keys)} base key(s) not referenced in sources.")

    if report.collisions:
        lines.append(
            f"⚠️ Warning: {len(report.collisions)} key(s) defined in more than one file"
            " (last file wins)."
        )
        for collision in report.collisions:
            lines.append(
                f"   - {collision.language.upper()} {collision.key}: {' -> '.join(collision.files)}"
            )

    if report.has_errors:
        lines.append(
            f"❌ Error: {len(report.impacted_languages)} language(s) impacted with inconsistent keys/variables."
        )
        lines.append(f"❌ Error: {len(report.impacted_files)} file(s) impacted by variable mismatches.")
    else:
        lines.append("✅ Success: No translation issues found.")

    return lines


def render_report(report: Report) -> str:
    """Render the whole report as text."""
    blocks = []
    for code in sorted(report.languages):
        blocks.append("\n".join(render_language(report.languages[code], report.base_language)))
    blocks.append("\n".join(render_summary(report)))
    return "\n\n".join(blocks) + "\n"


def write_json_report(report: Report, output_file: Path) -> Path:
    """Export the report as JSON.

    Args:
        report: Report to export
        output_file: Path to the output JSON file

    Returns:
        The path written

    Raises:
        ReportExportError: if the file cannot be written.
    """
    output_path = Path(output_file)
    output_data = {"generated_at": datetime.now().isoformat(), **report.to_dict()}

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ReportExportError(
            f"Cannot write report to {output_path}: {e}", path=str(output_path), previous_error=e
        ) from e

    logger.info("Report exported", file=str(output_path), has_errors=report.has_errors)
    return output_path
