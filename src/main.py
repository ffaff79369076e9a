"""Main entry point for the translation consistency checker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from src import __version__
from src.catalog import CatalogLoader
from src.checker import (
    Report,
    check_translations,
    discover_source_files,
    find_unused,
    render_report,
    write_json_report,
)
from src.config import Settings, load_config
from src.errors import ErrorContextManager, I18nCheckError, MissingBaseLanguageError

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_FATAL = 2


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.INFO

    # Logs go to stderr, the report owns stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Check translation catalogs against a base language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"i18n-check {__version__}"
    )

    parser.add_argument(
        "translations_dir", nargs="?", type=Path, help="Directory with one folder per language"
    )
    parser.add_argument("--base-lang", help="Reference language code")
    parser.add_argument("--pattern", dest="file_pattern", help="Glob for translation files in a language folder")
    parser.add_argument("--config-file", type=Path, help="Path to YAML configuration file")

    parser.add_argument(
        "--source-dir", dest="source_dirs", action="append", type=Path,
        help="Source root scanned for key usage (repeatable)",
    )
    parser.add_argument(
        "--extension", dest="source_extensions", action="append",
        help="Source file extension to scan (repeatable)",
    )
    parser.add_argument(
        "--check-unused", action="store_true", default=None, help="Report keys unused in sources"
    )
    parser.add_argument("--on-malformed", choices=["abort", "skip"], help="Policy for broken translation files")
    parser.add_argument("--workers", dest="max_workers", type=int, help="Worker threads")
    parser.add_argument("--json-output", type=Path, help="Also write the report as JSON")

    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")

    return parser.parse_args(argv)


def run_check(config: Settings) -> Report:
    """Load the catalogs, scan sources when asked, and build the report."""
    logger = structlog.get_logger()
    error_context = ErrorContextManager()

    loader = CatalogLoader(
        config.translations_dir,
        file_pattern=config.file_pattern,
        max_workers=config.max_workers,
        on_malformed=config.on_malformed,
        error_context=error_context,
    )
    catalog = loader.load()

    if config.base_lang not in catalog.translations:
        raise MissingBaseLanguageError(config.base_lang, available=catalog.languages)

    unused_keys = None
    if config.check_unused:
        source_files = list(
            discover_source_files(config.source_dirs, config.source_extensions, config.exclude_dirs)
        )
        logger.info("Source files found", count=len(source_files))
        unused_keys = find_unused(
            catalog.translations[config.base_lang].keys(),
            source_files,
            max_workers=config.max_workers,
            error_context=error_context,
        )

    report = check_translations(
        config.base_lang,
        catalog.translations,
        catalog.file_index,
        unused_keys=unused_keys,
        collisions=catalog.collisions,
        max_workers=config.max_workers,
    )

    for lang, lang_report in sorted(report.languages.items()):
        if lang_report.unused_translated:
            logger.info(
                "Unused keys still translated", language=lang, count=len(lang_report.unused_translated)
            )

    if error_context.has_errors:
        logger.warning("Some files were skipped", **error_context.get_error_stats())

    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point, returns the process exit code."""
    args = parse_args(argv)

    setup_logging(debug=bool(args.debug))
    logger = structlog.get_logger()
    logger.info("Starting translation consistency check", version=__version__)

    try:
        config = load_config(
            config_file=args.config_file,
            translations_dir=args.translations_dir,
            base_lang=args.base_lang,
            file_pattern=args.file_pattern,
            source_dirs=args.source_dirs,
            source_extensions=args.source_extensions,
            check_unused=args.check_unused,
            on_malformed=args.on_malformed,
            max_workers=args.max_workers,
            json_output=args.json_output,
            debug=args.debug,
        )
        if config.debug and not args.debug:
            setup_logging(debug=True)

        logger.info(
            "Configuration loaded",
            translations_dir=str(config.translations_dir),
            base_lang=config.base_lang,
            check_unused=config.check_unused,
        )

        report = run_check(config)

        sys.stdout.write(render_report(report))

        if config.json_output is not None:
            write_json_report(report, config.json_output)

    except I18nCheckError as e:
        logger.error("Check aborted", error_type=e.error_code, error=e.message, context=e.context)
        return EXIT_FATAL
    except Exception as e:
        logger.exception("Unexpected error", error=str(e))
        return EXIT_FATAL

    return EXIT_FINDINGS if report.has_errors else EXIT_OK


def run() -> None:
    """Synchronous entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    run()
