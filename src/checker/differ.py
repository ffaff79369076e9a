"""Cross-language consistency check against the base language."""

from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Dict, List, Optional

import structlog

from src.catalog.models import Catalog, FileIndex, KeyCollision
from src.errors import MissingBaseLanguageError

from .findings import (
    ExtraKey,
    LanguageReport,
    MissingKey,
    Report,
    UnusedKeyStillTranslated,
    VariableMismatch,
)
from .placeholders import extract_placeholders

logger = structlog.get_logger(__name__)


def diff_language(
    base_lang: str,
    lang: str,
    translations: Catalog,
    file_index: FileIndex,
    unused_keys: Optional[AbstractSet[str]] = None,
) -> LanguageReport:
    """Compare one language with the base language.

    Findings come out as missing keys, extra keys, placeholder mismatches and
    finally unused keys the language still translates; each group is sorted
    by key.
    """
    base = translations[base_lang]
    other = translations.get(lang, {})
    base_files = file_index.get(base_lang, {})
    other_files = file_index.get(lang, {})

    base_keys = base.keys()
    other_keys = other.keys()

    report = LanguageReport(language=lang)

    for key in sorted(base_keys - other_keys):
        report.findings.append(MissingKey(key=key, file=base_files.get(key)))

    for key in sorted(other_keys - base_keys):
        report.findings.append(ExtraKey(key=key, file=other_files.get(key)))

    for key in sorted(base_keys & other_keys):
        expected = extract_placeholders(base[key])
        found = extract_placeholders(other[key])
        if expected != found:
            report.findings.append(
                VariableMismatch(
                    key=key,
                    expected=expected,
                    found=found,
                    base_file=base_files.get(key),
                    file=other_files.get(key),
                )
            )

    if unused_keys:
        for key in sorted(other_keys & unused_keys):
            report.findings.append(
                UnusedKeyStillTranslated(key=key, language=lang, file=other_files.get(key))
            )

    return report


def check_translations(
    base_lang: str,
    translations: Catalog,
    file_index: FileIndex,
    unused_keys: Optional[AbstractSet[str]] = None,
    collisions: Optional[List[KeyCollision]] = None,
    max_workers: Optional[int] = None,
) -> Report:
    """Check every non-base language against ``base_lang``.

    Each language is compared in its own worker; the per-language reports
    are merged here once all workers are done.

    Raises:
        MissingBaseLanguageError: if ``base_lang`` is not in ``translations``.
    """
    if base_lang not in translations:
        raise MissingBaseLanguageError(base_lang, available=list(translations))

    languages = sorted(lang for lang in translations if lang != base_lang)
    logger.info("Checking languages", base_lang=base_lang, languages=languages)

    unused = frozenset(unused_keys) if unused_keys is not None else None

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        fragments = list(
            pool.map(
                lambda lang: diff_language(base_lang, lang, translations, file_index, unused),
                languages,
            )
        )

    merged: Dict[str, LanguageReport] = {}
    for fragment in fragments:
        merged[fragment.language] = fragment
        logger.debug(
            "Language checked",
            language=fragment.language,
            missing=len(fragment.missing),
            extra=len(fragment.extra),
            mismatches=len(fragment.mismatches),
            unused_translated=len(fragment.unused_translated),
        )

    return Report(
        base_language=base_lang,
        languages=merged,
        unused_keys=unused,
        collisions=list(collisions or []),
    )
