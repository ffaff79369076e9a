"""Detect translation keys that no source file refers to.

A key counts as used when it appears verbatim anywhere in a source file,
including inside a longer token. Keys built dynamically at runtime are
reported as unused.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import AbstractSet, Dict, Iterable, Iterator, List, Optional, Sequence, Set

import structlog

from src.catalog.models import Catalog
from src.errors import ErrorContextManager, SourceScanError

logger = structlog.get_logger(__name__)


def discover_source_files(
    roots: Iterable[Path],
    extensions: Sequence[str],
    exclude_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield files under ``roots`` whose suffix is in ``extensions``, sorted per root."""
    excluded = set(exclude_dirs)
    suffixes = tuple(extensions)

    for root in roots:
        root = Path(root)
        if root.is_file():
            if root.name.endswith(suffixes):
                yield root
            continue
        if not root.is_dir():
            logger.warning("Source directory not found", dir=str(root))
            continue

        found = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [d for d in dirnames if d not in excluded]
            for name in filenames:
                if name.endswith(suffixes):
                    found.append(Path(dirpath) / name)
        yield from sorted(found)


def _keys_used_in(path: Path, keys: AbstractSet[str]) -> Set[str]:
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceScanError(f"Cannot read source file {path}: {e}", path=str(path), previous_error=e) from e
    return {key for key in keys if key in content}


def find_unused(
    base_keys: Iterable[str],
    source_files: Sequence[Path],
    max_workers: Optional[int] = None,
    error_context: Optional[ErrorContextManager] = None,
) -> Set[str]:
    """Return the base keys that occur in none of ``source_files``.

    Files are scanned in parallel; each worker returns the keys it saw and
    the union is taken afterwards. Unreadable files are recorded in
    ``error_context`` and count as referencing nothing.
    """
    keys = frozenset(base_keys)
    if not keys:
        return set()

    def scan(path: Path):
        try:
            return _keys_used_in(path, keys), None
        except SourceScanError as e:
            return set(), e

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(scan, source_files))

    used: Set[str] = set()
    for found, error in results:
        if error is not None:
            if error_context is not None:
                error_context.record_error(error, {"stage": "usage_scan"})
            else:
                logger.warning("Skipping unreadable source file", path=error.path, error=error.message)
            continue
        used |= found

    unused = set(keys - used)
    logger.info("Usage scan complete", files=len(source_files), keys=len(keys), unused=len(unused))
    return unused


def find_translated_unused(
    base_lang: str,
    unused_keys: AbstractSet[str],
    translations: Catalog,
) -> Dict[str, List[str]]:
    """Unused keys still present in each non-base language, sorted."""
    result = {}
    for lang in sorted(translations):
        if lang == base_lang:
            continue
        still_translated = sorted(translations[lang].keys() & unused_keys)
        if still_translated:
            result[lang] = still_translated
    return result
