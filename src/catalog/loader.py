"""Load per-language translation folders into a flat catalog."""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import structlog

from src.errors import ConfigurationError, ErrorContextManager, MalformedCatalogError

from .flatten import flatten
from .models import KeyCollision, LanguageCatalog, LoadedCatalog

logger = structlog.get_logger(__name__)


class CatalogLoader:
    """Loads ``<translations_dir>/<lang>/<pattern>`` files for every language."""

    def __init__(
        self,
        translations_dir: Path,
        file_pattern: str = "*.json",
        max_workers: Optional[int] = None,
        on_malformed: str = "abort",
        error_context: Optional[ErrorContextManager] = None,
    ):
        """Initialize the loader.

        Args:
            translations_dir: Directory containing one folder per language
            file_pattern: Glob applied inside each language folder
            max_workers: Thread pool size, ``None`` lets the executor decide
            on_malformed: ``"abort"`` raises on a broken file, ``"skip"`` logs it
            error_context: Where skipped files are recorded
        """
        if on_malformed not in ("abort", "skip"):
            raise ConfigurationError(
                f"Unknown malformed-file policy: {on_malformed}", config_key="on_malformed"
            )

        self.translations_dir = Path(translations_dir)
        self.file_pattern = file_pattern
        self.max_workers = max_workers
        self.on_malformed = on_malformed
        self.error_context = error_context or ErrorContextManager()

    def discover_languages(self) -> List[str]:
        """Return the sorted language folder names."""
        if not self.translations_dir.is_dir():
            raise ConfigurationError(
                f"Translations directory not found: {self.translations_dir}",
                config_key="translations_dir",
            )
        return sorted(p.name for p in self.translations_dir.iterdir() if p.is_dir())

    def language_files(self, language: str) -> List[Path]:
        """Files of one language, in the order they are merged."""
        folder = self.translations_dir / language
        return sorted(p for p in folder.glob(self.file_pattern) if p.is_file())

    def load(self) -> LoadedCatalog:
        """Load every language folder in parallel."""
        languages = self.discover_languages()
        files: Dict[str, List[Path]] = {lang: self.language_files(lang) for lang in languages}

        logger.info("Language folders found", count=len(languages), languages=languages)
        logger.info(
            "Translation files found across all folders",
            count=sum(len(paths) for paths in files.values()),
        )

        catalog = LoadedCatalog()
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = list(pool.map(lambda lang: self._load_language(lang, files[lang]), languages))

        for language_catalog, errors in results:
            for error in errors:
                self.error_context.record_error(error, {"stage": "load"})
            catalog.add(language_catalog)
            logger.debug(
                "Loaded language",
                language=language_catalog.language,
                keys=len(language_catalog.translations),
                files=language_catalog.files_loaded,
            )

        for collision in catalog.collisions:
            logger.warning(
                "Key defined in several files, last one wins",
                language=collision.language,
                key=collision.key,
                files=list(collision.files),
            )

        return catalog

    def _load_language(
        self, language: str, paths: List[Path]
    ) -> Tuple[LanguageCatalog, List[MalformedCatalogError]]:
        result = LanguageCatalog(language=language)
        errors: List[MalformedCatalogError] = []
        defined_in: Dict[str, List[str]] = {}

        for path in paths:
            try:
                flattened, duplicates = self._read_file(path, language)
            except MalformedCatalogError as e:
                if self.on_malformed == "abort":
                    raise
                errors.append(e)
                result.skipped_files.append(str(path))
                continue

            for key in duplicates:
                defined_in.setdefault(key, []).append(str(path))
            for key, value in flattened.items():
                result.translations[key] = value
                result.file_index[key] = str(path)
                defined_in.setdefault(key, []).append(str(path))
            result.files_loaded += 1

        result.collisions = [
            KeyCollision(language=language, key=key, files=tuple(sources))
            for key, sources in sorted(defined_in.items())
            if len(sources) > 1
        ]
        return result, errors

    def _read_file(self, path: Path, language: str) -> Tuple[Dict[str, str], List[str]]:
        """Flattened document plus the keys it defines more than once."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedCatalogError(
                f"Invalid JSON in {path}: line {e.lineno}, column {e.colno}",
                path=str(path),
                language=language,
                previous_error=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedCatalogError(
                f"Cannot read {path}: {e}", path=str(path), language=language, previous_error=e
            ) from e

        duplicates: List[str] = []
        return flatten(document, duplicates=duplicates), duplicates
