"""Data models for loaded catalogs.

Using dataclasses for simplicity and type safety.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# language -> key -> translated text
Catalog = Dict[str, Dict[str, str]]
# language -> key -> path of the file that defined it
FileIndex = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class KeyCollision:
    """The same dot-path key defined by more than one file of a language.

    The value from the last file in ``files`` is the one kept.
    """

    language: str
    key: str
    files: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"language": self.language, "key": self.key, "files": list(self.files)}


@dataclass
class LanguageCatalog:
    """Everything loaded for one language folder."""

    language: str
    translations: Dict[str, str] = field(default_factory=dict)
    file_index: Dict[str, str] = field(default_factory=dict)
    collisions: List[KeyCollision] = field(default_factory=list)
    files_loaded: int = 0
    skipped_files: List[str] = field(default_factory=list)


@dataclass
class LoadedCatalog:
    """Catalog and provenance for every language of one run."""

    translations: Catalog = field(default_factory=dict)
    file_index: FileIndex = field(default_factory=dict)
    collisions: List[KeyCollision] = field(default_factory=list)
    files_loaded: int = 0
    skipped_files: List[str] = field(default_factory=list)

    @property
    def languages(self) -> List[str]:
        return sorted(self.translations)

    def add(self, language_catalog: LanguageCatalog) -> None:
        """Merge one language into the run catalog."""
        lang = language_catalog.language
        self.translations[lang] = language_catalog.translations
        self.file_index[lang] = language_catalog.file_index
        self.collisions.extend(language_catalog.collisions)
        self.files_loaded += language_catalog.files_loaded
        self.skipped_files.extend(language_catalog.skipped_files)

