"""Findings and reports produced by the consistency check."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Set

from src.catalog.models import KeyCollision


class FindingKind(str, Enum):
    """Finding types, in the order they are reported."""
    MISSING_KEY = "missing_key"
    EXTRA_KEY = "extra_key"
    VARIABLE_MISMATCH = "variable_mismatch"
    UNUSED_KEY_STILL_TRANSLATED = "unused_key_still_translated"


@dataclass(frozen=True)
class MissingKey:
    """Key defined by the base language but not by the checked language.

    ``file`` is where the key lives in the base language.
    """
    key: str
    file: Optional[str] = None

    kind = FindingKind.MISSING_KEY

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "key": self.key, "file": self.file}


@dataclass(frozen=True)
class ExtraKey:
    """Key defined by the checked language but not by the base language."""
    key: str
    file: Optional[str] = None

    kind = FindingKind.EXTRA_KEY

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "key": self.key, "file": self.file}


@dataclass(frozen=True)
class VariableMismatch:
    """Placeholders of a translation differ from the base text."""
    key: str
    expected: FrozenSet[str]
    found: FrozenSet[str]
    base_file: Optional[str] = None
    file: Optional[str] = None

    kind = FindingKind.VARIABLE_MISMATCH

    @property
    def missing_variables(self) -> FrozenSet[str]:
        return self.expected - self.found

    @property
    def unexpected_variables(self) -> FrozenSet[str]:
        return self.found - self.expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "key": self.key,
            "expected": sorted(self.expected),
            "found": sorted(self.found),
            "missing_variables": sorted(self.missing_variables),
            "unexpected_variables": sorted(self.unexpected_variables),
            "base_file": self.base_file,
            "file": self.file,
        }


@dataclass(frozen=True)
class UnusedKeyStillTranslated:
    """Key never referenced by the sources but still translated."""
    key: str
    language: str
    file: Optional[str] = None

    kind = FindingKind.UNUSED_KEY_STILL_TRANSLATED

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "key": self.key, "language": self.language, "file": self.file}


@dataclass
class LanguageReport:
    """Findings for one checked language."""
    language: str
    findings: List[Any] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.findings)

    def of_kind(self, kind: FindingKind) -> List[Any]:
        return [f for f in self.findings if f.kind is kind]

    @property
    def missing(self) -> List[MissingKey]:
        return self.of_kind(FindingKind.MISSING_KEY)

    @property
    def extra(self) -> List[ExtraKey]:
        return self.of_kind(FindingKind.EXTRA_KEY)

    @property
    def mismatches(self) -> List[VariableMismatch]:
        return self.of_kind(FindingKind.VARIABLE_MISMATCH)

    @property
    def unused_translated(self) -> List[UnusedKeyStillTranslated]:
        return self.of_kind(FindingKind.UNUSED_KEY_STILL_TRANSLATED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "has_errors": self.has_errors,
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass
class Report:
    """Outcome of one consistency check."""
    base_language: str
    languages: Dict[str, LanguageReport] = field(default_factory=dict)
    unused_keys: Optional[FrozenSet[str]] = None
    collisions: List[KeyCollision] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(lang.has_errors for lang in self.languages.values())

    @property
    def impacted_languages(self) -> List[str]:
        return sorted(code for code, lang in self.languages.items() if lang.has_errors)

    @property
    def impacted_files(self) -> Set[str]:
        """Files involved in a variable mismatch, on either side."""
        files = set()
        for lang in self.languages.values():
            for mismatch in lang.mismatches:
                files.update(f for f in (mismatch.base_file, mismatch.file) if f)
        return files

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_language": self.base_language,
            "has_errors": self.has_errors,
            "impacted_languages": self.impacted_languages,
            "languages": {code: self.languages[code].to_dict() for code in sorted(self.languages)},
            "unused_keys": sorted(self.unused_keys) if self.unused_keys is not None else None,
            "collisions": [c.to_dict() for c in self.collisions],
        }
