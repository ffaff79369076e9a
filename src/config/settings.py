"""Checker settings model."""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SOURCE_EXTENSIONS = [".ts", ".html", ".js", ".py"]
DEFAULT_EXCLUDE_DIRS = ["node_modules", ".git", "dist", "build", "__pycache__"]


class Settings(BaseModel):
    """Settings for one checker run."""

    model_config = ConfigDict(extra="forbid")

    translations_dir: Path = Field(
        default=Path("src/assets/i18n"),
        description="Directory holding one sub-directory per language",
    )
    base_lang: str = Field(default="fr", min_length=1, description="Reference language code")
    file_pattern: str = Field(default="*.json", description="Glob matched inside each language folder")

    source_dirs: List[Path] = Field(default_factory=list)
    source_extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_SOURCE_EXTENSIONS))
    exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    check_unused: bool = False

    on_malformed: Literal["abort", "skip"] = "abort"
    max_workers: Optional[int] = Field(default=None, ge=1)
    json_output: Optional[Path] = None
    debug: bool = False

    @field_validator("source_extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Accept extensions with or without the leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip()
            if not ext:
                raise ValueError("Empty source extension")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @model_validator(mode="after")
    def check_unused_needs_sources(self) -> "Settings":
        if self.check_unused and not self.source_dirs:
            raise ValueError("check_unused requires at least one source directory")
        return self
