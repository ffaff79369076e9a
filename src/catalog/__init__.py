"""Catalog loading and flattening."""

from .flatten import flatten
from .loader import CatalogLoader
from .models import Catalog, FileIndex, KeyCollision, LanguageCatalog, LoadedCatalog

__all__ = [
    "Catalog",
    "CatalogLoader",
    "FileIndex",
    "KeyCollision",
    "LanguageCatalog",
    "LoadedCatalog",
    "flatten",
]
