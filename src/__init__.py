"""Translation catalog consistency checker."""

__version__ = "0.3.0"
