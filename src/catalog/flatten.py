"""Flatten nested translation documents into dot-path keys."""

from typing import Any, Dict, List, Optional


def flatten(
    tree: Any,
    prefix: str = "",
    output: Optional[Dict[str, str]] = None,
    duplicates: Optional[List[str]] = None,
) -> Dict[str, str]:
    """Flatten a parsed JSON document into ``{"a.b.c": "text"}``.

    Only string leaves are kept. Numbers, booleans, nulls and arrays are
    skipped, so a document without string leaves yields an empty mapping.

    Args:
        tree: Parsed JSON value
        prefix: Path accumulated so far
        output: Mapping to fill (a new one is created when omitted)
        duplicates: Receives every key written over an existing one, e.g.
            ``{"a.b": ..., "a": {"b": ...}}``; the later value is kept

    Returns:
        The filled mapping
    """
    if output is None:
        output = {}

    if isinstance(tree, dict):
        for key, value in tree.items():
            new_key = f"{prefix}.{key}" if prefix else key
            flatten(value, new_key, output, duplicates)
    elif isinstance(tree, str):
        if duplicates is not None and prefix in output:
            duplicates.append(prefix)
        output[prefix] = tree

    return output
