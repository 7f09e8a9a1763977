"""Two-layer merge of unit sections."""

from collections.abc import Mapping
from typing import Any


def merge_sections(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Merge overlay on top of base, recursing into nested mappings.

    Keys only in base are kept, keys in both take the overlay value unless
    both values are mappings, in which case they are merged the same way.
    Neither input is modified. Key order is base order followed by keys
    new in overlay.

    Example:
        >>> merge_sections({"Service": {"Nice": 10, "Type": "simple"}},
        ...                {"Service": {"Type": "exec"}})
        {'Service': {'Nice': 10, 'Type': 'exec'}}
    """
    merged: dict[str, Any] = {}

    for key, value in base.items():
        merged[key] = _copy(value)

    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_sections(current, value)
        else:
            merged[key] = _copy(value)

    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return merge_sections(value, {})
    if isinstance(value, list):
        return [_copy(item) for item in value]
    return value
