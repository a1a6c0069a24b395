"""
Header adapter.

Converts between ordered (name, value) pairs and the envelope's
headers / multiValueHeaders mappings. Names are compared as exact strings.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

HeaderPairs = List[Tuple[str, str]]


def group_headers(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """
    Group pairs by name, keeping every value in arrival order.
    """
    grouped: Dict[str, List[str]] = {}
    for name, value in pairs:
        grouped.setdefault(name, []).append(value)
    return grouped


def flatten_headers(mapping: Mapping[str, Sequence[str]]) -> HeaderPairs:
    """
    Expand a multi-valued mapping back into pairs.
    """
    return [(name, value) for name, values in mapping.items() for value in values]


def to_envelope_headers(
    pairs: Iterable[Tuple[str, str]],
) -> Tuple[Dict[str, str], Dict[str, List[str]]]:
    """
    Build the envelope header maps from pairs.

    Returns:
        (headers, multiValueHeaders). headers holds the last value seen for
        each name, as API Gateway populates it; multiValueHeaders holds all of them.
    """
    multi = group_headers(pairs)
    single = {name: values[-1] for name, values in multi.items()}
    return single, multi


def from_envelope_headers(
    headers: Optional[Mapping[str, str]],
    multi_value_headers: Optional[Mapping[str, Sequence[str]]] = None,
) -> HeaderPairs:
    """
    Merge the envelope header maps into pairs.

    Follows API Gateway's merge rule: all multiValueHeaders values are kept,
    and a headers entry is added unless that exact name/value pair is already present.
    """
    merged: Dict[str, List[str]] = {
        name: list(values) for name, values in (multi_value_headers or {}).items()
    }
    for name, value in (headers or {}).items():
        values = merged.setdefault(name, [])
        if value not in values:
            values.append(value)
    return flatten_headers(merged)
