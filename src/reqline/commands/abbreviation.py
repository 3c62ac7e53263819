"""
Unique abbreviations for sibling command names.

Each name in a namespace may be shortened to any prefix no other sibling
shares. The shortest such prefix is the name's abbreviation, and the rest of
the name is rendered in brackets as the part the user may leave off:

    >>> display_pattern(abbreviation_for({"fragment-set", "fragment-unset"},
    ...                                  "fragment-set"), "fragment-set")
    'fragment-s[et]'
"""

from typing import Dict, Iterable, List


def _unique_prefixes(names: List[str]) -> Dict[str, str]:
    """Map every prefix shared by exactly one name to that name."""
    seen: Dict[str, int] = {}
    owner: Dict[str, str] = {}
    for name in names:
        for length in range(1, len(name) + 1):
            prefix = name[:length]
            seen[prefix] = seen.get(prefix, 0) + 1
            owner[prefix] = name

    table = {prefix: owner[prefix] for prefix, count in seen.items() if count == 1}
    # A name that is a prefix of a sibling can only be typed in full
    for name in names:
        table[name] = name
    return table


def abbreviations(names: Iterable[str]) -> Dict[str, str]:
    """
    Compute the abbreviation of every name in a set of siblings.

    Args:
        names: Sibling names; duplicates and empty names are ignored

    Returns:
        Mapping of each name to its shortest unique prefix
    """
    unique_names = sorted({name for name in names if name})
    candidates: Dict[str, List[str]] = {}
    for prefix, name in _unique_prefixes(unique_names).items():
        candidates.setdefault(name, []).append(prefix)
    return {name: sorted(prefixes)[0] for name, prefixes in candidates.items()}


def abbreviation_for(names: Iterable[str], target: str) -> str:
    """Return the abbreviation of ``target`` among ``names``."""
    all_names = set(names)
    all_names.add(target)
    return abbreviations(all_names)[target]


def display_pattern(abbreviation: str, name: str) -> str:
    """Render ``name`` with the part after ``abbreviation`` in brackets."""
    if not name.startswith(abbreviation):
        raise ValueError(f"{abbreviation!r} is not a prefix of {name!r}")
    suffix = name[len(abbreviation):]
    if not suffix:
        return abbreviation
    return f"{abbreviation}[{suffix}]"

