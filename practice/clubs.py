"""
Club ordering. Launch monitors label clubs inconsistently ("Driver", "7 Iron",
"7i", "PW", "56 Degree"...), so the order is worked out from the label.
"""
import re

_NUMBER = re.compile(r'\d+')

_WEDGE_ORDER = {
    'pitching': 20, 'pw': 20,
    'gap': 21, 'approach': 21, 'gw': 21, 'aw': 21,
    'sand': 22, 'sw': 22,
    'lob': 23, 'lw': 23,
}


def _first_number(label):
    match = _NUMBER.search(label)
    return int(match.group()) if match else None


def club_sort_order(club_name):
    """
    Numeric position of a club in a standard bag, Driver first. Unknown
    labels sort last.
    """
    name = club_name.strip().lower()
    number = _first_number(name)

    if 'driver' in name or name in ('dr', '1w'):
        return 1

    # Woods: "3 Wood", "3W"
    if 'wood' in name or re.fullmatch(r'\d+\s*w', name):
        return {3: 2, 5: 3, 7: 4}.get(number, 5)

    # Hybrids (6-9): "4 Hybrid", "4H"
    if 'hybrid' in name or re.fullmatch(r'\d+\s*h', name):
        if number is None:
            return 9
        return 4 + min(max(number, 2), 5)

    # Irons (10-18): "7 Iron", "7i"
    if 'iron' in name or re.fullmatch(r'\d+\s*i', name):
        if number is None or number > 9:
            return 18
        return 8 + max(number, 2)

    # Wedges (20-24) by name or abbreviation, then by loft
    for key, order in _WEDGE_ORDER.items():
        if name == key or name.startswith(key + ' '):
            return order
    if 'wedge' in name or 'degree' in name or '°' in name:
        if number is None:
            return 24
        if number <= 52:
            return 21
        if number <= 56:
            return 22
        return 23

    if 'putter' in name:
        return 50

    return 100


def club_sort_key(club_name):
    """Sort key for club labels: bag order, then alphabetical."""
    return club_sort_order(club_name), club_name
