"""
Session statistics: overall and per-club averages over a list of shots.

Averages only count shots that actually report the metric. A metric no shot
reports averages to 0.0, and an empty shot list produces no statistics at all.
"""
from typing import Dict, Iterable, List

import numpy as np

from .clubs import club_sort_key

# (output key, Shot attribute) for the session-wide averages
SESSION_AVERAGES = (
    ('avgCarryDistance', 'carry_distance'),
    ('avgTotalDistance', 'total_distance'),
    ('avgBallSpeed', 'ball_speed'),
)

# The same averages, under the shorter keys used per club
CLUB_AVERAGES = (
    ('avgCarry', 'carry_distance'),
    ('avgTotal', 'total_distance'),
    ('avgBallSpeed', 'ball_speed'),
)


def round_half_up(value: float) -> float:
    """Rounds to one decimal place with halves going up: 12.25 -> 12.3, -12.25 -> -12.2."""
    return float(np.floor(value * 10.0 + 0.5) / 10.0)


def average(shots: Iterable, attribute: str) -> float:
    values = [value for value in (getattr(shot, attribute) for shot in shots) if value is not None]
    if not values:
        return 0.0
    return round_half_up(np.mean(np.asarray(values, dtype=float)))


def group_by_club(shots: Iterable) -> Dict[str, List]:
    """Shots grouped by club label, in bag order. Shots without a club are left out."""
    groups = {}
    for shot in shots:
        if shot.club:
            groups.setdefault(shot.club, []).append(shot)
    return {club: groups[club] for club in sorted(groups, key=club_sort_key)}


def compute_session_statistics(shots: Iterable) -> Dict:
    shots = list(shots)
    if not shots:
        return {}

    stats = {'totalShots': len(shots)}
    for key, attribute in SESSION_AVERAGES:
        stats[key] = average(shots, attribute)

    by_club = group_by_club(shots)
    stats['clubCounts'] = {club: len(club_shots) for club, club_shots in by_club.items()}
    stats['clubStats'] = {
        club: {key: average(club_shots, attribute) for key, attribute in CLUB_AVERAGES}
        for club, club_shots in by_club.items()
    }
    return stats
