from practice.models import Shot
from practice.stats import compute_session_statistics, round_half_up


def make_shot(club="Driver", carry=None, total=None, ball_speed=None):
    return Shot(club=club, carry_distance=carry, total_distance=total, ball_speed=ball_speed)


def test_empty_shot_list_has_no_statistics():
    assert compute_session_statistics([]) == {}


def test_missing_values_are_excluded_from_averages():
    shots = [make_shot(carry=200.0), make_shot(carry=210.0), make_shot(carry=None)]

    stats = compute_session_statistics(shots)

    assert stats["totalShots"] == 3
    assert stats["avgCarryDistance"] == 205.0


def test_metric_nobody_reports_averages_to_zero():
    stats = compute_session_statistics([make_shot(carry=200.0)])
    assert stats["avgTotalDistance"] == 0.0
    assert stats["avgBallSpeed"] == 0.0


def test_per_club_counts_and_averages():
    shots = [
        make_shot(club="Driver", ball_speed=150),
        make_shot(club="Driver", ball_speed=152),
        make_shot(club="7 Iron", ball_speed=120),
    ]

    stats = compute_session_statistics(shots)

    assert stats["clubCounts"] == {"Driver": 2, "7 Iron": 1}
    assert stats["clubStats"]["Driver"]["avgBallSpeed"] == 151.0
    assert stats["clubStats"]["7 Iron"]["avgBallSpeed"] == 120.0
    assert stats["clubStats"]["7 Iron"]["avgCarry"] == 0.0
    assert stats["avgBallSpeed"] == 140.7


def test_shots_without_a_club_count_only_toward_the_session():
    shots = [make_shot(club="", carry=100.0), make_shot(club="PW", carry=110.0)]

    stats = compute_session_statistics(shots)

    assert stats["totalShots"] == 2
    assert stats["avgCarryDistance"] == 105.0
    assert stats["clubCounts"] == {"PW": 1}


def test_clubs_are_listed_in_bag_order():
    shots = [make_shot(club=club) for club in ["PW", "7 Iron", "Driver", "3 Wood"]]
    stats = compute_session_statistics(shots)
    assert list(stats["clubCounts"]) == ["Driver", "3 Wood", "7 Iron", "PW"]


def test_rounding_is_half_up_to_one_decimal():
    assert round_half_up(12.25) == 12.3
    assert round_half_up(12.24) == 12.2
    assert round_half_up(-12.25) == -12.2
    assert round_half_up(205.0) == 205.0


def test_averages_are_rounded():
    shots = [make_shot(carry=200.0), make_shot(carry=200.0), make_shot(carry=201.0)]
    assert compute_session_statistics(shots)["avgCarryDistance"] == 200.3
