"""
Canonical shot fields and the header synonym tables for each launch monitor.

Headers are matched case-insensitively after trimming. Anything not in a
vendor's table is simply left unmapped.
"""
from enum import Enum
from typing import Dict, Iterable, List, Optional


class ShotField(str, Enum):
    """Vendor-agnostic shot attributes. Values are the Shot model field names."""
    SHOT_NUMBER = 'shot_number'
    CLUB = 'club'
    CLUB_DESCRIPTION = 'club_description'
    SHOT_TIME = 'shot_time'
    ALTITUDE = 'altitude'
    BALL_SPEED = 'ball_speed'
    CLUB_HEAD_SPEED = 'club_head_speed'
    LAUNCH_ANGLE = 'launch_angle'
    LAUNCH_DIRECTION = 'launch_direction'
    SPIN_RATE = 'spin_rate'
    SPIN_AXIS = 'spin_axis'
    CARRY_DISTANCE = 'carry_distance'
    TOTAL_DISTANCE = 'total_distance'
    ROLL_DISTANCE = 'roll_distance'
    DEVIATION = 'deviation'
    APEX = 'apex'
    ATTACK_ANGLE = 'attack_angle'
    FACE_ANGLE = 'face_angle'
    FACE_TO_PATH = 'face_to_path'
    SWING_PATH = 'swing_path'
    SWING_PLANE = 'swing_plane'
    VERTICAL_FACE_IMPACT = 'vertical_face_impact'
    HORIZONTAL_FACE_IMPACT = 'horizontal_face_impact'
    SMASH = 'smash'
    PEAK_HEIGHT = 'peak_height'
    DESCENT_ANGLE = 'descent_angle'
    HORIZONTAL_LAUNCH = 'horizontal_launch'
    CARRY_LATERAL_DISTANCE = 'carry_lateral_distance'
    TOTAL_LATERAL_DISTANCE = 'total_lateral_distance'
    CARRY_CURVE_DISTANCE = 'carry_curve_distance'
    TOTAL_CURVE_DISTANCE = 'total_curve_distance'
    DYNAMIC_LOFT = 'dynamic_loft'
    SPIN_LOFT = 'spin_loft'
    LOW_POINT = 'low_point'
    FACE_TARGET = 'face_target'
    SWING_PLANE_TILT = 'swing_plane_tilt'
    SWING_PLANE_ROTATION = 'swing_plane_rotation'
    SPIN_READING = 'spin_reading'
    SHOT_CLASSIFICATION = 'shot_classification'

    @property
    def is_text(self) -> bool:
        return self in TEXT_FIELDS


# Free-text fields are sanitized, never parsed as numbers.
TEXT_FIELDS = frozenset({
    ShotField.CLUB,
    ShotField.CLUB_DESCRIPTION,
    ShotField.SPIN_READING,
    ShotField.SHOT_CLASSIFICATION,
})


def _table(entries: Dict[ShotField, Iterable[str]]) -> Dict[str, ShotField]:
    """Flattens {field: [labels]} into {label: field}."""
    lookup = {}
    for field, labels in entries.items():
        for label in labels:
            lookup[label.strip().lower()] = field
    return lookup


GARMIN_R10_HEADERS = _table({
    ShotField.SHOT_NUMBER: ['shot', 'shot number'],
    ShotField.CLUB: ['club'],
    ShotField.BALL_SPEED: ['ball speed', 'ball speed (mph)'],
    ShotField.CLUB_HEAD_SPEED: ['club head speed', 'club speed', 'club speed (mph)'],
    ShotField.LAUNCH_ANGLE: ['launch angle', 'launch angle (deg)'],
    ShotField.LAUNCH_DIRECTION: ['launch direction', 'launch direction (deg)'],
    ShotField.SPIN_RATE: ['spin rate', 'spin rate (rpm)'],
    ShotField.SPIN_AXIS: ['spin axis', 'spin axis (deg)'],
    ShotField.CARRY_DISTANCE: ['carry', 'carry distance', 'carry distance (yards)'],
    ShotField.TOTAL_DISTANCE: ['total', 'total distance', 'total distance (yards)'],
    ShotField.DEVIATION: ['deviation', 'deviation (ft)'],
    ShotField.APEX: ['apex', 'apex (ft)'],
    ShotField.ATTACK_ANGLE: ['attack angle', 'attack angle (deg)'],
    ShotField.FACE_ANGLE: ['face angle', 'face angle (deg)'],
    ShotField.FACE_TO_PATH: ['face to path', 'face to path (deg)'],
    ShotField.SWING_PATH: ['swing path', 'path', 'path (deg)'],
    ShotField.SWING_PLANE: ['swing plane', 'plane', 'plane (deg)'],
    ShotField.VERTICAL_FACE_IMPACT: ['vertical face impact', 'vertical impact (in)'],
    ShotField.HORIZONTAL_FACE_IMPACT: ['horizontal face impact', 'horizontal impact (in)'],
})

# Awesome Golf exports label columns with bracketed units on the header row.
AWESOME_GOLF_HEADERS = _table({
    ShotField.SHOT_TIME: ['date', 'date/time'],
    ShotField.CLUB: ['club type', 'club'],
    ShotField.CLUB_DESCRIPTION: ['club description'],
    ShotField.ALTITUDE: ['altitude', 'altitude [ft]'],
    ShotField.CLUB_HEAD_SPEED: ['club speed', 'club speed [mph]'],
    ShotField.BALL_SPEED: ['ball speed', 'ball speed [mph]'],
    ShotField.CARRY_DISTANCE: ['carry distance', 'carry distance [yd]'],
    ShotField.TOTAL_DISTANCE: ['total distance', 'total distance [yd]'],
    ShotField.ROLL_DISTANCE: ['roll distance', 'roll distance [yd]'],
    ShotField.SMASH: ['smash', 'smash factor'],
    ShotField.LAUNCH_ANGLE: ['vertical launch', 'vertical launch [deg]'],
    ShotField.PEAK_HEIGHT: ['peak height', 'peak height [ft]'],
    ShotField.DESCENT_ANGLE: ['descent angle', 'descent angle [deg]'],
    ShotField.HORIZONTAL_LAUNCH: ['horizontal launch', 'horizontal launch [deg]'],
    ShotField.CARRY_LATERAL_DISTANCE: ['carry lateral distance', 'carry lateral distance [yd]'],
    ShotField.TOTAL_LATERAL_DISTANCE: ['total lateral distance', 'total lateral distance [yd]'],
    ShotField.CARRY_CURVE_DISTANCE: ['carry curve distance', 'carry curve distance [yd]'],
    ShotField.TOTAL_CURVE_DISTANCE: ['total curve distance', 'total curve distance [yd]'],
    ShotField.ATTACK_ANGLE: ['attack angle', 'attack angle [deg]'],
    ShotField.DYNAMIC_LOFT: ['dynamic loft', 'dynamic loft [deg]'],
    ShotField.SPIN_LOFT: ['spin loft', 'spin loft [deg]'],
    ShotField.SPIN_RATE: ['spin rate', 'spin rate [rpm]'],
    ShotField.SPIN_AXIS: ['spin axis', 'spin axis [deg]'],
    ShotField.SPIN_READING: ['spin reading'],
    ShotField.LOW_POINT: ['low point', 'low point [in]'],
    ShotField.SWING_PATH: ['club path', 'club path [deg]'],
    ShotField.FACE_TO_PATH: ['face path', 'face path [deg]'],
    ShotField.FACE_TARGET: ['face target', 'face target [deg]'],
    ShotField.SWING_PLANE_TILT: ['swing plane tilt', 'swing plane tilt [deg]'],
    ShotField.SWING_PLANE_ROTATION: ['swing plane rotation', 'swing plane rotation [deg]'],
    ShotField.SHOT_CLASSIFICATION: ['shot classification'],
})


def resolve_headers(headers: List[str], table: Dict[str, ShotField]) -> List[Optional[ShotField]]:
    """
    Maps each raw header token to its canonical field, position by position.
    Unknown headers come back as None.
    """
    return [table.get(header.strip().lower()) for header in headers]
