"""
Launch Monitor Row Parsers
Turns individual CSV rows from Garmin R10 and Awesome Golf exports into
unsaved Shot instances, plus the small value normalizers they share.
"""
import logging
import re
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from django.utils import timezone

from .fields import AWESOME_GOLF_HEADERS, GARMIN_R10_HEADERS, ShotField, resolve_headers
from .models import Shot, SourceType

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Largest value a PositiveIntegerField column can hold
MAX_SHOT_NUMBER = 2147483647

# Anything that is not an ASCII digit, decimal point or minus sign.
_NON_NUMERIC = re.compile(r'[^0-9.\-]')

_HTML_ESCAPES = str.maketrans({
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#x27;',
    '/': '&#x2F;',
})


def parse_number(value: str) -> float:
    """
    Parses a numeric token, dropping units and thousands separators first.

    "1,234.5 mph" -> 1234.5. Raises ValueError when nothing parseable is left
    (empty input, "--", "N/A", ...).
    """
    cleaned = _NON_NUMERIC.sub('', value or '')
    if not cleaned:
        raise ValueError(f"Not a number: {value!r}")
    return float(cleaned)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parses 'YYYY-MM-DD HH:MM:SS' in the current time zone, or returns None."""
    try:
        parsed = datetime.strptime(value.strip(), TIMESTAMP_FORMAT)
    except (ValueError, AttributeError):
        return None
    return timezone.make_aware(parsed)


def sanitize_input(value: Optional[str]) -> str:
    """Trims text and escapes the characters that matter to HTML."""
    if value is None:
        return ''
    return value.strip().translate(_HTML_ESCAPES)


def parse_shot_number(value: str) -> int:
    number = parse_number(value)
    if not number.is_integer() or not 0 <= number <= MAX_SHOT_NUMBER:
        raise ValueError(f"Not a shot number: {value!r}")
    return int(number)


class RowResult(NamedTuple):
    """Outcome of one row: a shot, or None and the reason the row was skipped."""
    shot: Optional[Shot]
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.shot is not None


class LaunchMonitorParser:
    """
    Base row parser. The header row is resolved against the vendor's synonym
    table once, when the parser is built; every data row reuses that mapping.
    """
    source_type: str = ''
    header_table: Dict[str, ShotField] = {}

    def __init__(self, headers: Sequence[str]):
        self.headers = [header.strip() for header in headers]
        self.columns = resolve_headers(self.headers, self.header_table)
        self.warnings = []

    @property
    def unmapped_headers(self) -> List[str]:
        return [
            header for header, field in zip(self.headers, self.columns)
            if field is None and header
        ]

    def parse_row(self, values: Sequence[str], row_num: Optional[int] = None) -> RowResult:
        raise NotImplementedError

    def _warn(self, row_num: Optional[int], message: str):
        if row_num is not None:
            message = f"Row {row_num}: {message}"
        self.warnings.append(message)
        logger.warning(message)

    @staticmethod
    def _convert(field: ShotField, value: str):
        """Converts a non-empty token to the Python value stored under field."""
        if field.is_text:
            return sanitize_input(value)
        if field is ShotField.SHOT_NUMBER:
            return parse_shot_number(value)
        if field is ShotField.SHOT_TIME:
            parsed = parse_timestamp(value)
            if parsed is None:
                raise ValueError(f"Not a timestamp: {value!r}")
            return parsed
        return parse_number(value)

    @staticmethod
    def _assign(shot: Shot, field: ShotField, value):
        # Spin reading is a text-only column with no place on the shot record.
        if field is ShotField.SPIN_READING:
            return
        setattr(shot, field.value, value)


class GarminR10Parser(LaunchMonitorParser):
    """
    Garmin R10 exports have a single labelled header row; each value is
    located by the canonical field its header resolved to.
    """
    source_type = SourceType.GARMIN_R10
    header_table = GARMIN_R10_HEADERS

    def parse_row(self, values: Sequence[str], row_num: Optional[int] = None) -> RowResult:
        if len(values) != len(self.headers):
            return RowResult(
                None,
                f"Malformed row: expected {len(self.headers)} columns, found {len(values)}",
            )

        shot = Shot()
        for field, raw in zip(self.columns, values):
            value = raw.strip()
            if field is None or not value:
                continue
            try:
                self._assign(shot, field, self._convert(field, value))
            except ValueError:
                # Leave just this field unset and keep going with the row
                logger.debug("Could not parse value for '%s': %s", field.value, value)
        return RowResult(shot)


# Awesome Golf column positions. Column 0 is the shot timestamp and column 23
# ("Spin Reading") is text only, so neither appears here. Horizontal launch
# also feeds launch direction; face target also feeds face angle.
AWESOME_GOLF_COLUMNS: Tuple[Tuple[int, Tuple[ShotField, ...]], ...] = (
    (1, (ShotField.CLUB,)),
    (2, (ShotField.CLUB_DESCRIPTION,)),
    (3, (ShotField.ALTITUDE,)),
    (4, (ShotField.CLUB_HEAD_SPEED,)),
    (5, (ShotField.BALL_SPEED,)),
    (6, (ShotField.CARRY_DISTANCE,)),
    (7, (ShotField.TOTAL_DISTANCE,)),
    (8, (ShotField.ROLL_DISTANCE,)),
    (9, (ShotField.SMASH,)),
    (10, (ShotField.LAUNCH_ANGLE,)),
    (11, (ShotField.PEAK_HEIGHT,)),
    (12, (ShotField.DESCENT_ANGLE,)),
    (13, (ShotField.HORIZONTAL_LAUNCH, ShotField.LAUNCH_DIRECTION)),
    (14, (ShotField.CARRY_LATERAL_DISTANCE,)),
    (15, (ShotField.TOTAL_LATERAL_DISTANCE,)),
    (16, (ShotField.CARRY_CURVE_DISTANCE,)),
    (17, (ShotField.TOTAL_CURVE_DISTANCE,)),
    (18, (ShotField.ATTACK_ANGLE,)),
    (19, (ShotField.DYNAMIC_LOFT,)),
    (20, (ShotField.SPIN_LOFT,)),
    (21, (ShotField.SPIN_RATE,)),
    (22, (ShotField.SPIN_AXIS,)),
    (24, (ShotField.LOW_POINT,)),
    (25, (ShotField.SWING_PATH,)),
    (26, (ShotField.FACE_TO_PATH,)),
    (27, (ShotField.FACE_ANGLE, ShotField.FACE_TARGET)),
    (28, (ShotField.SWING_PLANE_TILT,)),
    (29, (ShotField.SWING_PLANE_ROTATION,)),
    (30, (ShotField.SHOT_CLASSIFICATION,)),
)


class AwesomeGolfParser(LaunchMonitorParser):
    """
    Awesome Golf exports are read strictly by column position. The header row
    only sets how many columns a data row must have.
    """
    source_type = SourceType.AWESOME_GOLF
    header_table = AWESOME_GOLF_HEADERS
    columns_by_position = AWESOME_GOLF_COLUMNS

    def parse_row(self, values: Sequence[str], row_num: Optional[int] = None) -> RowResult:
        if len(values) < len(self.headers):
            return RowResult(
                None,
                f"Malformed row: expected at least {len(self.headers)} columns, found {len(values)}",
            )

        shot = Shot()

        # Column 0: shot date/time. A bad timestamp does not reject the row.
        timestamp = values[0].strip() if values else ''
        if timestamp:
            shot.shot_time = parse_timestamp(timestamp)
            if shot.shot_time is None:
                self._warn(row_num, f"Failed to parse shot time: {timestamp}")

        try:
            for index, fields in self.columns_by_position:
                if len(values) <= index:
                    continue
                value = values[index].strip()
                if not value:
                    continue
                converted = self._convert(fields[0], value)
                for field in fields:
                    self._assign(shot, field, converted)
        except ValueError as e:
            # The rest of this row's columns are dropped; what was read is kept
            self._warn(row_num, f"Error parsing numeric value in Awesome Golf shot: {e}")

        return RowResult(shot)
