"""
Session Importer
Validates an uploaded launch monitor CSV, runs every data row through the
vendor's row parser and stores the resulting Session and Shots in one
transaction.

Row-level problems (wrong column count, bad values, bad timestamps) are
logged and counted in the ImportReport; they never stop the import. Only a
rejected file, bad session metadata, a file with no usable shots, or a
storage failure reach the caller.
"""
import csv
import logging
import re
from typing import Dict, Iterator, List, Optional, Tuple

from django.db import DatabaseError, transaction
from django.utils import timezone

from . import conf
from .exceptions import (
    FileProcessingError,
    FileTooLargeError,
    InvalidFileFormatError,
    ValidationError,
)
from .models import Session, Shot, SourceType
from .parsers import AwesomeGolfParser, GarminR10Parser, LaunchMonitorParser, sanitize_input

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a row; other control characters stay in the field
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

MAX_TITLE_LENGTH = 255
MAX_LOCATION_LENGTH = 255


class ImportReport:
    """What happened to the rows of one import."""

    def __init__(self, source_type: str, file_name: str = ''):
        self.source_type = source_type
        self.file_name = file_name
        self.shots_created = 0
        self.rows_skipped = 0
        self.warnings = []
        self.unmapped_headers = []

    def skip(self, row_num: int, reason: str):
        self.rows_skipped += 1
        self.warnings.append(f"Row {row_num}: {reason}")

    def as_dict(self) -> Dict:
        return {
            'sourceType': self.source_type,
            'fileName': self.file_name,
            'shotsCreated': self.shots_created,
            'rowsSkipped': self.rows_skipped,
            'warnings': list(self.warnings),
            'unmappedHeaders': list(self.unmapped_headers),
        }


def is_valid_csv_file(upload) -> bool:
    """Both the file name and the declared content type must say CSV."""
    file_name = getattr(upload, 'name', None)
    if not file_name or not file_name.lower().endswith('.csv'):
        return False
    content_type = getattr(upload, 'content_type', None)
    return content_type is not None and content_type in conf.allowed_content_types()


def split_lines(content: str) -> List[str]:
    return _LINE_BREAK.split(content)


def split_line(line: str) -> List[str]:
    return next(csv.reader([line]))


class SessionImporter:
    """
    Imports one file per call. The report of the most recent call is kept on
    ``self.report`` whether the import succeeded or not.
    """

    def __init__(self):
        self.report: Optional[ImportReport] = None

    def ingest(self, upload, title: str, location: Optional[str], source_type: str) -> Session:
        try:
            source_type = SourceType(source_type)
        except ValueError:
            raise ValidationError(
                f"Unsupported source type: {source_type}",
                field_errors={'source': f"Must be one of: {', '.join(SourceType.values)}"},
            )

        self.report = ImportReport(source_type, getattr(upload, 'name', '') or '')

        # The upload is closed on every way out of validation and reading
        try:
            self._validate_file(upload)
            clean_title, clean_location = self._clean_metadata(title, location)
            content = self._read(upload)
        finally:
            if upload is not None:
                upload.close()

        session = Session(
            title=clean_title,
            location=clean_location,
            upload_date=timezone.now(),
            source_type=source_type,
        )

        lines = split_lines(content)
        if source_type == SourceType.AWESOME_GOLF:
            shots, session_date = self._parse_awesome_golf(lines)
        else:
            shots, session_date = self._parse_garmin_r10(lines)

        if not shots:
            logger.warning(
                "Rejected %s import of %s: no valid shots (%d rows skipped)",
                source_type, self.report.file_name, self.report.rows_skipped,
            )
            raise ValidationError("No valid shots found in the CSV file")

        session.session_date = session_date or timezone.now()
        session = self._persist(session, shots)

        self.report.shots_created = len(shots)
        logger.info(
            "Imported session %s from %s: %d shots, %d rows skipped",
            session.pk, self.report.file_name, len(shots), self.report.rows_skipped,
        )
        return session

    # --- Validation ---

    def _validate_file(self, upload):
        if upload is None or not getattr(upload, 'size', 0):
            raise InvalidFileFormatError("File is empty")

        if upload.size > conf.max_upload_size():
            raise FileTooLargeError("File size exceeds maximum allowed size")

        if not is_valid_csv_file(upload):
            raise InvalidFileFormatError("Invalid file format. Please upload a CSV file")

    def _clean_metadata(self, title, location) -> Tuple[str, str]:
        clean_title = sanitize_input(title)
        clean_location = sanitize_input(location)

        if not clean_title:
            raise ValidationError("Title cannot be empty", field_errors={'title': "Title is required"})
        if len(clean_title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                "Title is too long",
                field_errors={'title': f"Title must be between 1 and {MAX_TITLE_LENGTH} characters"},
            )
        if len(clean_location) > MAX_LOCATION_LENGTH:
            raise ValidationError(
                "Location is too long",
                field_errors={'location': f"Location must be less than {MAX_LOCATION_LENGTH} characters"},
            )
        return clean_title, clean_location

    def _read(self, upload) -> str:
        if hasattr(upload, 'seek'):
            upload.seek(0)
        raw = upload.read()
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError:
            raise InvalidFileFormatError("File encoding error. Please ensure file is UTF-8 encoded")

    # --- Row processing ---

    def _non_blank(self, lines: List[str], start: int = 1) -> Iterator[Tuple[int, str]]:
        for row_num, line in enumerate(lines, start=start):
            if line.strip():
                yield row_num, line

    def _parse_rows(self, parser: LaunchMonitorParser, rows: Iterator[Tuple[int, str]]) -> Iterator[Shot]:
        """Yields a shot for every row the parser accepts; everything else is skipped."""
        for row_num, line in rows:
            try:
                result = parser.parse_row(split_line(line), row_num)
            except Exception as e:
                logger.warning("Row %d: Error parsing shot data: %s", row_num, e)
                self.report.skip(row_num, f"Error parsing shot data: {e}")
                continue

            if not result.ok:
                logger.warning("Row %d: Skipping %s", row_num, result.reason)
                self.report.skip(row_num, result.reason)
                continue

            yield result.shot

    def _parse_garmin_r10(self, lines: List[str]):
        """The first non-blank line is the header; shot numbers come from the file, if at all."""
        rows = self._non_blank(lines)
        header = next(rows, None)
        if header is None:
            return [], None

        parser = GarminR10Parser(split_line(header[1]))
        self.report.unmapped_headers = parser.unmapped_headers

        shots = list(self._parse_rows(parser, rows))
        self.report.warnings.extend(parser.warnings)
        return shots, None

    def _parse_awesome_golf(self, lines: List[str]):
        """
        Line 1 holds the column labels and sets the expected column count;
        line 2 is the units row and is skipped. Shots are numbered 1..N in
        file order and the session date is the earliest shot time.
        """
        if not lines:
            return [], None

        parser = AwesomeGolfParser(split_line(lines[0]))
        self.report.unmapped_headers = parser.unmapped_headers

        shots = []
        earliest_shot_time = None
        for shot in self._parse_rows(parser, self._non_blank(lines[2:], start=3)):
            shot.shot_number = len(shots) + 1
            shots.append(shot)

            if shot.shot_time is not None:
                if earliest_shot_time is None or shot.shot_time < earliest_shot_time:
                    earliest_shot_time = shot.shot_time

        self.report.warnings.extend(parser.warnings)
        return shots, earliest_shot_time

    # --- Storage ---

    def _persist(self, session: Session, shots: List[Shot]) -> Session:
        try:
            with transaction.atomic():
                session.save()
                for shot in shots:
                    shot.session = session
                Shot.objects.bulk_create(shots)
        except DatabaseError as e:
            logger.exception("Failed to save session %r", session.title)
            raise FileProcessingError("Failed to process CSV file") from e
        return session


def ingest_header_driven_format(upload, title, location=None) -> Session:
    """Imports a Garmin R10 export."""
    return SessionImporter().ingest(upload, title, location, SourceType.GARMIN_R10)


def ingest_positional_format(upload, title, location=None) -> Session:
    """Imports an Awesome Golf export."""
    return SessionImporter().ingest(upload, title, location, SourceType.AWESOME_GOLF)
