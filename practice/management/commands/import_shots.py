"""
Imports a launch monitor CSV from disk:

    python manage.py import_shots export.csv --title "Range day" --source AWESOME_GOLF
"""
import mimetypes
from pathlib import Path

from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management.base import BaseCommand, CommandError

from practice.exceptions import GolfLogError
from practice.importers import SessionImporter
from practice.models import SourceType


class Command(BaseCommand):
    help = "Import a Garmin R10 or Awesome Golf CSV export as a new session."

    def add_arguments(self, parser):
        parser.add_argument('path', help="CSV file to import")
        parser.add_argument('--title', required=True)
        parser.add_argument('--location', default='')
        parser.add_argument(
            '--source',
            default=SourceType.GARMIN_R10,
            type=str.upper,
            choices=SourceType.values,
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f"File not found: {path}")

        content_type = mimetypes.guess_type(path.name)[0] or 'text/csv'
        upload = SimpleUploadedFile(path.name, path.read_bytes(), content_type=content_type)

        importer = SessionImporter()
        try:
            session = importer.ingest(upload, options['title'], options['location'], options['source'])
        except GolfLogError as e:
            raise CommandError(e.message)
        finally:
            if importer.report is not None:
                for warning in importer.report.warnings:
                    self.stderr.write(warning)

        report = importer.report
        self.stdout.write(self.style.SUCCESS(
            f"Created session {session.pk} '{session.title}' with {report.shots_created} shots "
            f"({report.rows_skipped} rows skipped)"
        ))
