"""App settings with their defaults. Override any of them in the project settings."""
from django.conf import settings

DEFAULT_ALLOWED_CONTENT_TYPES = (
    'text/csv',
    'application/vnd.ms-excel',
    'application/csv',
    'text/plain',
)


def max_upload_size():
    return getattr(settings, 'PRACTICE_MAX_UPLOAD_SIZE', 10 * 1024 * 1024)


def allowed_content_types():
    return tuple(getattr(settings, 'PRACTICE_ALLOWED_CONTENT_TYPES', DEFAULT_ALLOWED_CONTENT_TYPES))


def page_size():
    return getattr(settings, 'PRACTICE_PAGE_SIZE', 20)


def max_page_size():
    return getattr(settings, 'PRACTICE_MAX_PAGE_SIZE', 100)
