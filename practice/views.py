"""
JSON API for practice sessions.
Each view does request parsing only; the work happens in importers.py and
services.py, and errors are turned into HTTP responses by api_errors.
"""
import json
import logging
from functools import wraps

from django.core.paginator import Paginator
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from . import conf, services
from .exceptions import (
    FileProcessingError,
    FileTooLargeError,
    InvalidFileFormatError,
    ResourceNotFoundError,
    ValidationError,
)
from .importers import SessionImporter
from .models import SourceType
from .responses import (
    api_error,
    api_success,
    pagination_info,
    session_to_dict,
    shot_to_dict,
)

logger = logging.getLogger(__name__)


def api_errors(view):
    """Maps practice errors onto HTTP status codes."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except ResourceNotFoundError as e:
            logger.warning("Resource not found: %s", e.message)
            return api_error(request, e.message, e.error_code, 404)
        except ValidationError as e:
            logger.warning("Validation error: %s", e.message)
            return api_error(request, e.message, e.error_code, 400, field_errors=e.field_errors)
        except InvalidFileFormatError as e:
            logger.warning("Invalid file format: %s", e.message)
            return api_error(request, e.message, e.error_code, 400)
        except FileTooLargeError as e:
            logger.warning("File upload size exceeded: %s", e.message)
            return api_error(request, e.message, e.error_code, 413)
        except FileProcessingError as e:
            logger.error("File processing error: %s", e.message, exc_info=True)
            return api_error(request, e.message, e.error_code, 500)
        except Exception:
            logger.exception("Unexpected error handling %s %s", request.method, request.path)
            return api_error(request, "An unexpected error occurred", 'INTERNAL_SERVER_ERROR', 500)
    return wrapper


def _positive_int(value, default, name, maximum=None):
    if value in (None, ''):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}", field_errors={name: "Must be a positive integer"})
    if number < 1:
        raise ValidationError(f"Invalid {name}", field_errors={name: "Must be a positive integer"})
    if maximum is not None:
        number = min(number, maximum)
    return number


def _json_body(request):
    if not request.body:
        return {}
    try:
        body = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _parse_session_date(value):
    if value is None:
        return None
    parsed = parse_datetime(str(value))
    if parsed is None:
        raise ValidationError(
            "Invalid session date",
            field_errors={'sessionDate': "Use ISO 8601, e.g. 2024-01-15T09:00:00"},
        )
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


# --- Sessions ---

@require_GET
@api_errors
def session_list_view(request):
    """Paginated session summaries, newest first."""
    page_number = _positive_int(request.GET.get('page'), 1, 'page')
    size = _positive_int(request.GET.get('size'), conf.page_size(), 'size', maximum=conf.max_page_size())

    paginator = Paginator(services.list_sessions(), size)
    page = paginator.get_page(page_number)
    summaries = [services.summarize_session(session) for session in page.object_list]
    return api_success(
        request, summaries, "Sessions retrieved successfully", pagination=pagination_info(page)
    )


@csrf_exempt
@require_POST
@api_errors
def upload_session_view(request):
    """Handle a CSV upload and create a session from it."""
    if 'file' not in request.FILES:
        raise InvalidFileFormatError("No file uploaded")

    uploaded_file = request.FILES['file']
    source = (request.POST.get('source') or SourceType.GARMIN_R10).strip().upper()

    importer = SessionImporter()
    session = importer.ingest(
        uploaded_file,
        request.POST.get('title', ''),
        request.POST.get('location', ''),
        source,
    )

    data = session_to_dict(session, include_shots=True)
    data['importReport'] = importer.report.as_dict()
    return api_success(request, data, "Session created successfully", status=201)


@csrf_exempt
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
@api_errors
def session_detail_view(request, session_id):
    if request.method == 'GET':
        session = services.get_session(session_id)
        return api_success(request, session_to_dict(session, include_shots=True), "Session retrieved successfully")

    if request.method == 'DELETE':
        services.delete_session(session_id)
        return api_success(request, None, "Session deleted successfully")

    # PUT / PATCH: metadata only
    body = _json_body(request)
    session = services.update_session(
        session_id,
        title=body.get('title'),
        location=body.get('location'),
        session_date=_parse_session_date(body.get('sessionDate')),
    )
    return api_success(request, session_to_dict(session), "Session updated successfully")


@require_GET
@api_errors
def session_shots_view(request, session_id):
    """Shots for one session in shot order, optionally for a single club."""
    club = request.GET.get('club')
    if club:
        shots = services.get_club_shots(session_id, club)
    else:
        shots = services.get_session_shots(session_id)
    return api_success(request, [shot_to_dict(shot) for shot in shots], "Shots retrieved successfully")


@require_GET
@api_errors
def session_stats_view(request, session_id):
    stats = services.get_session_stats(session_id)
    message = "Statistics retrieved successfully" if stats else "No statistics available"
    return api_success(request, stats, message)


@require_GET
@api_errors
def session_search_view(request):
    sessions = services.search_sessions(
        title=request.GET.get('title', '').strip(),
        location=request.GET.get('location', '').strip(),
    )
    summaries = [services.summarize_session(session) for session in sessions]
    return api_success(request, summaries, f"Found {len(summaries)} session(s)")
