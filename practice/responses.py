"""
JSON envelope shared by every API response, plus the model-to-dict helpers.

    {"success": true, "message": "...", "data": ..., "timestamp": "...", "path": "/api/sessions/"}
"""
from django.http import JsonResponse
from django.utils import timezone

from .models import Shot


def _camel(name):
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def api_success(request, data=None, message=None, status=200, pagination=None):
    body = {
        'success': True,
        'message': message,
        'data': data,
        'timestamp': timezone.now(),
        'path': request.path,
    }
    if pagination is not None:
        body['pagination'] = pagination
    return JsonResponse(body, status=status)


def api_error(request, message, error_code, status, field_errors=None):
    body = {
        'success': False,
        'message': message,
        'errorCode': error_code,
        'timestamp': timezone.now(),
        'path': request.path,
    }
    if field_errors:
        body['fieldErrors'] = field_errors
    return JsonResponse(body, status=status)


def pagination_info(page):
    """Pagination block for a django.core.paginator.Page."""
    paginator = page.paginator
    return {
        'page': page.number,
        'size': paginator.per_page,
        'totalElements': paginator.count,
        'totalPages': paginator.num_pages,
        'first': page.number == 1,
        'last': page.number == paginator.num_pages,
        'hasNext': page.has_next(),
        'hasPrevious': page.has_previous(),
    }


SHOT_FIELDS = [field.name for field in Shot._meta.concrete_fields if field.name != 'session']


def shot_to_dict(shot):
    data = {_camel(name): getattr(shot, name) for name in SHOT_FIELDS}
    data['sessionId'] = shot.session_id
    return data


def session_to_dict(session, include_shots=False):
    data = {
        'id': session.pk,
        'title': session.title,
        'location': session.location,
        'uploadDate': session.upload_date,
        'sessionDate': session.session_date,
        'sourceType': session.source_type,
        'shotCount': session.shots.count(),
    }
    if include_shots:
        data['shots'] = [shot_to_dict(shot) for shot in session.shots.order_by('shot_number', 'id')]
    return data
