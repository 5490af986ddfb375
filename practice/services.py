"""
Session queries and metadata edits used by the API views and the admin.
Shots are never edited here; they only come from an import.
"""
from .exceptions import ResourceNotFoundError, ValidationError
from .importers import MAX_LOCATION_LENGTH, MAX_TITLE_LENGTH
from .models import Session, Shot
from .parsers import sanitize_input
from .stats import average, compute_session_statistics


def list_sessions():
    """All sessions, newest upload first."""
    return Session.objects.prefetch_related('shots').order_by('-upload_date', '-id')


def get_session(session_id):
    try:
        return Session.objects.get(pk=session_id)
    except Session.DoesNotExist:
        raise ResourceNotFoundError('Session', session_id)


def update_session(session_id, title=None, location=None, session_date=None):
    """Edits title, location and/or session date. Arguments left as None are unchanged."""
    session = get_session(session_id)

    if title is not None:
        clean_title = sanitize_input(title)
        if not clean_title:
            raise ValidationError("Title cannot be empty", field_errors={'title': "Title is required"})
        if len(clean_title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                "Title is too long",
                field_errors={'title': f"Title must be between 1 and {MAX_TITLE_LENGTH} characters"},
            )
        session.title = clean_title

    if location is not None:
        clean_location = sanitize_input(location)
        if len(clean_location) > MAX_LOCATION_LENGTH:
            raise ValidationError(
                "Location is too long",
                field_errors={'location': f"Location must be less than {MAX_LOCATION_LENGTH} characters"},
            )
        session.location = clean_location

    if session_date is not None:
        session.session_date = session_date

    session.save(update_fields=['title', 'location', 'session_date'])
    return session


def delete_session(session_id):
    """Deletes a session together with all of its shots."""
    session = get_session(session_id)
    session.delete()


def get_session_shots(session_id):
    get_session(session_id)
    return Shot.objects.filter(session_id=session_id).order_by('shot_number', 'id')


def get_club_shots(session_id, club):
    return get_session_shots(session_id).filter(club=club)


def get_shots_with_min_carry(session_id, min_distance):
    return get_session_shots(session_id).filter(carry_distance__gte=min_distance)


def get_shots_with_min_total(session_id, min_distance):
    return get_session_shots(session_id).filter(total_distance__gte=min_distance)


def search_sessions(title=None, location=None):
    """Case-insensitive substring search on title and/or location, newest first."""
    sessions = list_sessions()
    if title:
        sessions = sessions.filter(title__icontains=title)
    if location:
        sessions = sessions.filter(location__icontains=location)
    return sessions


def get_session_stats(session_id):
    return compute_session_statistics(get_session_shots(session_id))


def summarize_session(session):
    """Headline numbers for a session list entry."""
    shots = list(session.shots.all())
    return {
        'id': session.pk,
        'title': session.title,
        'location': session.location,
        'uploadDate': session.upload_date,
        'sessionDate': session.session_date,
        'sourceType': session.source_type,
        'shotCount': len(shots),
        'avgCarryDistance': average(shots, 'carry_distance'),
        'avgTotalDistance': average(shots, 'total_distance'),
        'avgBallSpeed': average(shots, 'ball_speed'),
    }
