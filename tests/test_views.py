import json

import pytest
from django.urls import reverse

from factories import R10_ROWS, make_upload, r10_csv
from practice.models import Session, Shot

pytestmark = pytest.mark.django_db


def upload(client, content=None, title="Range day", location="Home", source=None, **file_kwargs):
    payload = {
        'file': make_upload(content if content is not None else r10_csv(*R10_ROWS), **file_kwargs),
        'title': title,
        'location': location,
    }
    if source is not None:
        payload['source'] = source
    return client.post(reverse('session_upload'), payload)


@pytest.fixture
def session_id(client):
    response = upload(client)
    return response.json()['data']['id']


class TestUpload:
    def test_creates_session(self, client):
        response = upload(client)

        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['path'] == '/api/sessions/upload/'
        data = body['data']
        assert data['title'] == "Range day"
        assert data['sourceType'] == 'GARMIN_R10'
        assert data['shotCount'] == 3
        assert [shot['club'] for shot in data['shots']] == ["Driver", "Driver", "7 Iron"]
        assert data['shots'][0]['ballSpeed'] == 150.2
        assert data['shots'][0]['sessionId'] == data['id']
        assert data['importReport']['shotsCreated'] == 3
        assert data['importReport']['unmappedHeaders'] == ["Player"]

    def test_source_is_case_insensitive(self, client, awesome_golf_upload):
        response = client.post(reverse('session_upload'), {
            'file': awesome_golf_upload,
            'title': "Sim",
            'source': "awesome_golf",
        })
        assert response.status_code == 201
        assert response.json()['data']['sourceType'] == 'AWESOME_GOLF'

    def test_missing_file(self, client):
        response = client.post(reverse('session_upload'), {'title': "Range day"})
        assert response.status_code == 400
        assert response.json()['message'] == "No file uploaded"

    def test_missing_title(self, client):
        response = upload(client, title="")
        body = response.json()
        assert response.status_code == 400
        assert body['success'] is False
        assert body['errorCode'] == 'VALIDATION_FAILED'
        assert Session.objects.count() == 0

    def test_wrong_file_type(self, client):
        response = upload(client, name="shots.txt", content_type="text/plain")
        assert response.status_code == 400
        assert response.json()['errorCode'] == 'INVALID_FILE_FORMAT'

    def test_unknown_source(self, client):
        response = upload(client, source="TRACKMAN")
        assert response.status_code == 400
        assert "Unsupported source type" in response.json()['message']

    def test_file_too_large(self, client, settings):
        settings.PRACTICE_MAX_UPLOAD_SIZE = 20
        response = upload(client)
        assert response.status_code == 413
        assert response.json()['errorCode'] == 'FILE_SIZE_EXCEEDED'

    def test_no_valid_shots(self, client):
        response = upload(client, content=r10_csv("1,Driver"))
        assert response.status_code == 400
        assert response.json()['message'] == "No valid shots found in the CSV file"

    def test_get_not_allowed(self, client):
        assert client.get(reverse('session_upload')).status_code == 405


class TestSessionList:
    def test_paginates_newest_first(self, client):
        for title in ["First", "Second", "Third"]:
            upload(client, title=title)

        response = client.get(reverse('session_list'), {'page': 1, 'size': 2})

        body = response.json()
        assert response.status_code == 200
        assert [session['title'] for session in body['data']] == ["Third", "Second"]
        assert body['data'][0]['shotCount'] == 3
        assert body['data'][0]['avgBallSpeed'] == 140.7
        assert body['pagination']['totalElements'] == 3
        assert body['pagination']['totalPages'] == 2
        assert body['pagination']['hasNext'] is True

        second_page = client.get(reverse('session_list'), {'page': 2, 'size': 2}).json()
        assert [session['title'] for session in second_page['data']] == ["First"]
        assert second_page['pagination']['last'] is True

    def test_empty(self, client):
        body = client.get(reverse('session_list')).json()
        assert body['data'] == []
        assert body['pagination']['totalElements'] == 0

    def test_bad_page_number(self, client):
        response = client.get(reverse('session_list'), {'page': 'zero'})
        assert response.status_code == 400


class TestSessionDetail:
    def test_get(self, client, session_id):
        response = client.get(reverse('session_detail', args=[session_id]))
        data = response.json()['data']
        assert response.status_code == 200
        assert data['id'] == session_id
        assert len(data['shots']) == 3

    def test_missing_session_is_404(self, client):
        response = client.get(reverse('session_detail', args=[9999]))
        body = response.json()
        assert response.status_code == 404
        assert body['errorCode'] == 'RESOURCE_NOT_FOUND'
        assert body['message'] == "Session with id 9999 not found"

    def test_put_updates_metadata(self, client, session_id):
        response = client.put(
            reverse('session_detail', args=[session_id]),
            data=json.dumps({'title': "Evening <range>", 'sessionDate': "2024-05-01T18:30:00"}),
            content_type='application/json',
        )

        data = response.json()['data']
        assert response.status_code == 200
        assert data['title'] == "Evening &lt;range&gt;"
        assert data['location'] == "Home"
        assert data['sessionDate'].startswith("2024-05-01T18:30:00")

    def test_put_rejects_bad_json(self, client, session_id):
        response = client.put(
            reverse('session_detail', args=[session_id]),
            data="{not json",
            content_type='application/json',
        )
        assert response.status_code == 400

    def test_patch_rejects_bad_date(self, client, session_id):
        response = client.patch(
            reverse('session_detail', args=[session_id]),
            data=json.dumps({'sessionDate': "last tuesday"}),
            content_type='application/json',
        )
        assert response.status_code == 400
        assert 'sessionDate' in response.json()['fieldErrors']

    def test_delete(self, client, session_id):
        response = client.delete(reverse('session_detail', args=[session_id]))
        assert response.status_code == 200
        assert not Session.objects.exists()
        assert not Shot.objects.exists()


class TestShotsAndStats:
    def test_shots_in_order(self, client, session_id):
        data = client.get(reverse('session_shots', args=[session_id])).json()['data']
        assert [shot['shotNumber'] for shot in data] == [1, 2, 3]

    def test_shots_for_one_club(self, client, session_id):
        data = client.get(reverse('session_shots', args=[session_id]), {'club': "7 Iron"}).json()['data']
        assert len(data) == 1
        assert data[0]['carryDistance'] == 160.0

    def test_shots_for_missing_session(self, client):
        assert client.get(reverse('session_shots', args=[9999])).status_code == 404

    def test_stats(self, client, session_id):
        data = client.get(reverse('session_stats', args=[session_id])).json()['data']
        assert data['totalShots'] == 3
        assert data['clubCounts'] == {"Driver": 2, "7 Iron": 1}
        assert data['clubStats']['Driver']['avgBallSpeed'] == 151.1


class TestSearch:
    def test_by_title_and_location(self, client):
        upload(client, title="Driver work", location="North Range")
        upload(client, title="Wedges", location="Back yard")

        by_title = client.get(reverse('session_search'), {'title': "DRIVER"}).json()
        assert [session['title'] for session in by_title['data']] == ["Driver work"]
        assert by_title['message'] == "Found 1 session(s)"

        by_location = client.get(reverse('session_search'), {'location': "yard"}).json()
        assert [session['title'] for session in by_location['data']] == ["Wedges"]
