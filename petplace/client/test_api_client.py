# petplace/client/test_api_client.py
from unittest.mock import MagicMock

import pytest

from petplace.client.api_client import PetPlaceApiClient, ApiError


def _session_returning(payload, status_code=200):
    response = MagicMock(status_code=status_code)
    response.json.return_value = payload
    session = MagicMock()
    session.request.return_value = response
    return session


def test_get_places_returns_data():
    session = _session_returning({"success": True, "data": [{"placeId": "p1"}]})
    client = PetPlaceApiClient(base_url="http://api.test/", timeout=3, session=session)

    assert client.get_places() == [{"placeId": "p1"}]
    session.request.assert_called_once_with('GET', "http://api.test/api/places", headers={}, timeout=3)


def test_get_places_raises_on_unsuccessful_payload():
    client = PetPlaceApiClient(base_url="http://api.test", session=_session_returning({"success": False, "message": "점검 중"}))
    with pytest.raises(ApiError, match="점검 중"):
        client.get_places()


def test_non_json_response_raises_api_error():
    response = MagicMock(status_code=502)
    response.json.side_effect = ValueError("no json")
    session = MagicMock()
    session.request.return_value = response

    with pytest.raises(ApiError) as excinfo:
        PetPlaceApiClient(base_url="http://api.test", session=session).get_places()
    assert excinfo.value.status_code == 502


def test_check_duplicate_uses_endpoint_per_field():
    session = _session_returning({"success": True, "data": True})
    client = PetPlaceApiClient(base_url="http://api.test", session=session)

    assert client.check_duplicate('loginId', 'happydog') is True
    args, kwargs = session.request.call_args
    assert args == ('GET', "http://api.test/api/users/check-id")
    assert kwargs['params'] == {'loginId': 'happydog'}


def test_login_attaches_token_to_later_requests():
    session = _session_returning({"success": True, "data": {"accessToken": "tok", "userId": "u1"}})
    client = PetPlaceApiClient(base_url="http://api.test", session=session)
    client.login("happydog", "password123")

    session.request.return_value.json.return_value = {"success": True, "data": []}
    client.get_places()
    assert session.request.call_args.kwargs['headers'] == {'Authorization': "Bearer tok"}
