"""Tests for the itinerary backend client."""

from unittest.mock import MagicMock

import pytest

from city_autocomplete.errors import ApiError
from city_autocomplete.services.api import ItineraryApiClient, auth_headers


def make_response(status=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return ItineraryApiClient("http://api.test/", session=session, timeout=5)


class TestAuthHeaders:
    def test_without_token(self):
        assert auth_headers() == {"Content-Type": "application/json"}

    def test_with_token(self):
        assert auth_headers("abc")["Authorization"] == "Bearer abc"


class TestItineraryApiClient:
    def test_requires_base_url(self):
        with pytest.raises(ValueError):
            ItineraryApiClient("")

    def test_login_posts_credentials(self, client, session):
        session.request.return_value = make_response(payload={"status": "success"})
        assert client.login("a@b.c", "pw") == {"status": "success"}
        session.request.assert_called_once_with(
            "POST",
            "http://api.test/auth/login",
            headers={"Content-Type": "application/json"},
            json={"email": "a@b.c", "password": "pw"},
            timeout=5,
        )

    def test_generate_sends_token(self, client, session):
        session.request.return_value = make_response(payload={"status": "success", "data": {}})
        request = {
            "from_location": "Paris, France",
            "to_location": "Rome, Italy",
            "budget": 1200,
            "dates": "2026-11-01 to 2026-11-05",
            "model": "local",
        }
        client.generate_itinerary(request, token="tok")
        args, kwargs = session.request.call_args
        assert args == ("POST", "http://api.test/generate_itinerary")
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["json"] == request

    @pytest.mark.parametrize("call, method, path", [
        (lambda c: c.get_my_itineraries("t"), "GET", "/my-itineraries"),
        (lambda c: c.get_itinerary("42", "t"), "GET", "/itinerary/42"),
        (lambda c: c.delete_itinerary("42", "t"), "DELETE", "/itinerary/42"),
        (lambda c: c.health(), "GET", "/health"),
    ])
    def test_routes(self, client, session, call, method, path):
        session.request.return_value = make_response(payload={"status": "ok"})
        call(client)
        args, _ = session.request.call_args
        assert args == (method, f"http://api.test{path}")

    def test_error_uses_body_message(self, client, session):
        session.request.return_value = make_response(401, {"message": "Invalid credentials", "detail": "bad pw"})
        with pytest.raises(ApiError) as excinfo:
            client.login("a@b.c", "nope")
        assert excinfo.value.status == 401
        assert excinfo.value.message == "Invalid credentials"
        assert excinfo.value.detail == "bad pw"

    def test_error_without_body_message(self, client, session):
        session.request.return_value = make_response(500, json_error=ValueError("not json"))
        with pytest.raises(ApiError) as excinfo:
            client.health()
        assert excinfo.value.message == "HTTP error! status: 500"
