"""
Client for the itinerary-generation and authentication backend.
"""

import logging
from typing import Any, Dict, Optional, TypedDict

import requests

from ..errors import ApiError

DEFAULT_TIMEOUT_SECONDS = 30.0


class ItineraryRequest(TypedDict):
    """Body of POST /generate_itinerary."""
    from_location: str
    to_location: str
    budget: float
    dates: str
    model: str  # "local", "groq" or "openai"


def auth_headers(token: Optional[str] = None) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class ItineraryApiClient:
    """Thin wrapper over the backend's JSON endpoints."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS):
        if not base_url:
            raise ValueError("Itinerary API base URL is required (set ITINERARY_API_URL).")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, token: Optional[str] = None,
                 body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logging.info(f"API CALLED: {method} {path}")
        response = self.session.request(
            method,
            url,
            headers=auth_headers(token),
            json=body,
            timeout=self.timeout,
        )
        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.ok:
            message = data.get("message") or f"HTTP error! status: {response.status_code}"
            logging.error(f"Itinerary API error {response.status_code}: {message}")
            raise ApiError(response.status_code, message, data.get("detail"))

        return data

    # Auth

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._request("POST", "/auth/login", body={"email": email, "password": password})

    def register(self, email: str, password: str, full_name: str) -> Dict[str, Any]:
        return self._request("POST", "/auth/register", body={
            "email": email,
            "password": password,
            "full_name": full_name,
        })

    # Itineraries

    def generate_itinerary(self, request: ItineraryRequest, token: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", "/generate_itinerary", token=token, body=dict(request))

    def get_my_itineraries(self, token: str) -> Dict[str, Any]:
        return self._request("GET", "/my-itineraries", token=token)

    def get_itinerary(self, itinerary_id: str, token: str) -> Dict[str, Any]:
        return self._request("GET", f"/itinerary/{itinerary_id}", token=token)

    def delete_itinerary(self, itinerary_id: str, token: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/itinerary/{itinerary_id}", token=token)

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
