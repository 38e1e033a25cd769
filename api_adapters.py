# Contains the HTTP adapter and the client object shared by every Google Maps Platform request.

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests
from dotenv import load_dotenv

from api_errors import HttpUnsuccessful, TransportError
from api_requests import (
    DirectionsRequest,
    DistanceMatrixRequest,
    GeocodingRequest,
    NearestRoadsRequest,
    ReverseGeocodingRequest,
)

logger = logging.getLogger(__name__)

# --- API Configuration ---
# Keys are read from environment variables for security.
load_dotenv()
DEFAULT_BASE_URL = "https://maps.googleapis.com"
DEFAULT_ROADS_BASE_URL = "https://roads.googleapis.com"
DEFAULT_TIMEOUT = 30.0


@dataclass
class HttpResponse:
    """The status and body of an HTTP response, independent of the HTTP library."""
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ApiAdapter(ABC):
    """
    Abstract Base Class (blueprint) for the HTTP transport.
    The client only ever needs a plain GET.
    """
    @abstractmethod
    def send(self, url: str) -> HttpResponse:
        """Sends a GET request and returns the response, whatever its status."""
        pass


class RequestsAdapter(ApiAdapter):
    """The adapter backed by a `requests` session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, url: str) -> HttpResponse:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e
        return HttpResponse(status_code=response.status_code, text=response.text)


class GoogleMapsClient:
    """Holds the API key and the adapter, and hands out new requests."""

    def __init__(
        self,
        api_key: str | None = None,
        adapter: ApiAdapter | None = None,
        base_url: str = DEFAULT_BASE_URL,
        roads_base_url: str = DEFAULT_ROADS_BASE_URL,
    ):
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY")
        if not self.api_key:
            raise ValueError(
                "FATAL ERROR: The GOOGLE_API_KEY environment variable is not set.")
        if adapter is None:
            adapter = RequestsAdapter(
                timeout=float(os.getenv("GOOGLE_MAPS_TIMEOUT", DEFAULT_TIMEOUT)))
        self.adapter = adapter
        self.base_url = base_url.rstrip("/")
        self.roads_base_url = roads_base_url.rstrip("/")

    def redact(self, url: str) -> str:
        """Masks the API key so URLs can be logged."""
        return url.replace(self.api_key, "REDACTED")

    def send(self, url: str, api: str = "Platform") -> HttpResponse:
        logger.debug(f"[{api}] GET {self.redact(url)}")
        try:
            response = self.adapter.send(url)
        except HttpUnsuccessful as e:
            message = self.redact(e.message) if e.message else None
            raise HttpUnsuccessful(e.status_code, message, api=api) from e
        except TransportError as e:
            raise TransportError(self.redact(e.message or ""), api=api) from e
        logger.debug(f"[{api}] Response status: {response.status_code}")
        return response

    # --- Requests ---

    def directions(self, origin, destination) -> DirectionsRequest:
        return DirectionsRequest(self, origin, destination)

    def distance_matrix(self, origins, destinations) -> DistanceMatrixRequest:
        return DistanceMatrixRequest(self, origins, destinations)

    def geocoding(self) -> GeocodingRequest:
        return GeocodingRequest(self)

    def reverse_geocoding(self) -> ReverseGeocodingRequest:
        return ReverseGeocodingRequest(self)

    def nearest_roads(self, points) -> NearestRoadsRequest:
        return NearestRoadsRequest(self, points)
