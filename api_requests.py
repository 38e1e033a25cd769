# Contains the request builders for the Google Maps Platform web services.
#
# Every request follows the same chain: with_*() setters -> validate() -> build() -> get().
# execute() runs validate/build/get in one call.

import json
import logging
from datetime import datetime
from enum import Enum
from urllib.parse import quote, urlencode

from api_codes import (
    Avoid,
    Language,
    LocationType,
    PlaceType,
    Region,
    RoadsStatus,
    Status,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
)
from api_errors import (
    AddressOrComponentsRequired,
    ArrivalTimeIsForTransitOnly,
    DecodeError,
    EitherAlternativesOrWaypoints,
    EitherDepartureTimeOrArrivalTime,
    EitherLatLngOrPlaceId,
    EitherRestrictionsOrWaypoints,
    EitherWaypointsOrTransitMode,
    GoogleMapsError,
    GoogleMapsServiceError,
    HttpUnsuccessful,
    InvalidArrivalTime,
    InvalidDepartureTime,
    InvalidRoadsStatusCode,
    QueryNotBuilt,
    RequestNotReusable,
    RequestNotValidated,
    TooManyPoints,
    TooManyWaypoints,
    TransitModeIsForTransitOnly,
    TransitRoutePreferenceIsForTransitOnly,
)
from api_structures import (
    Bounds,
    DirectionsResponse,
    DistanceMatrixResponse,
    GeocodingResponse,
    LatLng,
    Location,
    NearestRoadsResponse,
)

logger = logging.getLogger(__name__)

# Departure time value asking the service to use the current time.
NOW = "now"

MAX_WAYPOINTS = TooManyWaypoints.limit
MAX_ROAD_POINTS = TooManyPoints.limit


class RequestState(Enum):
    EMPTY = "empty"
    CONFIGURED = "configured"
    VALIDATED = "validated"
    BUILT = "built"
    EXECUTED = "executed"
    FAILED = "failed"


_TERMINAL_STATES = (RequestState.EXECUTED, RequestState.FAILED)


def _render(value) -> str:
    """Renders a single parameter value the way the web services expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Request:
    """
    Base class for the request builders.

    A request moves EMPTY -> CONFIGURED -> VALIDATED -> BUILT -> EXECUTED.
    Calling build() or get() out of order raises a RequestSequenceError.
    Once a request has executed, or failed, it cannot be reused.
    """
    API = "Platform"
    PATH = ""
    RESPONSE = None

    def __init__(self, client):
        self.client = client
        self.state = RequestState.EMPTY
        self.query: str | None = None

    # --- State ---

    def _ensure_open(self):
        if self.state in _TERMINAL_STATES:
            raise RequestNotReusable(self.state, api=self.API)

    def _configure(self):
        """Records that a setter ran. A changed request must be validated again."""
        self._ensure_open()
        self.state = RequestState.CONFIGURED
        self.query = None

    def _fail(self):
        self.state = RequestState.FAILED
        self.query = None

    # --- Chain ---

    def validate(self) -> "Request":
        """Checks the cross-field rules. The first violated rule is raised."""
        self._ensure_open()
        try:
            self._check()
        except GoogleMapsError:
            self._fail()
            raise
        self.state = RequestState.VALIDATED
        return self

    def build(self) -> "Request":
        """Renders the validated parameters into the query string."""
        self._ensure_open()
        if self.state not in (RequestState.VALIDATED, RequestState.BUILT):
            raise RequestNotValidated(api=self.API)
        params = [("key", self.client.api_key)]
        params += [(name, _render(value)) for name, value in self._params() if value is not None]
        self.query = urlencode(params, safe=",|:", quote_via=quote)
        self.state = RequestState.BUILT
        return self

    def get(self):
        """Sends the built query and decodes the response."""
        self._ensure_open()
        if self.state != RequestState.BUILT or self.query is None:
            raise QueryNotBuilt(api=self.API)
        try:
            response = self.client.send(self.url(), api=self.API)
            result = self._parse(self._decode(response))
        except GoogleMapsError as e:
            # Decoded values do not know which API they came from.
            if e.api == "Platform":
                e.api = self.API
            logger.warning(str(e))
            self._fail()
            raise
        self.state = RequestState.EXECUTED
        return result

    def execute(self):
        """Shortcut for validate().build().get()."""
        return self.validate().build().get()

    def url(self) -> str:
        if self.query is None:
            raise QueryNotBuilt(api=self.API)
        return f"{self._base_url()}/{self.PATH}?{self.query}"

    # --- Hooks ---

    def _base_url(self) -> str:
        return self.client.base_url

    def _check(self):
        pass

    def _params(self) -> list[tuple]:
        return []

    def _decode(self, response) -> dict:
        if not response.ok:
            raise HttpUnsuccessful(response.status_code, api=self.API)
        try:
            payload = json.loads(response.text)
        except ValueError as e:
            raise DecodeError(f"The body is not valid JSON: {e}", api=self.API) from e
        if not isinstance(payload, dict):
            raise DecodeError("Expected a JSON object at the top level.", api=self.API)
        return payload

    def _parse(self, payload: dict):
        if payload.get("status") is None:
            raise DecodeError("The response has no `status` field.", api=self.API)
        status = Status.from_code(payload["status"], api=self.API)
        if status != Status.OK:
            raise GoogleMapsServiceError(status, payload.get("error_message"), api=self.API)
        return self._from_json(payload)

    def _from_json(self, payload: dict):
        try:
            return self.RESPONSE.from_json(payload)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise DecodeError(
                f"The response does not match the {self.RESPONSE.__name__} schema: {e!r}",
                api=self.API) from e


class _RoutingRequest(Request):
    """Options shared by the Directions and Distance Matrix APIs."""

    def __init__(self, client):
        super().__init__(client)
        self.travel_mode: TravelMode | None = None
        self.arrival_time: datetime | None = None
        self.departure_time: datetime | str | None = None
        self.transit_modes: list[TransitMode] | None = None
        self.transit_route_preference: TransitRoutePreference | None = None
        self.restrictions: list[Avoid] | None = None
        self.traffic_model: TrafficModel | None = None
        self.unit_system: UnitSystem | None = None
        self.language: Language | None = None
        self.region: Region | None = None

    def with_travel_mode(self, travel_mode):
        self._configure()
        self.travel_mode = TravelMode.from_code(travel_mode, api=self.API)
        return self

    def with_arrival_time(self, arrival_time: datetime):
        if not isinstance(arrival_time, datetime):
            raise InvalidArrivalTime(arrival_time, api=self.API)
        self._configure()
        self.arrival_time = arrival_time
        return self

    def with_departure_time(self, departure_time: datetime | str):
        """`departure_time` is a datetime or NOW."""
        if not (isinstance(departure_time, datetime) or departure_time == NOW):
            raise InvalidDepartureTime(departure_time, api=self.API)
        self._configure()
        self.departure_time = departure_time
        return self

    def with_transit_modes(self, transit_modes):
        self._configure()
        self.transit_modes = [TransitMode.from_code(mode, api=self.API) for mode in transit_modes]
        return self

    def with_transit_route_preference(self, preference):
        self._configure()
        self.transit_route_preference = TransitRoutePreference.from_code(
            preference, api=self.API)
        return self

    def with_restrictions(self, restrictions):
        self._configure()
        self.restrictions = [Avoid.from_code(avoid, api=self.API) for avoid in restrictions]
        return self

    def with_traffic_model(self, traffic_model):
        self._configure()
        self.traffic_model = TrafficModel.from_code(traffic_model, api=self.API)
        return self

    def with_unit_system(self, unit_system):
        self._configure()
        self.unit_system = UnitSystem.from_code(unit_system, api=self.API)
        return self

    def with_language(self, language):
        self._configure()
        self.language = Language.from_code(language, api=self.API)
        return self

    def with_region(self, region):
        """`region` is a ccTLD code such as `ca` or `uk`."""
        self._configure()
        self.region = Region.from_code(region, api=self.API)
        return self

    def _is_transit(self) -> bool:
        return self.travel_mode == TravelMode.TRANSIT

    def _check_travel_options(self):
        travel_mode = self.travel_mode or TravelMode.default()
        if self.arrival_time is not None and self.departure_time is not None:
            raise EitherDepartureTimeOrArrivalTime(self.arrival_time, self.departure_time, api=self.API)
        if self.arrival_time is not None and not self._is_transit():
            raise ArrivalTimeIsForTransitOnly(travel_mode, self.arrival_time, api=self.API)
        if self.transit_modes and not self._is_transit():
            raise TransitModeIsForTransitOnly(travel_mode, self.transit_modes, api=self.API)
        if self.transit_route_preference is not None and not self._is_transit():
            raise TransitRoutePreferenceIsForTransitOnly(
                travel_mode, self.transit_route_preference, api=self.API)

    def _travel_params(self) -> list[tuple]:
        return [
            ("mode", self.travel_mode),
            ("avoid", Avoid.to_pipes(self.restrictions) if self.restrictions else None),
            ("arrival_time", self.arrival_time),
            ("departure_time", self.departure_time),
            ("transit_mode", TransitMode.to_pipes(self.transit_modes) if self.transit_modes else None),
            ("transit_routing_preference", self.transit_route_preference),
            ("traffic_model", self.traffic_model),
            ("units", self.unit_system),
            ("language", self.language),
            ("region", self.region),
        ]


class DirectionsRequest(_RoutingRequest):
    """Directions between an origin and a destination, optionally through waypoints."""
    API = "Directions"
    PATH = "maps/api/directions/json"
    RESPONSE = DirectionsResponse

    def __init__(self, client, origin: Location, destination: Location):
        super().__init__(client)
        self.origin = origin
        self.destination = destination
        self.waypoints: list[Location] | None = None
        self.optimize_waypoints: bool = False
        self.alternatives: bool | None = None

    def with_waypoints(self, waypoints: list[Location], optimize: bool = False):
        self._configure()
        self.waypoints = list(waypoints)
        self.optimize_waypoints = optimize
        return self

    def with_alternatives(self, alternatives: bool):
        self._configure()
        self.alternatives = alternatives
        return self

    def _check(self):
        self._check_travel_options()
        if not self.waypoints:
            return
        count = len(self.waypoints)
        if self._is_transit():
            raise EitherWaypointsOrTransitMode(count, api=self.API)
        if count > MAX_WAYPOINTS:
            raise TooManyWaypoints(count, api=self.API)
        if self.alternatives:
            raise EitherAlternativesOrWaypoints(count, api=self.API)
        if self.restrictions:
            raise EitherRestrictionsOrWaypoints(count, self.restrictions, api=self.API)

    def _params(self) -> list[tuple]:
        waypoints = None
        if self.waypoints:
            waypoints = "|".join(str(waypoint) for waypoint in self.waypoints)
            if self.optimize_waypoints:
                waypoints = f"optimize:true|{waypoints}"
        return [
            ("origin", self.origin),
            ("destination", self.destination),
            ("waypoints", waypoints),
            ("alternatives", self.alternatives),
        ] + self._travel_params()


class DistanceMatrixRequest(_RoutingRequest):
    """Travel distance and time for every origin/destination pairing."""
    API = "Distance Matrix"
    PATH = "maps/api/distancematrix/json"
    RESPONSE = DistanceMatrixResponse

    def __init__(self, client, origins: list[Location], destinations: list[Location]):
        super().__init__(client)
        self.origins = list(origins)
        self.destinations = list(destinations)

    def _check(self):
        self._check_travel_options()

    def _params(self) -> list[tuple]:
        return [
            ("origins", "|".join(str(origin) for origin in self.origins)),
            ("destinations", "|".join(str(destination) for destination in self.destinations)),
        ] + self._travel_params()


class GeocodingRequest(Request):
    """Forward geocoding: an address, components or a place id to coordinates."""
    API = "Geocoding"
    PATH = "maps/api/geocode/json"
    RESPONSE = GeocodingResponse

    def __init__(self, client):
        super().__init__(client)
        self.address: str | None = None
        self.place_id: str | None = None
        self.components: dict[str, str] | None = None
        self.bounds: Bounds | None = None
        self.language: Language | None = None
        self.region: Region | None = None

    def with_address(self, address: str):
        self._configure()
        self.address = address
        return self

    def with_place_id(self, place_id: str):
        self._configure()
        self.place_id = place_id
        return self

    def with_components(self, components: dict[str, str]):
        """Component filters, e.g. {"country": "CA", "postal_code": "M5V"}."""
        self._configure()
        self.components = dict(components)
        return self

    def with_bounds(self, bounds: Bounds):
        self._configure()
        self.bounds = bounds
        return self

    def with_language(self, language):
        self._configure()
        self.language = Language.from_code(language, api=self.API)
        return self

    def with_region(self, region):
        """`region` is a ccTLD code such as `ca` or `uk`."""
        self._configure()
        self.region = Region.from_code(region, api=self.API)
        return self

    def _check(self):
        if not (self.address or self.components or self.place_id):
            raise AddressOrComponentsRequired(api=self.API)

    def _params(self) -> list[tuple]:
        components = None
        if self.components:
            components = "|".join(f"{name}:{value}" for name, value in self.components.items())
        bounds = None
        if self.bounds is not None:
            bounds = f"{self.bounds.southwest}|{self.bounds.northeast}"
        return [
            ("address", self.address),
            ("place_id", self.place_id),
            ("components", components),
            ("bounds", bounds),
            ("language", self.language),
            ("region", self.region),
        ]


class ReverseGeocodingRequest(Request):
    """Reverse geocoding: coordinates or a place id to addresses."""
    API = "Geocoding"
    PATH = "maps/api/geocode/json"
    RESPONSE = GeocodingResponse

    def __init__(self, client):
        super().__init__(client)
        self.latlng: LatLng | None = None
        self.place_id: str | None = None
        self.result_types: list[PlaceType] | None = None
        self.location_types: list[LocationType] | None = None
        self.language: Language | None = None

    def with_latlng(self, latlng: LatLng | str):
        self._configure()
        self.latlng = latlng if isinstance(latlng, LatLng) else LatLng.from_str(latlng)
        return self

    def with_place_id(self, place_id: str):
        self._configure()
        self.place_id = place_id
        return self

    def with_result_types(self, result_types):
        self._configure()
        self.result_types = [PlaceType.from_code(code, api=self.API) for code in result_types]
        return self

    def with_location_types(self, location_types):
        self._configure()
        self.location_types = [LocationType.from_code(code, api=self.API) for code in location_types]
        return self

    def with_language(self, language):
        self._configure()
        self.language = Language.from_code(language, api=self.API)
        return self

    def _check(self):
        if (self.latlng is None) == (self.place_id is None):
            raise EitherLatLngOrPlaceId(self.latlng, self.place_id, api=self.API)

    def _params(self) -> list[tuple]:
        return [
            ("latlng", self.latlng),
            ("place_id", self.place_id),
            ("result_type", PlaceType.to_pipes(self.result_types) if self.result_types else None),
            ("location_type",
             LocationType.to_pipes(self.location_types) if self.location_types else None),
            ("language", self.language),
        ]


class NearestRoadsRequest(Request):
    """The closest road segment for each of up to 100 points."""
    API = "Roads"
    PATH = "v1/nearestRoads"
    RESPONSE = NearestRoadsResponse

    def __init__(self, client, points: list[LatLng | str]):
        super().__init__(client)
        self.points = [point if isinstance(point, LatLng) else LatLng.from_str(point) for point in points]

    def _base_url(self) -> str:
        return self.client.roads_base_url

    def _check(self):
        if len(self.points) > MAX_ROAD_POINTS:
            raise TooManyPoints(len(self.points), api=self.API)

    def _params(self) -> list[tuple]:
        return [("points", "|".join(str(point) for point in self.points))]

    def _decode(self, response) -> dict:
        # The Roads API reports errors as {"error": {...}} bodies on non-2xx responses.
        if not response.ok:
            try:
                payload = json.loads(response.text)
            except ValueError:
                raise HttpUnsuccessful(response.status_code, api=self.API) from None
            if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
                self._raise_service_error(payload["error"], response.status_code)
            raise HttpUnsuccessful(response.status_code, api=self.API)
        return super()._decode(response)

    def _parse(self, payload: dict):
        if isinstance(payload.get("error"), dict):
            self._raise_service_error(payload["error"], 200)
        return self._from_json(payload)

    def _raise_service_error(self, error: dict, status_code: int):
        message = error.get("message")
        try:
            status = RoadsStatus.from_code(error.get("status"), api=self.API)
        except InvalidRoadsStatusCode:
            # Keep the server message when the status is not one we know.
            raise HttpUnsuccessful(status_code, message, api=self.API) from None
        raise GoogleMapsServiceError(status, message, api=self.API)

