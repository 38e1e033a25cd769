# Contains the typed errors raised by the Google Maps Platform client.

from datetime import datetime
from enum import Enum


def _render(value) -> str:
    """Formats an offending value for an error message."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_render(item) for item in value)
    return str(value)


class GoogleMapsError(Exception):
    """
    Base class for every error raised by this client.
    `api` names the API surface the error belongs to, e.g. "Directions".
    """
    side = "client"

    def __init__(self, *args, api: str = "Platform"):
        super().__init__(*args)
        self.api = api

    def __str__(self) -> str:
        return f"Google Maps {self.api} API {self.side}: {self.describe()}"

    def describe(self) -> str:
        return "An unexpected error occurred."


# --- Invalid codes ---

class InvalidCodeError(GoogleMapsError, ValueError):
    """A string could not be parsed into a member of a code table."""
    kind = "code"
    valid = ""

    def __init__(self, code, api: str = "Platform"):
        super().__init__(code, api=api)
        self.code = code

    def describe(self) -> str:
        return f"`{self.code}` is not a valid {self.kind} code. {self.valid}"


class InvalidPlaceTypeCode(InvalidCodeError):
    kind = "place type"
    valid = ("For a list of supported place types see "
             "https://developers.google.com/maps/documentation/places/web-service/supported_types")


class InvalidTravelModeCode(InvalidCodeError):
    kind = "travel mode"
    valid = "Valid codes are `bicycling`, `driving`, `transit`, and `walking`."


class InvalidManeuverTypeCode(InvalidCodeError):
    kind = "maneuver type"
    valid = ("Valid codes are `ferry`, `ferry-train`, `fork-left`, `fork-right`, "
             "`keep-left`, `keep-right`, `merge`, `ramp-left`, `ramp-right`, "
             "`roundabout-left`, `roundabout-right`, `straight`, `turn-left`, "
             "`turn-right`, `turn-sharp-left`, `turn-sharp-right`, "
             "`turn-slight-left`, `turn-slight-right`, `uturn-left`, and `uturn-right`.")


class InvalidStatusCode(InvalidCodeError):
    kind = "status"
    valid = ("Valid codes are `INVALID_REQUEST`, `MAX_DIMENSIONS_EXCEEDED`, "
             "`MAX_ELEMENTS_EXCEEDED`, `MAX_ROUTE_LENGTH_EXCEEDED`, "
             "`MAX_WAYPOINTS_EXCEEDED`, `NOT_FOUND`, `OK`, `OVER_DAILY_LIMIT`, "
             "`OVER_QUERY_LIMIT`, `REQUEST_DENIED`, `UNKNOWN_ERROR`, and `ZERO_RESULTS`.")


class InvalidRoadsStatusCode(InvalidCodeError):
    kind = "roads status"
    valid = ("Valid codes are `ABORTED`, `ALREADY_EXISTS`, `CANCELLED`, `DATA_LOSS`, "
             "`DEADLINE_EXCEEDED`, `FAILED_PRECONDITION`, `INTERNAL`, `INVALID_ARGUMENT`, "
             "`NOT_FOUND`, `OUT_OF_RANGE`, `PERMISSION_DENIED`, `RESOURCE_EXHAUSTED`, "
             "`UNAUTHENTICATED`, `UNAVAILABLE`, `UNIMPLEMENTED`, and `UNKNOWN`.")


class InvalidElementStatusCode(InvalidCodeError):
    kind = "element status"
    valid = ("Valid codes are `MAX_ROUTE_LENGTH_EXCEEDED`, `NOT_FOUND`, `OK`, "
             "and `ZERO_RESULTS`.")


class InvalidVehicleTypeCode(InvalidCodeError):
    kind = "vehicle type"
    valid = ("Valid codes are `BUS`, `CABLE_CAR`, `COMMUTER_TRAIN`, `FERRY`, "
             "`FUNICULAR`, `GONDOLA_LIFT`, `HEAVY_RAIL`, `HIGH_SPEED_TRAIN`, "
             "`INTERCITY_BUS`, `LONG_DISTANCE_TRAIN`, `METRO_RAIL`, `MONORAIL`, "
             "`OTHER`, `RAIL`, `SHARE_TAXI`, `SUBWAY`, `TRAM`, and `TROLLEYBUS`.")


class InvalidUnitSystemCode(InvalidCodeError):
    kind = "unit system"
    valid = "Valid codes are `imperial`, and `metric`."


class InvalidTransitModeCode(InvalidCodeError):
    kind = "transit mode"
    valid = "Valid codes are `bus`, `rail`, `subway`, `train`, and `tram`."


class InvalidTransitRoutePreferenceCode(InvalidCodeError):
    kind = "transit route preference"
    valid = "Valid codes are `fewer_transfers` and `less_walking`."


class InvalidTrafficModelCode(InvalidCodeError):
    kind = "traffic model"
    valid = "Valid codes are `best_guess`, `optimistic`, and `pessimistic`."


class InvalidAvoidCode(InvalidCodeError):
    kind = "restrictions"
    valid = "Valid codes are `ferries`, `highways`, `indoor`, and `tolls`."


class InvalidLocationTypeCode(InvalidCodeError):
    kind = "location type"
    valid = ("Valid codes are `APPROXIMATE`, `GEOMETRIC_CENTER`, "
             "`RANGE_INTERPOLATED`, and `ROOFTOP`.")


class InvalidLanguageCode(InvalidCodeError):
    kind = "language"
    valid = ("For a list of supported languages see "
             "https://developers.google.com/maps/faq#languagesupport")


class InvalidRegionCode(InvalidCodeError):
    kind = "region"
    valid = ("For a list of supported regions see "
             "https://developers.google.com/maps/coverage")


# --- Coordinates ---

class InvalidLatitude(GoogleMapsError, ValueError):
    def __init__(self, latitude, longitude, api: str = "Platform"):
        super().__init__(latitude, longitude, api=api)
        self.latitude = latitude
        self.longitude = longitude

    def describe(self) -> str:
        return (f"`{self.latitude}` from the `{self.latitude},{self.longitude}` pair is an "
                "invalid latitudinal value. A latitude must be between -90.0° and 90.0°.")


class InvalidLongitude(GoogleMapsError, ValueError):
    def __init__(self, latitude, longitude, api: str = "Platform"):
        super().__init__(latitude, longitude, api=api)
        self.latitude = latitude
        self.longitude = longitude

    def describe(self) -> str:
        return (f"`{self.longitude}` from the `{self.latitude},{self.longitude}` pair is an "
                "invalid longitudinal value. A longitude must be between -180.0° and 180.0°.")


class InvalidLatLongString(GoogleMapsError, ValueError):
    def __init__(self, value, api: str = "Platform"):
        super().__init__(value, api=api)
        self.value = value

    def describe(self) -> str:
        return f"`{self.value}` is an invalid `LatLng` string. Expected `latitude,longitude`."


# --- Client-side preconditions ---

class RequestValidationError(GoogleMapsError):
    """A request was configured with parameters the API would reject."""


class InvalidDepartureTime(RequestValidationError):
    def __init__(self, departure_time, api: str = "Directions"):
        super().__init__(departure_time, api=api)
        self.departure_time = departure_time

    def describe(self) -> str:
        return (f"`{_render(self.departure_time)}` is not a valid departure time. The "
                "with_departure_time() method accepts a `datetime` or `now`.")


class InvalidArrivalTime(RequestValidationError):
    def __init__(self, arrival_time, api: str = "Directions"):
        super().__init__(arrival_time, api=api)
        self.arrival_time = arrival_time

    def describe(self) -> str:
        return (f"`{_render(self.arrival_time)}` is not a valid arrival time. The "
                "with_arrival_time() method accepts a `datetime`.")


class ArrivalTimeIsForTransitOnly(RequestValidationError):
    def __init__(self, travel_mode, arrival_time, api: str = "Directions"):
        super().__init__(travel_mode, arrival_time, api=api)
        self.travel_mode = travel_mode
        self.arrival_time = arrival_time

    def describe(self) -> str:
        return ("The with_arrival_time() method may only be used when with_travel_mode() is set "
                f"to `transit`. The travel mode is set to `{_render(self.travel_mode)}` and the "
                f"arrival time is set to `{_render(self.arrival_time)}`. Try again either with a "
                "travel mode of `transit` or no arrival time.")


class EitherDepartureTimeOrArrivalTime(RequestValidationError):
    def __init__(self, arrival_time, departure_time, api: str = "Directions"):
        super().__init__(arrival_time, departure_time, api=api)
        self.arrival_time = arrival_time
        self.departure_time = departure_time

    def describe(self) -> str:
        return ("The with_departure_time() method cannot be used when with_arrival_time() has "
                f"been set. The arrival time is set to `{_render(self.arrival_time)}` and the "
                f"departure time is set to `{_render(self.departure_time)}`. Try again either "
                "with no arrival time or no departure time.")


class EitherWaypointsOrTransitMode(RequestValidationError):
    def __init__(self, waypoint_count: int, api: str = "Directions"):
        super().__init__(waypoint_count, api=api)
        self.waypoint_count = waypoint_count

    def describe(self) -> str:
        return ("The with_waypoints() method cannot be used when with_travel_mode() is set to "
                f"`transit`. {self.waypoint_count} waypoint(s) are set. Try again either with a "
                "different travel mode or no waypoints.")


class TooManyWaypoints(RequestValidationError):
    limit = 25

    def __init__(self, waypoint_count: int, api: str = "Directions"):
        super().__init__(waypoint_count, api=api)
        self.waypoint_count = waypoint_count

    @property
    def overage(self) -> int:
        return self.waypoint_count - self.limit

    def describe(self) -> str:
        return (f"The maximum allowed number of waypoints is {self.limit} plus the origin and "
                f"destination. {self.waypoint_count} waypoints are set. Try again with "
                f"{self.overage} fewer waypoint(s).")


class EitherAlternativesOrWaypoints(RequestValidationError):
    def __init__(self, waypoint_count: int, api: str = "Directions"):
        super().__init__(waypoint_count, api=api)
        self.waypoint_count = waypoint_count

    def describe(self) -> str:
        return ("The with_alternatives() method cannot be set to `true` if with_waypoints() has "
                f"been set. {self.waypoint_count} waypoint(s) are set. Try again either with no "
                "waypoints or no alternatives.")


class EitherRestrictionsOrWaypoints(RequestValidationError):
    def __init__(self, waypoint_count: int, restrictions, api: str = "Directions"):
        super().__init__(waypoint_count, restrictions, api=api)
        self.waypoint_count = waypoint_count
        self.restrictions = restrictions

    def describe(self) -> str:
        return ("The with_restrictions() method cannot be used when with_waypoints() has been "
                f"set. {self.waypoint_count} waypoint(s) are set and the restriction(s) are set "
                f"to `{_render(self.restrictions)}`. Try again either with no waypoints or no "
                "restrictions.")


class TransitModeIsForTransitOnly(RequestValidationError):
    def __init__(self, travel_mode, transit_modes, api: str = "Directions"):
        super().__init__(travel_mode, transit_modes, api=api)
        self.travel_mode = travel_mode
        self.transit_modes = transit_modes

    def describe(self) -> str:
        return ("The with_transit_modes() method may only be used when with_travel_mode() is set "
                f"to `transit`. The travel mode is set to `{_render(self.travel_mode)}` and the "
                f"transit mode(s) are set to `{_render(self.transit_modes)}`. Try again either "
                "with a travel mode of `transit` or no transit modes.")


class TransitRoutePreferenceIsForTransitOnly(RequestValidationError):
    def __init__(self, travel_mode, transit_route_preference, api: str = "Directions"):
        super().__init__(travel_mode, transit_route_preference, api=api)
        self.travel_mode = travel_mode
        self.transit_route_preference = transit_route_preference

    def describe(self) -> str:
        return ("The with_transit_route_preference() method may only be used when "
                f"with_travel_mode() is set to `transit`. The travel mode is set to "
                f"`{_render(self.travel_mode)}` and the transit route preference is set to "
                f"`{_render(self.transit_route_preference)}`. Try again either with a travel "
                "mode of `transit` or no transit route preference.")


class TooManyPoints(RequestValidationError):
    limit = 100

    def __init__(self, point_count: int, api: str = "Roads"):
        super().__init__(point_count, api=api)
        self.point_count = point_count

    def describe(self) -> str:
        return (f"The maximum allowed number of points is {self.limit}. {self.point_count} "
                f"points are set. Try again with {self.point_count - self.limit} fewer point(s).")


class AddressOrComponentsRequired(RequestValidationError):
    def __init__(self, api: str = "Geocoding"):
        super().__init__(api=api)

    def describe(self) -> str:
        return ("A geocoding request needs an address, components, or a place id. "
                "Try again with with_address(), with_components(), or with_place_id().")


class EitherLatLngOrPlaceId(RequestValidationError):
    def __init__(self, latlng, place_id, api: str = "Geocoding"):
        super().__init__(latlng, place_id, api=api)
        self.latlng = latlng
        self.place_id = place_id

    def describe(self) -> str:
        return ("A reverse geocoding request needs exactly one of with_latlng() or "
                f"with_place_id(). The latlng is set to `{_render(self.latlng)}` and the place "
                f"id is set to `{_render(self.place_id)}`.")


# --- Sequencing ---

class RequestSequenceError(GoogleMapsError):
    """An operation was called out of order on a request."""


class RequestNotValidated(RequestSequenceError):
    def describe(self) -> str:
        return ("The request must be validated before a query string may be built. "
                "Ensure the validate() method is called before build().")


class QueryNotBuilt(RequestSequenceError):
    def describe(self) -> str:
        return ("The query string must be built before the request may be sent to the Google "
                "Maps Platform. Ensure the build() method is called before get().")


class RequestNotReusable(RequestSequenceError):
    def __init__(self, state, api: str = "Platform"):
        super().__init__(state, api=api)
        self.state = state

    def describe(self) -> str:
        return (f"The request has already finished (state `{_render(self.state)}`) and cannot "
                "be reused. Construct a new request instead.")


# --- Server status ---

SERVICE_STATUS_MESSAGES = {
    "INVALID_REQUEST": "Invalid request. This may indicate that the query is missing a required "
                       "parameter or contains an invalid value.",
    "MAX_DIMENSIONS_EXCEEDED": "Maximum dimensions exceeded. Too many origins or destinations "
                               "were provided.",
    "MAX_ELEMENTS_EXCEEDED": "Maximum elements exceeded. The product of origins and "
                             "destinations exceeds the per-query limit.",
    "MAX_ROUTE_LENGTH_EXCEEDED": "Maximum route length exceeded. The requested route is too "
                                 "long and cannot be processed.",
    "MAX_WAYPOINTS_EXCEEDED": "Maximum waypoints exceeded. Too many waypoints were provided in "
                              "the request.",
    "NOT_FOUND": "Not found. At least one of the locations specified in the request's origin, "
                 "destination, or waypoints could not be geocoded.",
    "OK": "Ok. The request was successful.",
    "OVER_DAILY_LIMIT": "Over daily limit. Usage cap has been exceeded, API key is invalid, "
                        "billing has not been enabled, or method of payment is no longer valid.",
    "OVER_QUERY_LIMIT": "Over query limit. Requestor has exceeded quota.",
    "REQUEST_DENIED": "Request denied. Service did not complete the request.",
    "UNKNOWN_ERROR": "Unknown error. The request could not be processed due to a server error "
                     "and may succeed if you try again.",
    "ZERO_RESULTS": "Zero results. No results were found for the request.",
    "INVALID_ARGUMENT": "Invalid argument. The API key is not valid or the request contains "
                        "malformed points.",
    "PERMISSION_DENIED": "Permission denied. The API key is missing or the Roads API is not "
                         "enabled for the project.",
    "RESOURCE_EXHAUSTED": "Resource exhausted. The request exceeded the quota for the API key.",
    "INTERNAL": "Internal error. The request could not be processed due to a server error.",
    "UNAVAILABLE": "Unavailable. The service is temporarily unavailable.",
    "UNAUTHENTICATED": "Unauthenticated. The request does not have valid authentication "
                       "credentials.",
    "FAILED_PRECONDITION": "Failed precondition. The system is not in a state required for "
                           "the request.",
    "DEADLINE_EXCEEDED": "Deadline exceeded. The request did not complete in time.",
    "OUT_OF_RANGE": "Out of range. A request parameter is past the valid range.",
    "UNIMPLEMENTED": "Unimplemented. The operation is not supported by the service.",
    "CANCELLED": "Cancelled. The request was cancelled.",
    "UNKNOWN": "Unknown. The request failed for an unknown reason.",
    "ABORTED": "Aborted. The request was aborted, typically due to a concurrency conflict.",
    "ALREADY_EXISTS": "Already exists. The resource the request tried to create already exists.",
    "DATA_LOSS": "Data loss. Unrecoverable data loss or corruption.",
}


class GoogleMapsServiceError(GoogleMapsError):
    """The API server answered with a non-OK status."""
    side = "service"

    def __init__(self, status, error_message: str | None = None, api: str = "Platform"):
        super().__init__(status, error_message, api=api)
        self.status = status
        self.error_message = error_message

    def describe(self) -> str:
        if self.error_message:
            return self.error_message
        status = _render(self.status)
        return SERVICE_STATUS_MESSAGES.get(status, f"The service responded with `{status}`.")


# --- Transport and decoding ---

class TransportError(GoogleMapsError):
    """The HTTP adapter could not complete the request."""

    def __init__(self, message: str, api: str = "Platform"):
        super().__init__(message, api=api)
        self.message = message

    def describe(self) -> str:
        return f"Could not reach the Google Maps Platform. {self.message}"


class HttpUnsuccessful(TransportError):
    def __init__(self, status_code: int, message: str | None = None, api: str = "Platform"):
        super().__init__(message or "", api=api)
        self.status_code = status_code
        self.message = message

    def describe(self) -> str:
        text = ("Could not successfully query the Google Maps Platform. The service last "
                f"responded with a `{self.status_code}` status.")
        if self.message:
            return f"{text} {self.message}"
        return text


class DecodeError(GoogleMapsError):
    """The response body did not match the expected JSON schema."""

    def __init__(self, message: str, api: str = "Platform"):
        super().__init__(message, api=api)
        self.message = message

    def describe(self) -> str:
        return f"Could not decode the response. {self.message}"
