# Defines the value types sent to, and the structures decoded from, the Google Maps Platform.

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from api_codes import (
    ElementStatus,
    LocationType,
    ManeuverType,
    PlaceType,
    Status,
    TravelMode,
    VehicleType,
)
from api_errors import InvalidLatitude, InvalidLatLongString, InvalidLongitude


def _optional(data: dict, key: str, parse):
    """Applies `parse` to `data[key]`, keeping an absent or null field as None."""
    value = data.get(key)
    if value is None:
        return None
    return parse(value)


def _optional_list(data: dict, key: str, parse):
    """Like `_optional`, for arrays. An absent array is None, not an empty list."""
    values = data.get(key)
    if values is None:
        return None
    return [parse(value) for value in values]


def _plain(value) -> str:
    """Renders a coordinate as a plain decimal. The web services reject `1e-05`."""
    return format(Decimal(str(value)), "f")


# --- Request values ---

@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in decimal degrees."""
    lat: float
    lng: float

    def __post_init__(self):
        if not -90.0 <= self.lat <= 90.0:
            raise InvalidLatitude(self.lat, self.lng)
        if not -180.0 <= self.lng <= 180.0:
            raise InvalidLongitude(self.lat, self.lng)

    @classmethod
    def from_str(cls, value: str) -> "LatLng":
        """Parses a `"latitude,longitude"` string."""
        parts = value.split(",")
        if len(parts) != 2:
            raise InvalidLatLongString(value)
        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError:
            raise InvalidLatLongString(value) from None
        return cls(lat, lng)

    @classmethod
    def from_json(cls, data: dict) -> "LatLng":
        return cls(lat=data["lat"], lng=data["lng"])

    def __str__(self) -> str:
        return f"{_plain(self.lat)},{_plain(self.lng)}"


@dataclass(frozen=True)
class PlaceId:
    """A location referenced by its Google place ID."""
    value: str

    def __str__(self) -> str:
        return f"place_id:{self.value}"


# A location is a plain address string, a LatLng or a PlaceId. str() renders any of them.
Location = str | LatLng | PlaceId


# --- Shared response structures ---

@dataclass(frozen=True)
class TextValue:
    """A distance (metres) or duration (seconds) with its localized text."""
    text: str | None = None
    value: int | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TextValue":
        return cls(text=data.get("text"), value=data.get("value"))


@dataclass(frozen=True)
class Polyline:
    """An encoded polyline."""
    points: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Polyline":
        return cls(points=data.get("points"))


@dataclass(frozen=True)
class Bounds:
    northeast: LatLng | None = None
    southwest: LatLng | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Bounds":
        return cls(
            northeast=_optional(data, "northeast", LatLng.from_json),
            southwest=_optional(data, "southwest", LatLng.from_json),
        )


@dataclass(frozen=True)
class Fare:
    """The total fare on a transit route."""
    currency: str | None = None
    text: str | None = None
    value: float | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Fare":
        return cls(currency=data.get("currency"), text=data.get("text"), value=data.get("value"))


# --- Transit ---

@dataclass(frozen=True)
class TransitTime:
    """An arrival or departure time. `value` is seconds since the Unix epoch."""
    text: str | None = None
    time_zone: str | None = None
    value: int | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitTime":
        return cls(text=data.get("text"), time_zone=data.get("time_zone"), value=data.get("value"))

    def as_datetime(self) -> datetime | None:
        """The time as an aware datetime in the stop's own time zone (UTC when unknown)."""
        if self.value is None:
            return None
        tz = ZoneInfo(self.time_zone) if self.time_zone else timezone.utc
        return datetime.fromtimestamp(self.value, tz)


@dataclass(frozen=True)
class TransitStop:
    name: str | None = None
    location: LatLng | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitStop":
        return cls(name=data.get("name"), location=_optional(data, "location", LatLng.from_json))


@dataclass(frozen=True)
class TransitAgency:
    name: str | None = None
    phone: str | None = None
    url: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitAgency":
        return cls(name=data.get("name"), phone=data.get("phone"), url=data.get("url"))


@dataclass(frozen=True)
class TransitVehicle:
    name: str | None = None
    type: VehicleType | None = None
    icon: str | None = None
    local_icon: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitVehicle":
        return cls(
            name=data.get("name"),
            type=_optional(data, "type", VehicleType.from_code),
            icon=data.get("icon"),
            local_icon=data.get("local_icon"),
        )


@dataclass(frozen=True)
class TransitLine:
    """The public transit line used in a step."""
    name: str | None = None
    short_name: str | None = None
    color: str | None = None
    text_color: str | None = None
    url: str | None = None
    icon: str | None = None
    agencies: list[TransitAgency] | None = None
    vehicle: TransitVehicle | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitLine":
        return cls(
            name=data.get("name"),
            short_name=data.get("short_name"),
            color=data.get("color"),
            text_color=data.get("text_color"),
            url=data.get("url"),
            icon=data.get("icon"),
            agencies=_optional_list(data, "agencies", TransitAgency.from_json),
            vehicle=_optional(data, "vehicle", TransitVehicle.from_json),
        )


@dataclass(frozen=True)
class TransitDetails:
    """Transit-specific metadata of a step: stops, times, headsign and line."""
    arrival_stop: TransitStop | None = None
    departure_stop: TransitStop | None = None
    arrival_time: TransitTime | None = None
    departure_time: TransitTime | None = None
    headsign: str | None = None
    headway: int | None = None
    num_stops: int | None = None
    trip_short_name: str | None = None
    line: TransitLine | None = None

    @classmethod
    def from_json(cls, data: dict) -> "TransitDetails":
        return cls(
            arrival_stop=_optional(data, "arrival_stop", TransitStop.from_json),
            departure_stop=_optional(data, "departure_stop", TransitStop.from_json),
            arrival_time=_optional(data, "arrival_time", TransitTime.from_json),
            departure_time=_optional(data, "departure_time", TransitTime.from_json),
            headsign=data.get("headsign"),
            headway=data.get("headway"),
            num_stops=data.get("num_stops"),
            trip_short_name=data.get("trip_short_name"),
            line=_optional(data, "line", TransitLine.from_json),
        )


# --- Directions ---

@dataclass(frozen=True)
class Step:
    """
    The most atomic unit of a route, e.g. "Turn left at W. 4th St.".
    In transit directions a walking or driving step carries its detailed
    instructions in the inner `steps` list, which has the same shape.
    """
    distance: TextValue | None = None
    duration: TextValue | None = None
    start_location: LatLng | None = None
    end_location: LatLng | None = None
    html_instructions: str | None = None
    maneuver: ManeuverType | None = None
    polyline: Polyline | None = None
    steps: list["Step"] | None = None
    transit_details: TransitDetails | None = None
    travel_mode: TravelMode | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Step":
        return cls(
            distance=_optional(data, "distance", TextValue.from_json),
            duration=_optional(data, "duration", TextValue.from_json),
            start_location=_optional(data, "start_location", LatLng.from_json),
            end_location=_optional(data, "end_location", LatLng.from_json),
            html_instructions=data.get("html_instructions"),
            maneuver=_optional(data, "maneuver", ManeuverType.from_code),
            polyline=_optional(data, "polyline", Polyline.from_json),
            steps=_optional_list(data, "steps", Step.from_json),
            transit_details=_optional(data, "transit_details", TransitDetails.from_json),
            travel_mode=_optional(data, "travel_mode", TravelMode.from_code),
        )

    def get_maneuver(self) -> str | None:
        """The maneuver as its wire code, or None when the step has no maneuver."""
        if self.maneuver is None:
            return None
        return self.maneuver.to_code()


@dataclass(frozen=True)
class Leg:
    """One leg of a route, between the origin, a waypoint or the destination."""
    steps: list[Step] | None = None
    distance: TextValue | None = None
    duration: TextValue | None = None
    duration_in_traffic: TextValue | None = None
    arrival_time: TransitTime | None = None
    departure_time: TransitTime | None = None
    start_location: LatLng | None = None
    end_location: LatLng | None = None
    start_address: str | None = None
    end_address: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Leg":
        return cls(
            steps=_optional_list(data, "steps", Step.from_json),
            distance=_optional(data, "distance", TextValue.from_json),
            duration=_optional(data, "duration", TextValue.from_json),
            duration_in_traffic=_optional(data, "duration_in_traffic", TextValue.from_json),
            arrival_time=_optional(data, "arrival_time", TransitTime.from_json),
            departure_time=_optional(data, "departure_time", TransitTime.from_json),
            start_location=_optional(data, "start_location", LatLng.from_json),
            end_location=_optional(data, "end_location", LatLng.from_json),
            start_address=data.get("start_address"),
            end_address=data.get("end_address"),
        )


@dataclass(frozen=True)
class Route:
    summary: str | None = None
    legs: list[Leg] | None = None
    waypoint_order: list[int] | None = None
    overview_polyline: Polyline | None = None
    bounds: Bounds | None = None
    copyrights: str | None = None
    warnings: list[str] | None = None
    fare: Fare | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Route":
        return cls(
            summary=data.get("summary"),
            legs=_optional_list(data, "legs", Leg.from_json),
            waypoint_order=data.get("waypoint_order"),
            overview_polyline=_optional(data, "overview_polyline", Polyline.from_json),
            bounds=_optional(data, "bounds", Bounds.from_json),
            copyrights=data.get("copyrights"),
            warnings=data.get("warnings"),
            fare=_optional(data, "fare", Fare.from_json),
        )


@dataclass(frozen=True)
class GeocodedWaypoint:
    geocoder_status: Status | None = None
    place_id: str | None = None
    types: list[PlaceType] | None = None
    partial_match: bool | None = None

    @classmethod
    def from_json(cls, data: dict) -> "GeocodedWaypoint":
        return cls(
            geocoder_status=_optional(data, "geocoder_status", Status.from_code),
            place_id=data.get("place_id"),
            types=_optional_list(data, "types", PlaceType.from_code),
            partial_match=data.get("partial_match"),
        )


@dataclass(frozen=True)
class DirectionsResponse:
    status: Status | None = None
    error_message: str | None = None
    geocoded_waypoints: list[GeocodedWaypoint] | None = None
    routes: list[Route] | None = None
    available_travel_modes: list[TravelMode] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "DirectionsResponse":
        return cls(
            status=_optional(data, "status", Status.from_code),
            error_message=data.get("error_message"),
            geocoded_waypoints=_optional_list(data, "geocoded_waypoints", GeocodedWaypoint.from_json),
            routes=_optional_list(data, "routes", Route.from_json),
            available_travel_modes=_optional_list(data, "available_travel_modes", TravelMode.from_code),
        )


# --- Distance Matrix ---

@dataclass(frozen=True)
class Element:
    """The trip between one origin and one destination."""
    status: ElementStatus | None = None
    distance: TextValue | None = None
    duration: TextValue | None = None
    duration_in_traffic: TextValue | None = None
    fare: Fare | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Element":
        return cls(
            status=_optional(data, "status", ElementStatus.from_code),
            distance=_optional(data, "distance", TextValue.from_json),
            duration=_optional(data, "duration", TextValue.from_json),
            duration_in_traffic=_optional(data, "duration_in_traffic", TextValue.from_json),
            fare=_optional(data, "fare", Fare.from_json),
        )


@dataclass(frozen=True)
class Row:
    """One row per origin, one element per destination."""
    elements: list[Element] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Row":
        return cls(elements=_optional_list(data, "elements", Element.from_json))


@dataclass(frozen=True)
class DistanceMatrixResponse:
    status: Status | None = None
    error_message: str | None = None
    origin_addresses: list[str] | None = None
    destination_addresses: list[str] | None = None
    rows: list[Row] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "DistanceMatrixResponse":
        return cls(
            status=_optional(data, "status", Status.from_code),
            error_message=data.get("error_message"),
            origin_addresses=data.get("origin_addresses"),
            destination_addresses=data.get("destination_addresses"),
            rows=_optional_list(data, "rows", Row.from_json),
        )

    def element(self, origin: int, destination: int) -> Element:
        """The element for the `origin`-th origin and `destination`-th destination."""
        return self.rows[origin].elements[destination]


# --- Geocoding ---

@dataclass(frozen=True)
class AddressComponent:
    long_name: str | None = None
    short_name: str | None = None
    types: list[PlaceType] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "AddressComponent":
        return cls(
            long_name=data.get("long_name"),
            short_name=data.get("short_name"),
            types=_optional_list(data, "types", PlaceType.from_code),
        )


@dataclass(frozen=True)
class Geometry:
    location: LatLng | None = None
    location_type: LocationType | None = None
    viewport: Bounds | None = None
    bounds: Bounds | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Geometry":
        return cls(
            location=_optional(data, "location", LatLng.from_json),
            location_type=_optional(data, "location_type", LocationType.from_code),
            viewport=_optional(data, "viewport", Bounds.from_json),
            bounds=_optional(data, "bounds", Bounds.from_json),
        )


@dataclass(frozen=True)
class PlusCode:
    global_code: str | None = None
    compound_code: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "PlusCode":
        return cls(global_code=data.get("global_code"), compound_code=data.get("compound_code"))


@dataclass(frozen=True)
class GeocodingResult:
    address_components: list[AddressComponent] | None = None
    formatted_address: str | None = None
    geometry: Geometry | None = None
    place_id: str | None = None
    plus_code: PlusCode | None = None
    types: list[PlaceType] | None = None
    partial_match: bool | None = None
    postcode_localities: list[str] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "GeocodingResult":
        return cls(
            address_components=_optional_list(data, "address_components", AddressComponent.from_json),
            formatted_address=data.get("formatted_address"),
            geometry=_optional(data, "geometry", Geometry.from_json),
            place_id=data.get("place_id"),
            plus_code=_optional(data, "plus_code", PlusCode.from_json),
            types=_optional_list(data, "types", PlaceType.from_code),
            partial_match=data.get("partial_match"),
            postcode_localities=data.get("postcode_localities"),
        )


@dataclass(frozen=True)
class GeocodingResponse:
    status: Status | None = None
    error_message: str | None = None
    results: list[GeocodingResult] | None = None
    plus_code: PlusCode | None = None

    @classmethod
    def from_json(cls, data: dict) -> "GeocodingResponse":
        return cls(
            status=_optional(data, "status", Status.from_code),
            error_message=data.get("error_message"),
            results=_optional_list(data, "results", GeocodingResult.from_json),
            plus_code=_optional(data, "plus_code", PlusCode.from_json),
        )


# --- Roads ---

@dataclass(frozen=True)
class SnappedPoint:
    """A point snapped to the nearest road segment."""
    location: LatLng | None = None
    original_index: int | None = None
    place_id: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "SnappedPoint":
        location = data.get("location")
        if location is not None:
            location = LatLng(lat=location["latitude"], lng=location["longitude"])
        return cls(
            location=location,
            original_index=data.get("originalIndex"),
            place_id=data.get("placeId"),
        )


@dataclass(frozen=True)
class NearestRoadsResponse:
    snapped_points: list[SnappedPoint] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "NearestRoadsResponse":
        return cls(snapped_points=_optional_list(data, "snappedPoints", SnappedPoint.from_json))
