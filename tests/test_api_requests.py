"""
Unit tests for the request builders: validation rules, call ordering,
query string rendering and response handling.
"""

from datetime import datetime, timezone

import pytest

from api_codes import Avoid, Region, RoadsStatus, Status, TransitMode, TravelMode
from api_errors import (
    AddressOrComponentsRequired,
    ArrivalTimeIsForTransitOnly,
    DecodeError,
    EitherAlternativesOrWaypoints,
    EitherDepartureTimeOrArrivalTime,
    EitherLatLngOrPlaceId,
    EitherRestrictionsOrWaypoints,
    EitherWaypointsOrTransitMode,
    GoogleMapsServiceError,
    HttpUnsuccessful,
    InvalidArrivalTime,
    InvalidDepartureTime,
    InvalidManeuverTypeCode,
    InvalidRegionCode,
    InvalidStatusCode,
    InvalidTravelModeCode,
    QueryNotBuilt,
    RequestNotReusable,
    RequestNotValidated,
    TooManyPoints,
    TooManyWaypoints,
    TransitModeIsForTransitOnly,
    TransitRoutePreferenceIsForTransitOnly,
)
from api_requests import NOW, RequestState
from api_structures import Bounds, DirectionsResponse, LatLng, PlaceId

ARRIVAL = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
DEPARTURE = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def waypoints(count):
    return [f"Stop {index}" for index in range(count)]


# ---------------------------------------------------------------------------
# Directions validation
# ---------------------------------------------------------------------------


class TestDirectionsValidation:

    def test_arrival_time_requires_transit(self, client):
        request = client.directions("Toronto", "Montreal").with_arrival_time(ARRIVAL)
        with pytest.raises(ArrivalTimeIsForTransitOnly) as excinfo:
            request.validate()
        assert excinfo.value.travel_mode is TravelMode.DRIVING
        assert excinfo.value.arrival_time == ARRIVAL

    def test_arrival_time_with_walking(self, client):
        request = (client.directions("Toronto", "Montreal")
                   .with_travel_mode(TravelMode.WALKING)
                   .with_arrival_time(ARRIVAL))
        with pytest.raises(ArrivalTimeIsForTransitOnly):
            request.validate()

    def test_arrival_time_with_transit_is_valid(self, client):
        request = (client.directions("Toronto", "Montreal")
                   .with_travel_mode("transit")
                   .with_arrival_time(ARRIVAL))
        assert request.validate().state is RequestState.VALIDATED

    @pytest.mark.parametrize("mode", [TravelMode.TRANSIT, TravelMode.DRIVING])
    def test_arrival_and_departure_regardless_of_order(self, client, mode):
        first = (client.directions("A", "B").with_travel_mode(mode)
                 .with_arrival_time(ARRIVAL).with_departure_time(DEPARTURE))
        second = (client.directions("A", "B").with_departure_time(DEPARTURE)
                  .with_arrival_time(ARRIVAL).with_travel_mode(mode))
        for request in (first, second):
            with pytest.raises(EitherDepartureTimeOrArrivalTime):
                request.validate()

    def test_waypoints_with_transit(self, client):
        request = (client.directions("A", "B").with_travel_mode(TravelMode.TRANSIT)
                   .with_waypoints(waypoints(2)))
        with pytest.raises(EitherWaypointsOrTransitMode) as excinfo:
            request.validate()
        assert excinfo.value.waypoint_count == 2

    def test_twenty_five_waypoints_are_allowed(self, client):
        request = client.directions("A", "B").with_waypoints(waypoints(25))
        assert request.validate().state is RequestState.VALIDATED

    def test_too_many_waypoints(self, client):
        request = client.directions("A", "B").with_waypoints(waypoints(31))
        with pytest.raises(TooManyWaypoints) as excinfo:
            request.validate()
        assert excinfo.value.waypoint_count == 31
        assert "Try again with 6 fewer waypoint(s)." in str(excinfo.value)

    def test_alternatives_with_waypoints(self, client):
        request = client.directions("A", "B").with_waypoints(waypoints(1)).with_alternatives(True)
        with pytest.raises(EitherAlternativesOrWaypoints):
            request.validate()

    def test_alternatives_false_with_waypoints_is_valid(self, client):
        request = client.directions("A", "B").with_waypoints(waypoints(1)).with_alternatives(False)
        request.validate()

    def test_restrictions_with_waypoints(self, client):
        request = (client.directions("A", "B").with_waypoints(waypoints(3))
                   .with_restrictions([Avoid.TOLLS]))
        with pytest.raises(EitherRestrictionsOrWaypoints) as excinfo:
            request.validate()
        assert excinfo.value.restrictions == [Avoid.TOLLS]

    def test_transit_modes_require_transit(self, client):
        request = client.directions("A", "B").with_transit_modes(["bus", TransitMode.TRAM])
        with pytest.raises(TransitModeIsForTransitOnly):
            request.validate()

    def test_transit_route_preference_requires_transit(self, client):
        request = (client.directions("A", "B").with_travel_mode("bicycling")
                   .with_transit_route_preference("less_walking"))
        with pytest.raises(TransitRoutePreferenceIsForTransitOnly):
            request.validate()

    def test_first_violated_rule_wins(self, client):
        request = (client.directions("A", "B").with_waypoints(waypoints(30))
                   .with_alternatives(True).with_restrictions(["ferries"]))
        with pytest.raises(TooManyWaypoints):
            request.validate()

    def test_invalid_code_in_setter(self, client):
        with pytest.raises(InvalidTravelModeCode) as excinfo:
            client.directions("A", "B").with_travel_mode("teleport")
        assert excinfo.value.api == "Directions"

    @pytest.mark.parametrize("departure_time", ["tomorrow", "NOW", 1704099600, None])
    def test_departure_time_must_be_a_datetime_or_now(self, client, departure_time):
        with pytest.raises(InvalidDepartureTime) as excinfo:
            client.directions("A", "B").with_departure_time(departure_time)
        assert excinfo.value.departure_time == departure_time

    def test_arrival_time_must_be_a_datetime(self, client):
        with pytest.raises(InvalidArrivalTime):
            client.distance_matrix(["A"], ["B"]).with_travel_mode("transit").with_arrival_time("noon")

    def test_unknown_region(self, client):
        with pytest.raises(InvalidRegionCode) as excinfo:
            client.directions("A", "B").with_region("narnia")
        assert excinfo.value.code == "narnia"

    def test_region_is_parsed(self, client):
        assert client.geocoding().with_region("UK").region is Region.UNITED_KINGDOM


# ---------------------------------------------------------------------------
# Call ordering
# ---------------------------------------------------------------------------


class TestRequestSequence:

    def test_build_before_validate(self, client):
        request = client.directions("A", "B").with_travel_mode("walking")
        with pytest.raises(RequestNotValidated):
            request.build()

    def test_get_before_build(self, client):
        request = client.directions("A", "B").validate()
        with pytest.raises(QueryNotBuilt):
            request.get()

    def test_setter_after_build_requires_new_validation(self, client):
        request = client.directions("A", "B").validate().build()
        request.with_alternatives(True)
        assert request.state is RequestState.CONFIGURED
        assert request.query is None
        with pytest.raises(QueryNotBuilt):
            request.get()

    def test_states(self, client, adapter, directions_payload):
        adapter.queue(directions_payload)
        request = client.directions("A", "B")
        assert request.state is RequestState.EMPTY
        request.with_region("ca")
        assert request.state is RequestState.CONFIGURED
        assert request.validate().state is RequestState.VALIDATED
        assert request.build().state is RequestState.BUILT
        request.get()
        assert request.state is RequestState.EXECUTED

    def test_executed_request_is_not_reusable(self, client, adapter, directions_payload):
        adapter.queue(directions_payload)
        request = client.directions("A", "B")
        request.execute()
        with pytest.raises(RequestNotReusable):
            request.get()
        with pytest.raises(RequestNotReusable):
            request.with_alternatives(True)

    def test_failed_validation_is_terminal(self, client):
        request = client.directions("A", "B").with_arrival_time(ARRIVAL)
        with pytest.raises(ArrivalTimeIsForTransitOnly):
            request.validate()
        assert request.state is RequestState.FAILED
        with pytest.raises(RequestNotReusable):
            request.with_travel_mode("transit")


# ---------------------------------------------------------------------------
# Query strings
# ---------------------------------------------------------------------------


class TestQueryStrings:

    def test_directions_transit(self, client):
        request = (client.directions("Toronto", "Montreal")
                   .with_travel_mode(TravelMode.TRANSIT)
                   .with_arrival_time(ARRIVAL)
                   .with_transit_modes([TransitMode.SUBWAY, TransitMode.TRAIN])
                   .with_transit_route_preference("fewer_transfers"))
        assert request.validate().build().query == (
            "key=test-key&origin=Toronto&destination=Montreal&mode=transit"
            "&arrival_time=1704110400&transit_mode=subway|train"
            "&transit_routing_preference=fewer_transfers")

    def test_directions_waypoints_are_pipe_delimited(self, client):
        request = (client.directions("Toronto, ON", PlaceId("ChIJDbdkHFQayUwR7"))
                   .with_waypoints(["Kingston", LatLng(44.23, -76.48)], optimize=True))
        assert request.validate().build().query == (
            "key=test-key&origin=Toronto,%20ON&destination=place_id:ChIJDbdkHFQayUwR7"
            "&waypoints=optimize:true|Kingston|44.23,-76.48")

    def test_directions_driving_options(self, client):
        request = (client.directions("A", "B")
                   .with_alternatives(True)
                   .with_restrictions(["tolls", Avoid.HIGHWAYS])
                   .with_departure_time(NOW)
                   .with_traffic_model("pessimistic")
                   .with_unit_system("imperial")
                   .with_language("fr-CA")
                   .with_region("ca"))
        assert request.validate().build().query == (
            "key=test-key&origin=A&destination=B&alternatives=true&avoid=tolls|highways"
            "&departure_time=now&traffic_model=pessimistic&units=imperial"
            "&language=fr-CA&region=ca")

    def test_distance_matrix(self, client):
        request = (client.distance_matrix(["Vancouver BC", LatLng(49.28, -123.12)],
                                          ["Seattle", PlaceId("ChIJVTPokywQkFQRmtVEaUZlJRA")])
                   .with_departure_time(DEPARTURE))
        assert request.validate().build().query == (
            "key=test-key&origins=Vancouver%20BC|49.28,-123.12"
            "&destinations=Seattle|place_id:ChIJVTPokywQkFQRmtVEaUZlJRA"
            "&departure_time=1704099600")

    def test_geocoding(self, client):
        request = (client.geocoding()
                   .with_address("1600 Amphitheatre Parkway")
                   .with_components({"country": "US", "postal_code": "94043"})
                   .with_bounds(Bounds(northeast=LatLng(37.5, -122.0), southwest=LatLng(37.3, -122.2))))
        assert request.validate().build().query == (
            "key=test-key&address=1600%20Amphitheatre%20Parkway"
            "&components=country:US|postal_code:94043&bounds=37.3,-122.2|37.5,-122.0")

    def test_reverse_geocoding(self, client):
        request = (client.reverse_geocoding()
                   .with_latlng("40.714224,-73.961452")
                   .with_result_types(["street_address", "postal_code"])
                   .with_location_types(["ROOFTOP"]))
        assert request.validate().build().query == (
            "key=test-key&latlng=40.714224,-73.961452&result_type=street_address|postal_code"
            "&location_type=ROOFTOP")

    def test_coordinates_near_zero(self, client):
        request = client.directions(LatLng(0.00001, 100.0), LatLng(-0.00005, 1e-7))
        assert request.validate().build().query == (
            "key=test-key&origin=0.00001,100.0&destination=-0.00005,0.0000001")

    def test_region_is_lower_cased(self, client):
        request = client.geocoding().with_address("Toledo").with_region("ES")
        assert request.validate().build().query == "key=test-key&address=Toledo&region=es"

    def test_url(self, client):
        request = client.directions("A", "B").validate().build()
        assert request.url() == (
            "https://maps.googleapis.com/maps/api/directions/json?key=test-key&origin=A&destination=B")


# ---------------------------------------------------------------------------
# Other validation
# ---------------------------------------------------------------------------


class TestOtherValidation:

    def test_distance_matrix_arrival_time(self, client):
        request = client.distance_matrix(["A"], ["B"]).with_arrival_time(ARRIVAL)
        with pytest.raises(ArrivalTimeIsForTransitOnly) as excinfo:
            request.validate()
        assert excinfo.value.api == "Distance Matrix"

    def test_geocoding_needs_a_query(self, client):
        with pytest.raises(AddressOrComponentsRequired):
            client.geocoding().with_region("ca").validate()

    def test_geocoding_with_components_only(self, client):
        client.geocoding().with_components({"locality": "Toronto"}).validate()

    @pytest.mark.parametrize("latlng, place_id", [(None, None), ("1,2", "ChIJ")])
    def test_reverse_geocoding_needs_exactly_one_target(self, client, latlng, place_id):
        request = client.reverse_geocoding()
        if latlng:
            request.with_latlng(latlng)
        if place_id:
            request.with_place_id(place_id)
        with pytest.raises(EitherLatLngOrPlaceId):
            request.validate()

    def test_too_many_road_points(self, client):
        points = [LatLng(60.0, 24.0 + index / 1000) for index in range(101)]
        with pytest.raises(TooManyPoints) as excinfo:
            client.nearest_roads(points).validate()
        assert excinfo.value.point_count == 101


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TestResponses:

    def test_execute_decodes_directions(self, client, adapter, directions_payload):
        adapter.queue(directions_payload)
        response = client.directions("Toronto", "Montreal").execute()
        assert isinstance(response, DirectionsResponse)
        assert response.routes[0].legs[0].end_address == "Montreal, QC, Canada"
        assert adapter.urls == [
            "https://maps.googleapis.com/maps/api/directions/json"
            "?key=test-key&origin=Toronto&destination=Montreal"]

    def test_service_error_uses_server_message(self, client, adapter):
        adapter.queue({"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."})
        request = client.directions("A", "B")
        with pytest.raises(GoogleMapsServiceError) as excinfo:
            request.execute()
        assert excinfo.value.status is Status.REQUEST_DENIED
        assert str(excinfo.value) == (
            "Google Maps Directions API service: The provided API key is invalid.")
        assert request.state is RequestState.FAILED

    def test_service_error_without_message(self, client, adapter):
        adapter.queue({"status": "ZERO_RESULTS", "routes": []})
        with pytest.raises(GoogleMapsServiceError) as excinfo:
            client.geocoding().with_address("nowhere").execute()
        assert "No results were found" in str(excinfo.value)

    def test_unknown_status(self, client, adapter):
        adapter.queue({"status": "SOMETHING_NEW"})
        with pytest.raises(InvalidStatusCode):
            client.directions("A", "B").execute()

    def test_http_failure(self, client, adapter):
        adapter.queue("Service Unavailable", status_code=503)
        with pytest.raises(HttpUnsuccessful) as excinfo:
            client.distance_matrix(["A"], ["B"]).execute()
        assert excinfo.value.status_code == 503

    def test_body_is_not_json(self, client, adapter):
        adapter.queue("<html>oops</html>")
        with pytest.raises(DecodeError):
            client.directions("A", "B").execute()

    def test_schema_mismatch(self, client, adapter):
        adapter.queue({"status": "OK", "routes": [{"legs": "not-a-list"}]})
        with pytest.raises(DecodeError):
            client.directions("A", "B").execute()

    def test_missing_status(self, client, adapter):
        adapter.queue({"routes": []})
        with pytest.raises(DecodeError):
            client.directions("A", "B").execute()

    def test_nearest_roads(self, client, adapter):
        adapter.queue({"snappedPoints": [
            {"location": {"latitude": 60.17, "longitude": 24.94}, "originalIndex": 1, "placeId": "abc"},
        ]})
        response = client.nearest_roads([LatLng(60.17, 24.94), "60.171,24.942"]).execute()
        assert response.snapped_points[0].original_index == 1
        assert adapter.urls == [
            "https://roads.googleapis.com/v1/nearestRoads?key=test-key&points=60.17,24.94|60.171,24.942"]

    def test_nearest_roads_error_body(self, client, adapter):
        adapter.queue({"error": {"code": 400, "message": "Invalid request. Invalid 'points' parameter.",
                                 "status": "INVALID_ARGUMENT"}}, status_code=400)
        with pytest.raises(GoogleMapsServiceError) as excinfo:
            client.nearest_roads(["60.17,24.94"]).execute()
        assert excinfo.value.status is RoadsStatus.INVALID_ARGUMENT
        assert "Invalid 'points' parameter." in str(excinfo.value)

    def test_nearest_roads_http_failure_without_body(self, client, adapter):
        adapter.queue("", status_code=502)
        with pytest.raises(HttpUnsuccessful):
            client.nearest_roads(["60.17,24.94"]).execute()

    def test_nearest_roads_unauthenticated(self, client, adapter):
        adapter.queue({"error": {"code": 401, "message": "API key not valid. Please pass a valid API key.",
                                 "status": "UNAUTHENTICATED"}}, status_code=401)
        with pytest.raises(GoogleMapsServiceError) as excinfo:
            client.nearest_roads(["60.17,24.94"]).execute()
        assert excinfo.value.status is RoadsStatus.UNAUTHENTICATED
        assert str(excinfo.value) == (
            "Google Maps Roads API service: API key not valid. Please pass a valid API key.")

    def test_nearest_roads_unrecognised_status_keeps_message(self, client, adapter):
        adapter.queue({"error": {"code": 418, "message": "Short and stout.",
                                 "status": "TEAPOT"}}, status_code=418)
        with pytest.raises(HttpUnsuccessful) as excinfo:
            client.nearest_roads(["60.17,24.94"]).execute()
        assert excinfo.value.status_code == 418
        assert "Short and stout." in str(excinfo.value)

    def test_decoding_errors_name_the_api(self, client, adapter):
        adapter.queue({"status": "OK", "routes": [{"legs": [{"steps": [{"maneuver": "barrel-roll"}]}]}]})
        with pytest.raises(InvalidManeuverTypeCode) as excinfo:
            client.directions("A", "B").execute()
        assert str(excinfo.value).startswith("Google Maps Directions API client: ")

    def test_unknown_status_names_the_api(self, client, adapter):
        adapter.queue({"status": "SOMETHING_NEW"})
        with pytest.raises(InvalidStatusCode) as excinfo:
            client.geocoding().with_address("x").execute()
        assert excinfo.value.api == "Geocoding"
