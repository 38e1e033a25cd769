import json

import pytest

from api_adapters import ApiAdapter, GoogleMapsClient, HttpResponse


class FakeAdapter(ApiAdapter):
    """Records every URL it is asked for and replays queued responses."""

    def __init__(self):
        self.urls = []
        self.responses = []

    def queue(self, payload, status_code: int = 200):
        text = payload if isinstance(payload, str) else json.dumps(payload)
        self.responses.append(HttpResponse(status_code=status_code, text=text))

    def send(self, url: str) -> HttpResponse:
        self.urls.append(url)
        return self.responses.pop(0)


@pytest.fixture
def adapter():
    return FakeAdapter()


@pytest.fixture
def client(adapter):
    return GoogleMapsClient(api_key="test-key", adapter=adapter)


@pytest.fixture
def directions_payload():
    return {
        "status": "OK",
        "geocoded_waypoints": [
            {"geocoder_status": "OK", "place_id": "ChIJpTvG15DL1IkRd8S0KlBVNTI",
             "types": ["locality", "political"]},
            {"geocoder_status": "OK", "place_id": "ChIJDbdkHFQayUwR7-8fITgxTmU",
             "types": ["locality", "political"], "partial_match": True},
        ],
        "routes": [
            {
                "summary": "ON-401 E",
                "copyrights": "Map data ©2024 Google",
                "warnings": [],
                "waypoint_order": [],
                "overview_polyline": {"points": "a~l~Fjk~uOwHJy@P"},
                "bounds": {
                    "northeast": {"lat": 45.5031824, "lng": -73.5672559},
                    "southwest": {"lat": 43.6533096, "lng": -79.3834186},
                },
                "legs": [
                    {
                        "distance": {"text": "541 km", "value": 541234},
                        "duration": {"text": "5 hours 20 mins", "value": 19200},
                        "start_address": "Toronto, ON, Canada",
                        "end_address": "Montreal, QC, Canada",
                        "start_location": {"lat": 43.6533096, "lng": -79.3834186},
                        "end_location": {"lat": 45.5031824, "lng": -73.5672559},
                        "steps": [
                            {
                                "distance": {"text": "0.2 km", "value": 190},
                                "duration": {"text": "1 min", "value": 41},
                                "start_location": {"lat": 43.6533096, "lng": -79.3834186},
                                "end_location": {"lat": 43.6548, "lng": -79.3839},
                                "html_instructions": "Head <b>north</b> on <b>Bay St</b>",
                                "polyline": {"points": "e`miGhmocN"},
                                "travel_mode": "DRIVING",
                            },
                            {
                                "distance": {"text": "540 km", "value": 541044},
                                "duration": {"text": "5 hours 19 mins", "value": 19159},
                                "start_location": {"lat": 43.6548, "lng": -79.3839},
                                "end_location": {"lat": 45.5031824, "lng": -73.5672559},
                                "html_instructions": "Turn <b>right</b> onto <b>ON-401 E</b>",
                                "maneuver": "turn-right",
                                "polyline": {"points": "u{~vFvyys@"},
                                "travel_mode": "DRIVING",
                            },
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def transit_step_payload():
    return {
        "distance": {"text": "1.2 km", "value": 1200},
        "duration": {"text": "15 mins", "value": 900},
        "html_instructions": "Walk to Union Station",
        "travel_mode": "WALKING",
        "steps": [
            {
                "distance": {"text": "0.6 km", "value": 600},
                "html_instructions": "Head <b>south</b>",
                "travel_mode": "WALKING",
            },
            {
                "distance": {"text": "0.6 km", "value": 600},
                "html_instructions": "Turn <b>left</b>",
                "maneuver": "turn-left",
                "travel_mode": "WALKING",
            },
        ],
        "transit_details": {
            "arrival_stop": {"name": "Union Station", "location": {"lat": 43.6453, "lng": -79.3806}},
            "departure_stop": {"name": "King St", "location": {"lat": 43.6490, "lng": -79.3779}},
            "arrival_time": {"text": "7:15am", "time_zone": "America/Toronto", "value": 1704111300},
            "departure_time": {"text": "7:00am", "time_zone": "America/Toronto", "value": 1704110400},
            "headsign": "Finch",
            "num_stops": 3,
            "line": {
                "name": "Line 1 Yonge-University",
                "short_name": "1",
                "color": "#d5c82b",
                "agencies": [{"name": "TTC", "url": "http://www.ttc.ca/"}],
                "vehicle": {"name": "Subway", "type": "SUBWAY"},
            },
        },
    }
