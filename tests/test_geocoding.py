import unittest
from unittest.mock import Mock, patch

import requests

from server.eazepark.geocoding import ReverseGeocoder, UNKNOWN_LOCATION
from server.eazepark.services import resolve_locations
from tests.base import FakeGeocoder


def fake_response(payload=None, json_error=None, http_error=None):
    response = Mock()
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if http_error:
        response.raise_for_status.side_effect = http_error
    return response


class TestReverseGeocoder(unittest.TestCase):

    def setUp(self):
        self.geocoder = ReverseGeocoder("http://geo.test/", "eazepark-tests", timeout=3)

    @patch("server.eazepark.geocoding.requests.get")
    def test_returns_display_name(self, mock_get):
        mock_get.return_value = fake_response({"display_name": "Eiffel Tower, Paris"})

        self.assertEqual(self.geocoder.location_name(48.8584, 2.2945), "Eiffel Tower, Paris")
        mock_get.assert_called_once_with(
            "http://geo.test/reverse",
            params={"format": "json", "lat": 48.8584, "lon": 2.2945},
            headers={"User-Agent": "eazepark-tests"},
            timeout=3
        )

    @patch("server.eazepark.geocoding.requests.get")
    def test_network_error_falls_back(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)

    @patch("server.eazepark.geocoding.requests.get")
    def test_timeout_falls_back(self, mock_get):
        mock_get.side_effect = requests.Timeout()
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)

    @patch("server.eazepark.geocoding.requests.get")
    def test_http_error_falls_back(self, mock_get):
        mock_get.return_value = fake_response(http_error=requests.HTTPError("503"))
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)

    @patch("server.eazepark.geocoding.requests.get")
    def test_malformed_body_falls_back(self, mock_get):
        mock_get.return_value = fake_response(json_error=ValueError("no json"))
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)

    @patch("server.eazepark.geocoding.requests.get")
    def test_missing_display_name_falls_back(self, mock_get):
        mock_get.return_value = fake_response({"error": "Unable to geocode"})
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)

    @patch("server.eazepark.geocoding.requests.get")
    def test_non_object_body_falls_back(self, mock_get):
        mock_get.return_value = fake_response(["not", "an", "object"])
        self.assertEqual(self.geocoder.location_name(1, 2), UNKNOWN_LOCATION)


class TestResolveLocations(unittest.TestCase):

    def test_results_keep_request_order(self):
        geocoder = FakeGeocoder({(1, 1): "first", (2, 2): "second"})

        self.assertEqual(resolve_locations(geocoder, (1, 1), (2, 2)), ["first", "second"])
        self.assertEqual(resolve_locations(geocoder, (2, 2), (1, 1)), ["second", "first"])


if __name__ == '__main__':
    unittest.main()
