import logging

import requests

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown Location"


class ReverseGeocoder:
    """
    Turns coordinates into a display name using a Nominatim-style
    /reverse endpoint.

    Lookups never raise: every failure (network, status, body) is logged
    and mapped to UNKNOWN_LOCATION.
    """

    def __init__(self, base_url, user_agent, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def location_name(self, lat, lon):
        try:
            response = requests.get(
                f"{self.base_url}/reverse",
                params={"format": "json", "lat": lat, "lon": lon},
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Error fetching location name for (%s, %s): %s", lat, lon, e)
            return UNKNOWN_LOCATION

        name = data.get("display_name") if isinstance(data, dict) else None
        if not name:
            logger.warning("No display_name for (%s, %s)", lat, lon)
            return UNKNOWN_LOCATION
        return name
