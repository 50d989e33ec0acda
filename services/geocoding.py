# services/geocoding.py
"""
Address geocoding through the OpenStreetMap Nominatim search API.
"""
import logging
from typing import Tuple

import requests

import config

logger = logging.getLogger(__name__)


def geocode_address(address: str, city: str, country: str, postal_code: str) -> Tuple[float, float]:
     """
     Resolve a postal address to (longitude, latitude).

     Returns (0.0, 0.0) when the service finds no match.

     Raises:
          requests.RequestException: If the geocoding service is unreachable
               or answers with an error status
     """
     response = requests.get(
          config.GEOCODING_URL,
          params={
               "street": address,
               "city": city,
               "country": country,
               "postalcode": postal_code,
               "format": "json",
               "limit": "1",
          },
          headers={"User-Agent": config.GEOCODING_USER_AGENT},
          timeout=config.HTTP_TIMEOUT,
     )
     response.raise_for_status()
     results = response.json()

     if not results or not results[0].get("lon") or not results[0].get("lat"):
          logger.warning("No geocoding match for %s, %s %s", address, city, country)
          return 0.0, 0.0
     return float(results[0]["lon"]), float(results[0]["lat"])
