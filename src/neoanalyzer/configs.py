# Configuration file for neoanalyzer

from io import StringIO

import pandas as pd
from astropy import constants as c
from astropy import units as u


__all__ = [
    "GRAV_CONST",
    "MEGATON_TNT_J",
    "ASTEROID_DENSITY",
    "HAZARD_MIN_DIAMETER_KM",
    "HAZARD_VELOCITY_KM_S",
    "PLANETS",
    "NEOWS_FEED_URL",
    "REQUEST_TIMEOUT",
    "RETRIES",
    "BACKOFF_FACTOR",
    "API_KEY_ENVVAR",
    "API_KEY_ENVVAR_ALT",
    "DEFAULT_FALLBACK_FILE",
]

# **************************************************************************************** #
#                                    Physical Constants                                    #
# **************************************************************************************** #
# CODATA 2018, 6.67430e-11 m^3 kg^-1 s^-2
GRAV_CONST = c.G.to_value(u.m**3 / u.kg / u.s**2)

# 1 megaton of TNT in joules
MEGATON_TNT_J = 4.184e15

# Assumed bulk density of a stony asteroid [kg/m^3]. The NeoWs feed has no
# composition information, so every asteroid gets this value.
ASTEROID_DENSITY = 3000.0

# **************************************************************************************** #
#                                 Combined-asteroid hazard                                 #
# **************************************************************************************** #
# Thresholds used when re-classifying a combined asteroid, both strict (``>``).
# Unrelated to the CNEOS PHA criteria (H <= 22, MOID <= 0.05 au).
HAZARD_MIN_DIAMETER_KM = 280.0
HAZARD_VELOCITY_KM_S = 5.0

# **************************************************************************************** #
#                                      Planet catalog                                      #
# **************************************************************************************** #
# Mean diameter [km] and mass [kg], NASA planetary fact sheet
PLANETS = pd.read_csv(
    StringIO(
        """name,diameter_km,mass_kg
Mercury,4879,3.301e23
Venus,12104,4.867e24
Earth,12756,5.972e24
Mars,6792,6.417e23
Jupiter,142984,1.898e27
Saturn,120536,5.683e26
Uranus,51118,8.681e25
Neptune,49528,1.024e26
"""
    ),
    dtype={"name": str, "diameter_km": float, "mass_kg": float},
)

# **************************************************************************************** #
#                                        NASA NeoWs                                        #
# **************************************************************************************** #
NEOWS_FEED_URL = "https://api.nasa.gov/neo/rest/v1/feed"
REQUEST_TIMEOUT = 10  # seconds
RETRIES = 3  # number of attempts for HTTP requests
BACKOFF_FACTOR = 1.0  # backoff multiplier in seconds

API_KEY_ENVVAR = "API_KEY"
API_KEY_ENVVAR_ALT = "NASA_API_KEY"

# Previously saved NeoWs feed, used when the API cannot be reached
DEFAULT_FALLBACK_FILE = "data.json"
