"""Constants for the Rejseplanen API adapter.

Uses the Rejseplanen REST API 2.0 (HAFAS based).
Every request is authenticated with an ``accessId`` query parameter.
"""

REJSEPLANEN_BASE_URL = "https://www.rejseplanen.dk/api"

LOCATION_SEARCH_PATH = "location.name"
ADDRESS_LOOKUP_PATH = "addresslookup"
DEPARTURE_BOARD_PATH = "departureBoard"

ACCESS_ID_PARAM = "accessId"

# Default query parameters per endpoint; caller parameters override field by field
LOCATION_SEARCH_DEFAULTS: dict[str, str | int] = {
    "format": "json",
    "lang": "en",
    "maxNo": 10,
    "type": "ALL",
    "withEquivalentLocations": 0,
    "restrictSelection": "S",
    "withProducts": 1,
    "r": 1000,
    "filterMode": "DIST_PERI",
    "withMastNames": 1,
}

ADDRESS_LOOKUP_DEFAULTS: dict[str, str | int] = {
    "format": "json",
}

DEPARTURE_BOARD_DEFAULTS: dict[str, str | int] = {
    "format": "json",
    "lang": "en",
    "maxJourneys": -1,
    "passlist": 0,
    "baim": 0,
    "rtMode": "SERVER_DEFAULT",
    "type": "DEP",
}

# Product class bits of the departure board filter.
# Earlier API revisions used 4 for buses; verify against the live documentation.
BUS_PRODUCT_BIT = 32
TRAIN_PRODUCT_BIT = 16

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
