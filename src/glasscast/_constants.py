"""Internal constants shared across the library."""

BASE_URL = "http://13.203.42.179:6969/v1"
USER_AGENT = "glasscast-python"
REQUEST_TIMEOUT_S: float = 30.0

# HTTP statuses the service uses for a missing/expired bearer token.
AUTH_REJECTED_STATUSES: frozenset[int] = frozenset({401, 403})

# Endpoint templates, relative to the configured base URL.
AUTH_CREATE = "/auth/create"
AUTH_LOGIN = "/auth/login"
DATA_SEARCH = "/data/search/{query}"
DATA_WEATHER = "/data/weather/{city_id}"
DATA_FORECAST = "/data/forecast/{city_id}"
DATA_ADD_FAVORITE = "/data/add_favorite/{city_id}"
DATA_FAVORITES = "/data/favorites"
