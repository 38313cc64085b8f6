"""glasscast - Async Python client and city sync engine for the Glasscast weather service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("glasscast")
except PackageNotFoundError:
    __version__ = "0+local"
from glasscast.auth import AuthGate, AuthState
from glasscast.client import GlasscastClient
from glasscast.config import GlasscastConfig
from glasscast.credentials import CredentialStore, FileCredentialStore, MemoryCredentialStore
from glasscast.exceptions import (
    AuthenticationError,
    AuthError,
    FavoriteError,
    FetchError,
    GlasscastApiError,
    GlasscastConfigError,
    GlasscastError,
    GlasscastTransportError,
    SearchError,
)
from glasscast.models import (
    AuthToken,
    CityRecord,
    CitySearchCandidate,
    Pressure,
    Temperature,
    WeatherSnapshot,
    Wind,
)
from glasscast.source import AuthBackend, HttpWeatherSource, WeatherSource
from glasscast.storage import (
    CityStore,
    FileSlot,
    KeyValueSlot,
    MemorySlot,
    StoreLoadResult,
    StoreLoadStatus,
)
from glasscast.suggestions import SuggestionFetcher
from glasscast.sync import EngineState, SyncEngine

__all__ = [
    "__version__",
    "AuthBackend",
    "AuthError",
    "AuthGate",
    "AuthState",
    "AuthToken",
    "AuthenticationError",
    "CityRecord",
    "CitySearchCandidate",
    "CityStore",
    "CredentialStore",
    "EngineState",
    "FavoriteError",
    "FetchError",
    "FileCredentialStore",
    "FileSlot",
    "GlasscastApiError",
    "GlasscastClient",
    "GlasscastConfig",
    "GlasscastConfigError",
    "GlasscastError",
    "GlasscastTransportError",
    "HttpWeatherSource",
    "KeyValueSlot",
    "MemoryCredentialStore",
    "MemorySlot",
    "Pressure",
    "SearchError",
    "StoreLoadResult",
    "StoreLoadStatus",
    "SuggestionFetcher",
    "SyncEngine",
    "Temperature",
    "WeatherSnapshot",
    "WeatherSource",
    "Wind",
]
