"""Authentication gate: owns the bearer token lifecycle."""

from __future__ import annotations

import logging
from enum import StrEnum

from glasscast.credentials import CredentialStore
from glasscast.exceptions import AuthError, GlasscastError
from glasscast.source import AuthBackend

_logger = logging.getLogger(__name__)


class AuthState(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class AuthGate:
    """Two-state login/sign-out machine.

    The credential obtained on login is written to the credential store,
    where the weather source picks it up for every data call.
    """

    def __init__(self, backend: AuthBackend, credentials: CredentialStore) -> None:
        self._backend = backend
        self._credentials = credentials
        self._state = AuthState.UNAUTHENTICATED

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state is AuthState.AUTHENTICATED

    def restore(self) -> bool:
        """Adopt a credential left in the store by a previous run."""
        if self._credentials.get():
            self._state = AuthState.AUTHENTICATED
        return self.is_authenticated

    async def login(self, email: str, password: str) -> None:
        """Authenticate and store the returned credential.

        Raises
        ------
        AuthError
            The service rejected the login; the message is passed through.
            Any credential held from an earlier session is deleted.
        """
        try:
            token = await self._backend.login(email, password)
        except GlasscastError as exc:
            _logger.debug("Login failed for %s: %s", email, exc)
            self.sign_out()
            raise AuthError(str(exc)) from exc

        self._credentials.put(token.access_token)
        self._state = AuthState.AUTHENTICATED
        _logger.debug("Logged in as %s", email)

    async def register(self, email: str, password: str) -> None:
        """Create an account, then log in with the same credentials.

        Both steps form one transaction: the gate is authenticated only if
        the login after registration succeeds.
        """
        try:
            await self._backend.register(email, password)
        except GlasscastError as exc:
            _logger.debug("Registration failed for %s: %s", email, exc)
            self.sign_out()
            raise AuthError(str(exc)) from exc

        await self.login(email, password)

    def sign_out(self) -> None:
        """Forget the credential.  Always succeeds, no network call."""
        self._credentials.delete()
        self._state = AuthState.UNAUTHENTICATED
