"""In-memory access token holder for one dashboard session."""

from __future__ import annotations


class TokenStore:
    """Hold the current access token, or None before the first authorization.

    The token is never persisted. Reads during an in-flight authorization see
    the previous value until :meth:`set` replaces it.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._token: str | None = None

    def read(self) -> str | None:
        """Return the current token."""
        return self._token

    def set(self, token: str) -> None:
        """Replace the current token."""
        self._token = token

    def clear(self) -> None:
        """Forget the current token (sign-out)."""
        self._token = None
