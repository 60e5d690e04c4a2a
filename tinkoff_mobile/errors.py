"""Exceptions raised by the Tinkoff Mobile client."""

from __future__ import annotations

from typing import Any

from .envelope import Envelope


class APIError(Exception):
    """
    The service answered with a well-formed envelope whose resultCode is
    not ``"OK"``.

    Invalid session, wrong SMS code, unknown phone number and rate limiting
    all arrive this way; inspect ``code`` to tell them apart.

    Attributes:
        result_code: Envelope ``resultCode`` (e.g. ``"ERROR"``)
        code: Vendor error code (e.g. ``"session.not.found"``)
        message: Human-readable detail from the server
        payload: Any structured detail attached to the error
    """

    def __init__(
        self,
        result_code: str | None = None,
        code: str | None = None,
        message: str | None = None,
        payload: Any = None,
    ) -> None:
        # The exception argument is the vendor code, not the human message
        super().__init__(code)
        self.result_code = result_code
        self.code = code
        self.message = message
        self.payload = payload

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> APIError:
        return cls(
            result_code=envelope.result_code,
            code=envelope.code,
            message=envelope.message,
            payload=envelope.payload,
        )

    def __str__(self) -> str:
        return f"{self.code} ({self.message})"
