"""
tinkoff_mobile.api
==================
Synchronous client for the Tinkoff Mobile web API.

Workflow
--------
    client = APIClient()
    client.session()                        # obtain moSessionId
    client.signup_by_phone("+79001234567")  # server sends an SMS code
    client.confirm_signup_by_phone("1234")
    client.contracts_info()

Notes
-----
* Every call is a GET with URL-encoded parameters; the JSON envelope decides
  success, the HTTP status code is not consulted.
* The client holds two pieces of state, ``session_id`` and
  ``confirmation_id``.  They are not guarded by a lock, so one instance must
  not be shared between threads without external serialisation.
* Call order is not validated locally.  An unset identifier is sent empty
  and the server's rejection comes back as :class:`APIError`.
"""

from __future__ import annotations

from typing import Any

import requests

from .config import (
    URI_BASE, PLATFORM, ORIGIN, APP_NAME,
    SESSION_PATH, SESSION_STATUS_PATH,
    SIGNUP_PHONE_PATH, CONFIRM_SIGNUP_PHONE_PATH,
    CONTRACTS_INFO_PATH, SUBSCRIBER_SERVICES_PATH,
    BUNDLE_ACCOUNTS_PATH, AUTO_PAYMENTS_PATH,
)
from .envelope import Envelope, encode_params
from .errors import APIError
from .logging_setup import log
from .session import build_session, endpoint_url


def _payload_field(data: Any, name: str) -> Any:
    """
    Read *name* from a success payload that must be a JSON object.

    Raises ValueError when the server answers OK with a null or non-object
    payload; no client state is written in that case.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object payload carrying {name!r}, got {data!r}")
    return data.get(name)


class APIClient:
    """
    Client bound to one logical Tinkoff Mobile session.
    """

    def __init__(
        self,
        session_id: str | None = None,
        *,
        session: requests.Session | None = None,
        base_url: str = URI_BASE,
        verify_ssl: bool = True,
    ) -> None:
        self.session_id = session_id
        self.confirmation_id: str | None = None
        self.base_url = base_url
        self.http = session if session is not None else build_session(verify_ssl)

    def __enter__(self) -> APIClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections held by the transport."""
        self.http.close()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def session(self) -> Any:
        """Create a new server session and remember its moSessionId."""
        data = self._request(SESSION_PATH, {})
        self.session_id = _payload_field(data, "moSessionId")
        log.info("Session established")
        log.debug("moSessionId: %s", self.session_id)
        return data

    def session_status(self) -> Any:
        return self._request(SESSION_STATUS_PATH, {"testSessionId": self.session_id})

    # ------------------------------------------------------------------
    # Phone signup (two-factor)
    # ------------------------------------------------------------------

    def signup_by_phone(self, phone: str) -> Any:
        """
        Start signup for *phone* (MSISDN).  The server texts a confirmation
        code; the returned confirmationId is kept for
        :meth:`confirm_signup_by_phone`.
        """
        data = self._request(SIGNUP_PHONE_PATH, {
            "moSessionId": self.session_id,
            "onContact": False,
            "msisdn": phone,
        })
        self.confirmation_id = _payload_field(data, "confirmationId")
        log.info("Confirmation code requested")
        log.debug("msisdn=%s confirmationId=%s", phone, self.confirmation_id)
        return data

    def confirm_signup_by_phone(self, code: str) -> Any:
        """Confirm the pending phone signup with the SMS *code*."""
        return self._request(CONFIRM_SIGNUP_PHONE_PATH, {
            "moSessionId": self.session_id,
            "code": code,
            "confirmationId": self.confirmation_id,
        })

    # ------------------------------------------------------------------
    # Account data
    # ------------------------------------------------------------------

    def contracts_info(self) -> Any:
        return self._request(CONTRACTS_INFO_PATH, {"moSessionId": self.session_id})

    def subscriber_services(self) -> Any:
        return self._request(SUBSCRIBER_SERVICES_PATH, {"moSessionId": self.session_id})

    def autopayments(self, phone: str) -> Any:
        return self._request(AUTO_PAYMENTS_PATH, {
            "moSessionId": self.session_id,
            "phoneNumber": phone,
        })

    def bundle_accounts(self) -> Any:
        return self._request(BUNDLE_ACCOUNTS_PATH, {"moSessionId": self.session_id})

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get(self, path: str, params: dict[str, Any]) -> str:
        url = endpoint_url(self.base_url, path)
        query = encode_params({
            **params,
            "platform": PLATFORM,
            "origin": ORIGIN,
            "appName": APP_NAME,
        })
        log.debug("GET %s %s", url, query)
        resp = self.http.get(url, params=query)
        log.debug("← HTTP %s (%d bytes)", resp.status_code, len(resp.content))
        return resp.text

    def _request(self, path: str, params: dict[str, Any]) -> Any:
        """
        Perform one call and unwrap the envelope.

        Returns the payload on ``resultCode == "OK"``.  Raises APIError for
        any other result code; requests.RequestException and
        json.JSONDecodeError propagate unchanged.
        """
        envelope = Envelope.from_text(self._get(path, params))
        if not envelope.ok:
            error = APIError.from_envelope(envelope)
            log.warning("%s rejected: %s", path, error)
            raise error
        return envelope.payload
