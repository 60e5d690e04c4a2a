"""
tinkoff_mobile
==============
Python client for the Tinkoff Mobile (MVNO) web API.

Package structure
-----------------
tinkoff_mobile/
├── __init__.py       – package init and public API
├── config.py         – endpoint paths and constant request fields
├── session.py        – requests.Session factory
├── envelope.py       – response envelope and query encoding
├── errors.py         – APIError
├── api.py            – APIClient
└── logging_setup.py  – package logger and opt-in console handler

Quick start
-----------
    from tinkoff_mobile import APIClient, APIError

    with APIClient() as client:
        client.session()
        client.signup_by_phone("+79001234567")
        client.confirm_signup_by_phone(input("SMS code: "))
        print(client.contracts_info())
"""

from .api           import APIClient
from .envelope      import Envelope
from .errors        import APIError
from .logging_setup import setup_logging

__all__ = [
    "APIClient",
    "APIError",
    "Envelope",
    "setup_logging",
]
