"""Authentication and transport-security stubs of the management plane."""

from __future__ import annotations

from collections.abc import Mapping

from .console import emit

_DEFAULT_ACCOUNTS = {"admin": "admin"}


class SAMLValidator:
    """Accepts documents that carry a SAML assertion element."""

    def validate(self, xml: str) -> bool:
        return "<Assertion" in xml


class SSHServer:
    """Checks management logins against a fixed account table."""

    def __init__(self, accounts: Mapping[str, str] | None = None) -> None:
        self._accounts = dict(_DEFAULT_ACCOUNTS if accounts is None else accounts)

    def authenticate(self, user: str, password: str) -> bool:
        return user in self._accounts and self._accounts[user] == password


class TLSLifecycle:
    """Reports the TLS setup steps."""

    def init(self) -> bool:
        emit("[TLS] Initialized")
        return True

    def handshake(self) -> bool:
        emit("[TLS] Handshake OK")
        return True