# === Dispatchers: deliver SRP round trips to a provider ===
from typing import Any, Optional
from uuid import UUID

import httpx
from pydantic import ValidationError

from srp_auth.core.exceptions import AuthenticationError
from srp_auth.core.provider import SrpAuthenticationProvider
from srp_auth.schemas.api import AuthRequest, AuthResponse


class InProcessDispatcher:
    """Calls the provider directly (same process, no transport)."""

    def __init__(self, provider: SrpAuthenticationProvider, client_address: Optional[str] = "localhost"):
        self.provider = provider
        self.client_address = client_address

    def send(self, session_id: UUID | str, credentials: dict[str, Any]) -> AuthResponse:
        request = AuthRequest(session_id=session_id, credentials=credentials, client_address=self.client_address)
        return self.provider.authenticate(request)


class HttpDispatcher:
    """Posts each round trip to the logon endpoint of a remote service."""

    def __init__(self, client: httpx.Client, path: str = "/auth/srp/logon"):
        self.client = client
        self.path = path

    def send(self, session_id: UUID | str, credentials: dict[str, Any]) -> AuthResponse:
        request = AuthRequest(session_id=session_id, credentials=credentials)
        try:
            r = self.client.post(self.path, json=request.model_dump(mode="json"))
            # 401 still carries an AuthResponse body with the failure message
            if r.status_code != 401:
                r.raise_for_status()
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"Logon request failed: {exc}") from exc

        try:
            return AuthResponse.model_validate_json(r.content)
        except ValidationError as exc:
            raise AuthenticationError("Logon response is not a valid authentication response") from exc
