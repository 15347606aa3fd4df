# Logon request/response models and the SRP wire keys
from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel, Field, PrivateAttr

from srp_auth.schemas.srp import AuthenticatedIdentity

# wire keys (interoperability contract, do not rename)
SRP_STEP_NUMBER = "srp-step"
SRP_USERNAME = "username"
SRP_CLIENT_PUBLIC_EPHEMERAL = "srp-client-public-ephemeral"
SRP_SALT = "srp-salt"
SRP_SERVER_PUBLIC_EPHEMERAL = "srp-server-public-ephemeral"
SRP_CLIENT_SESSION_PROOF = "srp-client-session-proof"
SRP_SERVER_SESSION_PROOF = "srp-server-session-proof"


class AuthRequest(BaseModel):
    session_id: UUID | str = Field(..., description="Opaque per-attempt session identifier")
    credentials: Optional[dict[str, Any]] = None
    client_address: Optional[str] = None


class AuthResponse(BaseModel):
    success: bool
    completed: bool
    error_message: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    authenticated_identity: Optional[AuthenticatedIdentity] = None

    # shared secret for the hosting layer, never serialized
    _session_key: Optional[str] = PrivateAttr(default=None)

    @property
    def session_key(self) -> Optional[str]:
        return self._session_key

    def add_parameter(self, name: str, value: Any) -> None:
        self.parameters[name] = value

    @classmethod
    def error(cls, message: str) -> "AuthResponse":
        return cls(success=False, completed=True, error_message=message)
