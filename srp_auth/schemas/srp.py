# SRP records shared by the client and the server
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


class SrpEphemeral(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret: str = Field(..., description="Secret half (a or b), hex; never leaves its side")
    public: str = Field(..., description="Public half (A or B), hex")


class SrpSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Shared session key K, hex")
    proof: str = Field(..., description="Session proof sent to the other party, hex")


class SrpAccount(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_name: str
    salt: str
    verifier: str


class AuthenticatedIdentity(BaseModel):
    name: str
    authentication_type: str = "SRP"
    is_authenticated: bool = True


class PendingAuthentication(BaseModel):
    # values produced on the first authentication step
    user_name: str
    salt: str
    verifier: str
    client_public_ephemeral: str
    server_ephemeral: SrpEphemeral
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_account(self) -> SrpAccount:
        return SrpAccount(user_name=self.user_name, salt=self.salt, verifier=self.verifier)
