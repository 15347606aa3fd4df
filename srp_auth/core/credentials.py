# === Client-side: credentials for the SRP-6a authentication protocol ===
import logging
from typing import Any, Protocol
from uuid import UUID

from srp_auth.core.exceptions import AuthenticationError
from srp_auth.core.srp_client import SrpClient
from srp_auth.core.srp_parameters import SrpParameters
from srp_auth.schemas.api import (
    AuthResponse,
    SRP_CLIENT_PUBLIC_EPHEMERAL,
    SRP_CLIENT_SESSION_PROOF,
    SRP_SALT,
    SRP_SERVER_PUBLIC_EPHEMERAL,
    SRP_SERVER_SESSION_PROOF,
    SRP_STEP_NUMBER,
    SRP_USERNAME,
)
from srp_auth.schemas.srp import SrpSession

logger = logging.getLogger(__name__)


class SrpDispatcher(Protocol):
    # one synchronous request/response round trip
    def send(self, session_id: UUID | str, credentials: dict[str, Any]) -> AuthResponse: ...


def _read_parameter(response: AuthResponse, key: str) -> str:
    if not response.success:
        raise AuthenticationError(response.error_message or "Authentication is not successful.")

    value = response.parameters.get(key)
    if not isinstance(value, str) or not value:
        raise AuthenticationError(f"Server response is missing {key}")
    return value


class SrpCredentials:
    """
    Runs both round trips of the handshake from the client side and checks
    the server's proof (mutual authentication). Nothing is cached between
    calls: every authenticate() starts with a fresh ephemeral.
    """

    def __init__(self, user_name: str, password: str, parameters: SrpParameters):
        self.user_name = user_name
        self.password = password
        self.srp_client = SrpClient(parameters)

    def __repr__(self) -> str:
        return f"SrpCredentials(user_name={self.user_name!r})"

    def authenticate(self, session_id: UUID | str, dispatcher: SrpDispatcher) -> SrpSession:
        # CLIENT 1. step1 request: I, A = g^a
        client_ephemeral = self.srp_client.generate_ephemeral()
        response1 = dispatcher.send(session_id, {
            SRP_STEP_NUMBER: 1,
            SRP_USERNAME: self.user_name,
            SRP_CLIENT_PUBLIC_EPHEMERAL: client_ephemeral.public,
        })

        # CLIENT 2. step1 response: s, B = kv + g^b
        salt = _read_parameter(response1, SRP_SALT)
        server_public_ephemeral = _read_parameter(response1, SRP_SERVER_PUBLIC_EPHEMERAL)
        logger.debug(">Received salt & B from server for session %s.", session_id)

        # CLIENT 3. step2 request: M = H(H(N) xor H(g), H(I), s, A, B, K)
        private_key = self.srp_client.derive_private_key(salt, self.user_name, self.password)
        client_session = self.srp_client.derive_session(
            client_ephemeral.secret, server_public_ephemeral, salt, self.user_name, private_key
        )
        response2 = dispatcher.send(session_id, {
            SRP_STEP_NUMBER: 2,
            SRP_CLIENT_SESSION_PROOF: client_session.proof,
        })

        # CLIENT 4. step2 response: H(A, M, K), checked here so the server proves itself too
        server_session_proof = _read_parameter(response2, SRP_SERVER_SESSION_PROOF)
        self.srp_client.verify_session(client_ephemeral.public, client_session, server_session_proof)

        logger.info(">SRP handshake successful for %s, mutual proof verified.", self.user_name)
        return client_session
