# === Server-side: SRP-6a authentication provider (two-step state machine) ===
import logging
from typing import Any, Optional, Protocol
from uuid import UUID

from srp_auth.core.accounts import SrpAccountRepository
from srp_auth.core.exceptions import AuthenticationError, MalformedRequestError
from srp_auth.core.srp_client import SrpClient, parse_hex
from srp_auth.core.srp_parameters import SrpParameters
from srp_auth.core.srp_server import SrpServer
from srp_auth.schemas.api import (
    AuthRequest,
    AuthResponse,
    SRP_CLIENT_PUBLIC_EPHEMERAL,
    SRP_CLIENT_SESSION_PROOF,
    SRP_SALT,
    SRP_SERVER_PUBLIC_EPHEMERAL,
    SRP_SERVER_SESSION_PROOF,
    SRP_STEP_NUMBER,
    SRP_USERNAME,
)
from srp_auth.schemas.srp import PendingAuthentication

logger = logging.getLogger(__name__)

NO_CREDENTIALS = "No credentials specified"
STEP_NOT_SPECIFIED = "Authentication protocol not supported: step number not specified"
UNKNOWN_STEP = "Authentication protocol not supported: unknown step number"
RETRY_FIRST_STEP = "Authentication failed: retry the first step"
BAD_CREDENTIALS = "Authentication failed: bad password or user name"


class PendingAuthStore(Protocol):
    def put(self, session_id: UUID | str, entry: PendingAuthentication) -> None: ...

    # atomic check-and-remove: a given entry is returned to at most one caller
    def pop(self, session_id: UUID | str) -> Optional[PendingAuthentication]: ...

    def __len__(self) -> int: ...


def _require(credentials: dict[str, Any], key: str) -> str:
    value = credentials.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedRequestError(f"Malformed request: {key} not specified")
    return value


class SrpAuthenticationProvider:
    """
    Drives the server side of the handshake.

    Step 1 (I, A) -> (s, B) never fails for a well-formed request, whether or
    not the user exists. Step 2 (M1) -> (H(A, M1, K)) consumes the state saved
    by step 1 exactly once, on success and on failure alike.
    """

    def __init__(
        self,
        repository: SrpAccountRepository,
        parameters: SrpParameters,
        pending_store: PendingAuthStore,
        unknown_user_salt: Optional[str] = None,
    ):
        self.repository = repository
        self.parameters = parameters
        self.pending_store = pending_store
        self.srp_server = SrpServer(parameters)
        self.unknown_user_salt = unknown_user_salt or SrpClient(parameters).generate_salt()

    def authenticate(self, request: AuthRequest) -> AuthResponse:
        credentials = request.credentials
        if not credentials:
            return AuthResponse.error(NO_CREDENTIALS)

        if credentials.get(SRP_STEP_NUMBER) is None:
            return AuthResponse.error(STEP_NOT_SPECIFIED)

        # step number and session identity
        try:
            step = int(credentials[SRP_STEP_NUMBER])
        except (TypeError, ValueError):
            step = None

        try:
            if step == 1:
                return self._step1(request)
            if step == 2:
                return self._step2(request)
        except MalformedRequestError as exc:
            logger.warning(">Rejected malformed SRP request for session %s: %s", request.session_id, exc)
            return AuthResponse.error(str(exc))

        # step number should be either 1 or 2
        return AuthResponse.error(UNKNOWN_STEP)

    def _step1(self, request: AuthRequest) -> AuthResponse:
        # User -> Host: I, A = g^a
        user_name = _require(request.credentials, SRP_USERNAME)
        client_public_ephemeral = _require(request.credentials, SRP_CLIENT_PUBLIC_EPHEMERAL)
        try:
            parse_hex(client_public_ephemeral, SRP_CLIENT_PUBLIC_EPHEMERAL)
        except AuthenticationError:
            raise MalformedRequestError(f"Malformed request: invalid {SRP_CLIENT_PUBLIC_EPHEMERAL}") from None

        account = self.repository.find_by_name(user_name)
        if account is not None:
            server_ephemeral = self.srp_server.generate_ephemeral(account.verifier)

            # save the data for the second authentication step
            self.pending_store.put(request.session_id, PendingAuthentication(
                user_name=account.user_name,
                salt=account.salt,
                verifier=account.verifier,
                client_public_ephemeral=client_public_ephemeral,
                server_ephemeral=server_ephemeral,
            ))
            logger.info(">SRP step 1 accepted for session %s.", request.session_id)

            # Host -> User: s, B = kv + g^b
            return self._response_step1(account.salt, server_ephemeral.public)

        # unknown user: same-shaped fake salt and B, nothing is stored
        fake_salt = self.parameters.H(user_name + self.unknown_user_salt).to_hex()
        fake_ephemeral = self.srp_server.generate_ephemeral(fake_salt)
        logger.info(">SRP step 1 accepted for session %s.", request.session_id)
        return self._response_step1(fake_salt, fake_ephemeral.public)

    def _step2(self, request: AuthRequest) -> AuthResponse:
        # User -> Host: M = H(H(N) xor H(g), H(I), s, A, B, K)
        client_session_proof = _require(request.credentials, SRP_CLIENT_SESSION_PROOF)

        # get the values calculated on the first step
        pending = self.pending_store.pop(request.session_id)
        if pending is None:
            logger.warning(">SRP step 2 without pending step 1 for session %s.", request.session_id)
            return AuthResponse.error(RETRY_FIRST_STEP)

        try:
            server_session = self.srp_server.derive_session(
                pending.server_ephemeral.secret,
                pending.client_public_ephemeral,
                pending.salt,
                pending.user_name,
                pending.verifier,
                client_session_proof,
            )
        except AuthenticationError:
            logger.warning(">SRP authentication failed for session %s.", request.session_id)
            return AuthResponse.error(BAD_CREDENTIALS)

        logger.info(">SRP authentication succeeded for session %s (%s).", request.session_id, pending.user_name)

        # Host -> User: H(A, M, K)
        response = AuthResponse(success=True, completed=True)
        response.add_parameter(SRP_SERVER_SESSION_PROOF, server_session.proof)
        response.authenticated_identity = self.repository.get_identity(pending.to_account())
        response._session_key = server_session.key
        return response

    @staticmethod
    def _response_step1(salt: str, server_public_ephemeral: str) -> AuthResponse:
        response = AuthResponse(success=True, completed=False)
        response.add_parameter(SRP_SALT, salt)
        response.add_parameter(SRP_SERVER_PUBLIC_EPHEMERAL, server_public_ephemeral)
        return response
