# === Server-side math of the SRP-6a protocol ===
import logging

from srp_auth.core.exceptions import AuthenticationError
from srp_auth.core.srp_client import parse_hex
from srp_auth.core.srp_integer import SrpInteger
from srp_auth.core.srp_parameters import SrpParameters
from srp_auth.schemas.srp import SrpEphemeral, SrpSession

logger = logging.getLogger(__name__)


class SrpServer:
    """Stateless server half of the handshake."""

    def __init__(self, parameters: SrpParameters):
        self.parameters = parameters

    def compute_public_ephemeral(self, secret: SrpInteger, verifier: SrpInteger) -> SrpInteger:
        N = self.parameters.N
        g = self.parameters.g
        k = self.parameters.k

        # B = (k*v + g^b) mod N
        return (k * verifier + g.mod_pow(secret, N)) % N

    def generate_ephemeral(self, verifier: str) -> SrpEphemeral:
        v = parse_hex(verifier, "verifier")
        b = SrpInteger.random_integer(self.parameters.hash_size_bytes)
        B = self.compute_public_ephemeral(b, v).pad(self.parameters.N.hex_length)
        return SrpEphemeral(secret=b.to_hex(), public=B.to_hex())

    def derive_session(
        self,
        server_secret_ephemeral: str,
        client_public_ephemeral: str,
        salt: str,
        user_name: str,
        verifier: str,
        client_session_proof: str,
    ) -> SrpSession:
        N = self.parameters.N
        g = self.parameters.g
        H = self.parameters.H

        # b: secret ephemeral, A: client public ephemeral, s: salt, I: username, v: verifier
        b = parse_hex(server_secret_ephemeral, "server secret ephemeral")
        A = parse_hex(client_public_ephemeral, "client public ephemeral")
        s = parse_hex(salt, "salt")
        I = user_name or ""
        v = parse_hex(verifier, "verifier")

        B = self.compute_public_ephemeral(b, v).pad(N.hex_length)

        # A % N > 0, otherwise the client could forge a session without the password
        if A % N == 0:
            logger.warning(">Client sent a degenerate public ephemeral.")
            raise AuthenticationError("The client sent an invalid public ephemeral")

        # u = H(A, B)
        u = H(A, B)

        # S = (A * v^u) ^ b
        S = (A * v.mod_pow(u, N)).mod_pow(b, N)

        # K = H(S)
        K = H(S)

        # M = H(H(N) xor H(g), H(I), s, A, B, K)
        M = H(H(N) ^ H(g), H(I), s, A, B, K)

        # validate client session proof
        actual = parse_hex(client_session_proof, "client session proof")
        if actual != M:
            raise AuthenticationError("Client provided session proof is invalid")

        # P = H(A, M, K)
        P = H(A, M, K)

        return SrpSession(key=K.to_hex(), proof=P.to_hex())
