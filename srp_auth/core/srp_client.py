# === Client-side math of the SRP-6a protocol ===
import logging

from srp_auth.core.exceptions import AuthenticationError
from srp_auth.core.srp_integer import SrpInteger
from srp_auth.core.srp_parameters import SrpParameters
from srp_auth.schemas.srp import SrpEphemeral, SrpSession

logger = logging.getLogger(__name__)


def parse_hex(value: str, name: str) -> SrpInteger:
    # a corrupted value fails the attempt like any other bad proof
    try:
        result = SrpInteger.from_hex(value)
    except (TypeError, ValueError):
        raise AuthenticationError(f"Invalid {name}") from None
    # protocol values are unsigned
    if int(result) < 0:
        raise AuthenticationError(f"Invalid {name}")
    return result


class SrpClient:
    """
    Stateless client half of the handshake. Every method is a pure function
    of its arguments and the parameters given at construction.
    """

    def __init__(self, parameters: SrpParameters):
        self.parameters = parameters

    def generate_salt(self) -> str:
        # random salt of the same size as the hash
        return SrpInteger.random_integer(self.parameters.hash_size_bytes).to_hex()

    def derive_private_key(self, salt: str, user_name: str, password: str) -> str:
        H = self.parameters.H

        # s: user's salt, I: login, p: cleartext password
        s = parse_hex(salt, "salt")
        I = user_name or ""
        p = password or ""

        # x = H(s, H(I | ':' | p))
        x = H(s, H(f"{I}:{p}"))
        return x.to_hex()

    def derive_verifier(self, private_key: str) -> str:
        N = self.parameters.N
        g = self.parameters.g

        # v = g^x mod N
        x = SrpInteger.from_hex(private_key)
        v = g.mod_pow(x, N)
        return v.to_hex()

    def compute_public_ephemeral(self, secret: SrpInteger) -> SrpInteger:
        # A = g^a mod N
        return self.parameters.g.mod_pow(secret, self.parameters.N)

    def generate_ephemeral(self) -> SrpEphemeral:
        a = SrpInteger.random_integer(self.parameters.hash_size_bytes)
        A = self.compute_public_ephemeral(a)
        return SrpEphemeral(secret=a.to_hex(), public=A.to_hex())

    def derive_session(
        self,
        client_secret_ephemeral: str,
        server_public_ephemeral: str,
        salt: str,
        user_name: str,
        private_key: str,
    ) -> SrpSession:
        N = self.parameters.N
        g = self.parameters.g
        k = self.parameters.k
        H = self.parameters.H

        a = parse_hex(client_secret_ephemeral, "client secret ephemeral")
        B = parse_hex(server_public_ephemeral, "server public ephemeral")
        s = parse_hex(salt, "salt")
        I = user_name or ""
        x = parse_hex(private_key, "private key")

        A = self.compute_public_ephemeral(a)

        # B % N > 0, otherwise the server could skip the password check
        if B % N == 0:
            logger.warning(">Server sent a degenerate public ephemeral.")
            raise AuthenticationError("The server sent an invalid public ephemeral")

        # u = H(A, B)
        u = H(A, B)

        # S = (B - k*g^x) ^ (a + u*x), base reduced to a positive residue first
        base = (B - k * g.mod_pow(x, N)) % N
        S = base.mod_pow(a + u * x, N)

        # K = H(S)
        K = H(S)

        # M = H(H(N) xor H(g), H(I), s, A, B, K)
        M = H(H(N) ^ H(g), H(I), s, A, B, K)

        return SrpSession(key=K.to_hex(), proof=M.to_hex())

    def verify_session(self, client_public_ephemeral: str, client_session: SrpSession, server_session_proof: str) -> None:
        H = self.parameters.H

        A = parse_hex(client_public_ephemeral, "client public ephemeral")
        M = parse_hex(client_session.proof, "client session proof")
        K = parse_hex(client_session.key, "session key")

        # H(A, M, K)
        expected = H(A, M, K)
        actual = parse_hex(server_session_proof, "server session proof")
        if actual != expected:
            logger.warning(">Server session proof mismatch.")
            raise AuthenticationError("Server provided session proof is invalid")
