# === SRP-6a protocol parameters (N, g, H, k) ===
from typing import Optional, Union

from srp_auth.core.srp_hash import SrpHash
from srp_auth.core.srp_integer import SrpInteger

# 2048-bit safe prime (RFC 5054 group 2048), same as the secure-remote-password npm package
LARGE_SAFE_PRIME = """
    AC6BDB41 324A9A9B F166DE5E 1389582F AF72B665 1987EE07 FC319294
    3DB56050 A37329CB B4A099ED 8193E075 7767A13D D52312AB 4B03310D
    CD7F48A9 DA04FD50 E8083969 EDB767B0 CF609517 9A163AB3 661A05FB
    D5FAAAE8 2918A996 2F0B93B8 55F97993 EC975EEA A80D740A DBF4FF74
    7359D041 D5C33EA7 1D281E44 6B14773B CA97B43A 23FB8016 76BD207A
    436C6481 F1D2B907 8717461A 5B9D32E6 88F87748 544523B5 24B0D57D
    5EA77A27 75D2ECFA 032CFBDB F52FB378 61602790 04E57AE6 AF874E73
    03CE5329 9CCC041C 7BC308D8 2A5698F3 A8D0C382 71AE35F8 E9DBFBB6
    94B5C803 D89F7AE4 35DE236D 525F5475 9B65E372 FCD68EF2 0FA7111F
    9E4AFF73"""

GENERATOR = "02"
HASH_ALGORITHM = "sha256"

HexOrInteger = Union[str, SrpInteger]


def _to_integer(value: HexOrInteger) -> SrpInteger:
    return value if isinstance(value, SrpInteger) else SrpInteger.from_hex(value)


class SrpParameters:
    """
    Immutable SRP-6a domain: large safe prime N, generator g, hash H and
    multiplier k = H(N, g). Client and server must use identical N, g and H.
    """

    def __init__(
        self,
        N: Optional[HexOrInteger] = None,
        g: Optional[HexOrInteger] = None,
        hash_algorithm: Union[str, SrpHash] = HASH_ALGORITHM,
    ):
        self._N = _to_integer(N if N is not None else LARGE_SAFE_PRIME)
        self._g = _to_integer(g if g is not None else GENERATOR)
        self._hasher = hash_algorithm if isinstance(hash_algorithm, SrpHash) else SrpHash(hash_algorithm)
        if int(self._N) <= 2:
            raise ValueError("Large safe prime N must be greater than 2")

        # k = H(N, g) in SRP-6a (k = 3 for legacy SRP-6)
        self._k = self._hasher(self._N, self._g)

    @classmethod
    def create(
        cls,
        hash_algorithm: Union[str, SrpHash],
        large_safe_prime: Optional[HexOrInteger] = None,
        generator: Optional[HexOrInteger] = None,
    ) -> "SrpParameters":
        return cls(N=large_safe_prime, g=generator, hash_algorithm=hash_algorithm)

    @classmethod
    def from_settings(cls, settings) -> "SrpParameters":
        return cls(
            N=settings.large_safe_prime,
            g=settings.generator,
            hash_algorithm=settings.hash_algorithm,
        )

    @property
    def N(self) -> SrpInteger:
        return self._N

    @property
    def g(self) -> SrpInteger:
        return self._g

    @property
    def k(self) -> SrpInteger:
        return self._k

    @property
    def hasher(self) -> SrpHash:
        return self._hasher

    @property
    def H(self) -> SrpHash:
        return self._hasher

    @property
    def hash_size_bytes(self) -> int:
        return self._hasher.hash_size_bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SrpParameters):
            return NotImplemented
        return (
            self._N.to_bytes() == other._N.to_bytes()
            and self._g.to_bytes() == other._g.to_bytes()
            and self._hasher.name == other._hasher.name
        )

    def __hash__(self) -> int:
        return hash((self._N, self._g, self._hasher.name))

    def __repr__(self) -> str:
        return f"SrpParameters(N={self._N!r}, g={self._g!r}, H={self._hasher!r})"
