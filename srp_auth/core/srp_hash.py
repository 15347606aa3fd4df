# === SRP hash function: H(values...) -> SrpInteger ===
import hashlib
from typing import Callable, Optional, Union

from srp_auth.core.srp_integer import SrpInteger

HashValue = Union[SrpInteger, str, bytes, None]


class SrpHash:
    """
    Hashes an ordered list of values into one SrpInteger.

    `algorithm` is either a hashlib name ("sha256", "sha1", ...) or a
    zero-argument factory returning a hashlib-compatible object, so any
    digest can be plugged in without touching the client/server math.
    """

    def __init__(self, algorithm: Union[str, Callable[[], "hashlib._Hash"]] = "sha256"):
        if isinstance(algorithm, str):
            name = algorithm.lower()
            # fail early on unknown names
            hashlib.new(name)
            self._factory = lambda: hashlib.new(name)
            self.name = name
        else:
            self._factory = algorithm
            self.name = self._factory().name

        self.hash_size_bytes: int = self._factory().digest_size

    def __call__(self, *values: HashValue) -> SrpInteger:
        hasher = self._factory()
        for value in values:
            hasher.update(self._get_bytes(value))

        # digest bytes are used in order (big-endian), never reversed
        return SrpInteger.from_bytes(hasher.digest())

    @staticmethod
    def _get_bytes(value: Optional[HashValue]) -> bytes:
        if value is None:
            return b""
        if isinstance(value, SrpInteger):
            return value.to_bytes()
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        raise TypeError(f"Cannot hash value of type {type(value).__name__}")

    def __repr__(self) -> str:
        return f"SrpHash({self.name!r})"
