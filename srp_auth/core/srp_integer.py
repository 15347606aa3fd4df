# === SrpInteger: big integer with a fixed hexadecimal width ===
import re
import secrets
from typing import Optional, Union

_WHITESPACE = re.compile(r"[\s_]")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class SrpInteger:
    """
    Thin wrapper over a Python int that remembers how many hex digits it
    serializes to. Equality ignores the width; to_hex() and to_bytes() use it.
    """

    __slots__ = ("_value", "_hex_length")

    ZERO: "SrpInteger"

    def __init__(self, value: int = 0, hex_length: Optional[int] = None):
        self._value = int(value)
        self._hex_length = hex_length

    # constructors ===========================================================

    @classmethod
    def from_hex(cls, hex_str: Optional[str]) -> "SrpInteger":
        hex_str = _WHITESPACE.sub("", hex_str or "")
        negative = hex_str.startswith("-")
        digits = hex_str[1:] if negative else hex_str
        if not digits:
            digits = "0"
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid hexadecimal value: {hex_str!r}")
        value = int(digits, 16)
        return cls(-value if negative else value, len(digits))

    @classmethod
    def from_bytes(cls, data: bytes) -> "SrpInteger":
        # big-endian, unsigned
        return cls(int.from_bytes(data, "big"), len(data) * 2)

    @classmethod
    def random_integer(cls, size: int) -> "SrpInteger":
        if size <= 0:
            raise ValueError("Integer size in bytes should be positive")

        # every byte is non-zero so the buffer can never be all zeros
        buffer = bytes(secrets.randbelow(255) + 1 for _ in range(size))
        return cls.from_bytes(buffer)

    # width ==================================================================

    @property
    def hex_length(self) -> Optional[int]:
        return self._hex_length

    def pad(self, hex_length: int) -> "SrpInteger":
        return SrpInteger(self._value, hex_length)

    # serialization ==========================================================

    def to_hex(self) -> str:
        if self._hex_length is None:
            raise ValueError("Hexadecimal length is not specified")

        digits = format(abs(self._value), "x").zfill(self._hex_length)
        return "-" + digits if self._value < 0 else digits

    def to_bytes(self) -> bytes:
        if self._hex_length is None:
            raise ValueError("Hexadecimal length is not specified")
        if self._value < 0:
            raise ValueError("Negative values have no byte representation")

        size = max((self._hex_length + 1) // 2, (self._value.bit_length() + 7) // 8)
        return self._value.to_bytes(size, "big")

    # arithmetic =============================================================

    def mod_pow(self, exponent: "IntLike", modulus: "IntLike") -> "SrpInteger":
        modulus = _coerce(modulus)
        # pow() with a positive modulus always lands in [0, modulus)
        result = pow(self._value, int(exponent), modulus._value) % modulus._value
        return SrpInteger(result, modulus._hex_length)

    def _combine(self, value: int) -> "SrpInteger":
        return SrpInteger(value, self._hex_length)

    def __add__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value + int(other))

    def __sub__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value - int(other))

    def __mul__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value * int(other))

    def __floordiv__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value // int(other))

    def __mod__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value % int(other))

    def __xor__(self, other: "IntLike") -> "SrpInteger":
        return self._combine(self._value ^ int(other))

    # int on the left: the SrpInteger operand still carries the width
    def __radd__(self, other: int) -> "SrpInteger":
        return self._combine(int(other) + self._value)

    def __rsub__(self, other: int) -> "SrpInteger":
        return self._combine(int(other) - self._value)

    def __rmul__(self, other: int) -> "SrpInteger":
        return self._combine(int(other) * self._value)

    def __rxor__(self, other: int) -> "SrpInteger":
        return self._combine(int(other) ^ self._value)

    def __neg__(self) -> "SrpInteger":
        return self._combine(-self._value)

    # comparison =============================================================

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SrpInteger):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.to_hex() if self._hex_length is not None else format(self._value, "x")

    def __repr__(self) -> str:
        digits = format(self._value, "x")
        if len(digits) > 16:
            digits = digits[:16] + "..."
        return f"<SrpInteger: {digits}>"


IntLike = Union[SrpInteger, int]

SrpInteger.ZERO = SrpInteger(0, 1)


def _coerce(value: IntLike) -> SrpInteger:
    return value if isinstance(value, SrpInteger) else SrpInteger(value)
