# [UNIT TEST] for SRP INTEGER ======================================================================================================================

import pytest

from srp_auth.core.srp_integer import SrpInteger


def test_from_hex_round_trip():
    for hex_str in ["01", "0001", "deadbeef", "00ff00ff00", "7fffffffffffffffffffffffffffffff"]:
        assert SrpInteger.from_hex(hex_str).to_hex() == hex_str

def test_from_hex_ignores_whitespace_and_case():
    value = SrpInteger.from_hex("""
        AC6BDB41 324A9A9B
        F166DE5E_1389582F""")
    assert value.to_hex() == "ac6bdb41324a9a9bf166de5e1389582f"
    assert value.hex_length == 32

def test_from_hex_empty_is_zero():
    assert SrpInteger.from_hex("") == 0
    assert SrpInteger.from_hex(None).to_hex() == "0"

def test_from_hex_negative():
    value = SrpInteger.from_hex("-0a")
    assert int(value) == -10
    assert value.to_hex() == "-0a"

@pytest.mark.parametrize("bad", ["xyz", "0x10", "+1", "12-3"])
def test_from_hex_rejects_invalid_digits(bad):
    with pytest.raises(ValueError):
        SrpInteger.from_hex(bad)

def test_equality_ignores_width():
    assert SrpInteger.from_hex("01").pad(4) == SrpInteger.from_hex("0001")
    assert SrpInteger.from_hex("000000ff") == SrpInteger.from_hex("ff")
    assert hash(SrpInteger.from_hex("000000ff")) == hash(SrpInteger.from_hex("ff"))
    assert SrpInteger.from_hex("ff") != SrpInteger.from_hex("fe")
    assert SrpInteger.from_hex("10") == 16

def test_pad_changes_serialization_only():
    value = SrpInteger.from_hex("1")
    padded = value.pad(8)
    assert padded.to_hex() == "00000001"
    assert value.to_hex() == "1"
    assert padded == value

def test_to_hex_requires_width():
    with pytest.raises(ValueError):
        SrpInteger(42).to_hex()
    with pytest.raises(ValueError):
        SrpInteger(42).to_bytes()

def test_to_hex_does_not_truncate_wider_values():
    assert SrpInteger(0x12345, 2).to_hex() == "12345"

def test_to_bytes_keeps_leading_zero_bytes():
    value = SrpInteger.from_hex("0000ab")
    assert value.to_bytes() == b"\x00\x00\xab"
    assert SrpInteger.from_bytes(b"\x00\x00\xab").to_hex() == "0000ab"

def test_to_bytes_rejects_negative_values():
    with pytest.raises(ValueError):
        SrpInteger.from_hex("-01").to_bytes()

def test_arithmetic_inherits_left_operand_width():
    a = SrpInteger.from_hex("0010")
    b = SrpInteger.from_hex("02")
    assert (a + b).to_hex() == "0012"
    assert (a - b).to_hex() == "000e"
    assert (a * b).to_hex() == "0020"
    assert (a // b).to_hex() == "0008"
    assert (a % SrpInteger.from_hex("03")).to_hex() == "0001"
    assert (a ^ b).to_hex() == "0012"
    assert (b + a).to_hex() == "12"

def test_arithmetic_with_plain_ints():
    a = SrpInteger.from_hex("0a")
    assert (a * 3).to_hex() == "1e"
    assert (3 * a).to_hex() == "1e"
    assert (1 - a) == -9

def test_subtraction_can_go_negative():
    result = SrpInteger.from_hex("01") - SrpInteger.from_hex("05")
    assert int(result) == -4
    assert result.to_hex() == "-04"

def test_mod_pow_uses_modulus_width():
    base = SrpInteger.from_hex("02")
    modulus = SrpInteger.from_hex("00000017") # 23
    result = base.mod_pow(SrpInteger.from_hex("05"), modulus)
    assert result == 32 % 23
    assert result.hex_length == 8
    assert result.to_hex() == "00000009"

def test_mod_pow_is_non_negative_for_negative_base():
    modulus = SrpInteger.from_hex("17")
    result = SrpInteger.from_hex("-05").mod_pow(SrpInteger.from_hex("03"), modulus)
    assert result == (-125) % 23
    assert int(result) >= 0

def test_random_integer_size_and_bytes():
    value = SrpInteger.random_integer(32)
    assert value.hex_length == 64
    assert int(value) > 0
    raw = value.to_bytes()
    assert len(raw) == 32
    assert all(byte != 0 for byte in raw)

def test_random_integer_is_fresh():
    assert SrpInteger.random_integer(32) != SrpInteger.random_integer(32)

def test_random_integer_rejects_non_positive_size():
    with pytest.raises(ValueError):
        SrpInteger.random_integer(0)

def test_repr_is_short():
    value = SrpInteger.from_hex("ab" * 32)
    assert repr(value) == "<SrpInteger: abababababababab...>"
