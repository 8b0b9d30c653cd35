import pytest

from libft.radix import ltox, ptox

HEX_LOWER = "0123456789abcdef"

VALUES = [1, 9, 10, 15, 16, 255, 4096, 2**32 - 1, 2**63 - 1]


def test_ltox_zero():
    assert ltox(0, False) == "0"
    assert ltox(0, True) == "0"


@pytest.mark.parametrize("n", VALUES)
def test_ltox_round_trip(n):
    text = ltox(n, False)
    assert int(text, 16) == n
    assert set(text) <= set(HEX_LOWER)
    assert text[0] != "0"


@pytest.mark.parametrize("n", VALUES)
def test_ltox_upper_is_upper_of_lower(n):
    assert ltox(n, True) == ltox(n, False).upper()
    assert int(ltox(n, True), 16) == n


def test_ltox_default_is_lower():
    assert ltox(255) == ltox(255, False)


def test_ltox_negative():
    with pytest.raises(ValueError):
        ltox(-1, False)


def test_ltox_too_large():
    with pytest.raises(OverflowError):
        ltox(2**63, False)


def test_ltox_rejects_bool():
    with pytest.raises(TypeError):
        ltox(True, False)


def test_ptox_null_is_none():
    assert ptox(0) is None


@pytest.mark.parametrize("address", [1, 0x1000, 2**48 - 1, 2**64 - 1])
def test_ptox_round_trip(address):
    text = ptox(address)
    assert int(text, 16) == address
    assert set(text) <= set(HEX_LOWER)


@pytest.mark.parametrize("address", VALUES)
def test_ptox_agrees_with_lower_ltox(address):
    assert ptox(address) == ltox(address, False)


def test_ptox_too_large():
    with pytest.raises(OverflowError):
        ptox(2**64)


def test_ptox_negative():
    with pytest.raises(ValueError):
        ptox(-1)