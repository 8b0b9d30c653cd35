import pytest

from libft import chars

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@pytest.mark.parametrize("c", ["a", "z", "A", "Z"])
def test_isalpha_true(c):
    assert chars.isalpha(c) is True
    assert chars.isalpha(ord(c)) is True


@pytest.mark.parametrize("c", ["0", "9", "/", ":", "@", "[", "'", "{", 0, 127, INT_MAX, INT_MIN])
def test_isalpha_false(c):
    assert chars.isalpha(c) is False


def test_isupper_islower_disjoint():
    for code in range(128):
        assert not (chars.isupper(code) and chars.islower(code))
        assert chars.isalpha(code) == (chars.isupper(code) or chars.islower(code))


@pytest.mark.parametrize("c", ["0", "9"])
def test_isdigit_true(c):
    assert chars.isdigit(c) is True


@pytest.mark.parametrize(
    "c", ["a", "z", "A", "Z", "/", ":", "@", "[", "'", "{", 0, 127, INT_MAX, INT_MIN]
)
def test_isdigit_false(c):
    assert chars.isdigit(c) is False


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "0", "9"])
def test_isalnum_true(c):
    assert chars.isalnum(c) is True


@pytest.mark.parametrize("c", ["/", ":", "@", "[", "'", "{", 0, 127, INT_MAX, INT_MIN])
def test_isalnum_false(c):
    assert chars.isalnum(c) is False


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "0", "9", "/", ":", "@", "[", "'", "{", 0, 127])
def test_isascii_true(c):
    assert chars.isascii(c) is True


@pytest.mark.parametrize("c", [INT_MAX, INT_MIN, 128, -1])
def test_isascii_false(c):
    assert chars.isascii(c) is False


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "0", "9", "/", ":", "@", "[", "'", "{"])
def test_isprint_true(c):
    assert chars.isprint(c) is True


@pytest.mark.parametrize("c", [0, 31, 127, INT_MAX, INT_MIN])
def test_isprint_false(c):
    assert chars.isprint(c) is False


@pytest.mark.parametrize("c", ["/", ":", "@", "[", "'", "{", "~"])
def test_ispunct_true(c):
    assert chars.ispunct(c) is True


@pytest.mark.parametrize("c", [" ", "a", "z", "A", "Z", "0", "9", 0, 127, INT_MAX, INT_MIN])
def test_ispunct_false(c):
    assert chars.ispunct(c) is False


def test_printable_partition():
    for code in range(0x20, 0x7F):
        kinds = [chars.isalnum(code), chars.ispunct(code), code == ord(" ")]
        assert kinds.count(True) == 1


@pytest.mark.parametrize("c", ["0", "9", "a", "f", "A", "F"])
def test_isxdigit_true(c):
    assert chars.isxdigit(c) is True


@pytest.mark.parametrize(
    "c", ["g", "z", "G", "Z", "/", ":", "@", "[", "'", "{", 0, 127, INT_MAX, INT_MIN]
)
def test_isxdigit_false(c):
    assert chars.isxdigit(c) is False


@pytest.mark.parametrize(
    "given, expected",
    [
        ("a", "A"),
        ("z", "Z"),
        ("m", "M"),
        ("A", "A"),
        ("Z", "Z"),
        ("0", "0"),
        ("9", "9"),
        ("!", "!"),
        ("@", "@"),
        (" ", " "),
        (0, 0),
        (127, 127),
    ],
)
def test_toupper(given, expected):
    assert chars.toupper(given) == expected


@pytest.mark.parametrize(
    "given, expected",
    [
        ("A", "a"),
        ("Z", "z"),
        ("M", "m"),
        ("a", "a"),
        ("z", "z"),
        ("0", "0"),
        ("9", "9"),
        ("!", "!"),
        ("@", "@"),
        (" ", " "),
        (0, 0),
        (127, 127),
    ],
)
def test_tolower(given, expected):
    assert chars.tolower(given) == expected


def test_case_conversion_keeps_kind_for_ints():
    assert chars.toupper(ord("a")) == ord("A")
    assert chars.tolower(ord("A")) == ord("a")


def test_case_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        assert chars.tolower(chars.toupper(code)) == code
        assert chars.isupper(chars.toupper(code))


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_rejects_empty_string():
    with pytest.raises(ValueError):
        chars.isdigit("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        chars.isprint(1.5)