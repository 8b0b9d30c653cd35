import pytest

from libft.spec import (
    Conversion,
    Flag,
    FormatError,
    Spec,
    parse_spec,
    pop_arg,
    resolve_spec,
)


@pytest.mark.parametrize(
    "fmt, conversion",
    [
        ("c", Conversion.CHAR),
        ("d", Conversion.DEC),
        ("i", Conversion.DEC),
        ("u", Conversion.U_INT),
        ("x", Conversion.HEX_LOW),
        ("X", Conversion.HEX_UP),
        ("s", Conversion.STR),
        ("p", Conversion.PTR),
        ("%", Conversion.PERCENT),
    ],
)
def test_conversion_characters(fmt, conversion):
    spec, end = parse_spec(fmt, 0)
    assert spec.conversion is conversion
    assert end == len(fmt)
    assert spec.width is None and spec.precision is None


def test_all_flags():
    fmt = "# +-0x"
    spec, end = parse_spec(fmt, 0)
    assert spec.flags == (
        Flag.ALT_FORM | Flag.BLANK_POS | Flag.SIGNED | Flag.LEFT_JUST | Flag.ZERO_PADD
    )
    assert spec.conversion is Conversion.HEX_LOW
    assert end == len(fmt)


def test_width_and_precision():
    spec, end = parse_spec("10.5s", 0)
    assert spec.width == 10
    assert spec.precision == 5
    assert end == len("10.5s")


def test_dot_without_digits_is_zero_precision():
    spec, _ = parse_spec("10.d", 0)
    assert spec.precision == 0
    assert spec.width == 10


def test_star_width_and_precision():
    spec, end = parse_spec("*.*d", 0)
    assert Flag.WIDTH_ARG in spec.flags
    assert Flag.PREC_ARG in spec.flags
    assert spec.width is None and spec.precision is None
    assert end == len("*.*d")


def test_unknown_conversion_is_left_unconsumed():
    fmt = "5y"
    spec, end = parse_spec(fmt, 0)
    assert spec.conversion is Conversion.PERCENT
    assert fmt[end] == "y"


def test_end_of_format_is_percent():
    spec, end = parse_spec("%", 1)
    assert spec.conversion is Conversion.PERCENT
    assert end == 1


def test_parse_from_offset():
    fmt = "ab%-5d"
    spec, end = parse_spec(fmt, fmt.index("%") + 1)
    assert Flag.LEFT_JUST in spec.flags
    assert spec.width == 5
    assert end == len(fmt)


def test_largest_width_accepted():
    spec, _ = parse_spec("2147483647d", 0)
    assert spec.width == 2**31 - 1


@pytest.mark.parametrize("fmt", ["2147483648d", ".99999999999s"])
def test_overflowing_numbers_raise(fmt):
    with pytest.raises(FormatError):
        parse_spec(fmt, 0)


def test_position_out_of_range():
    with pytest.raises(IndexError):
        parse_spec("d", 5)


def test_resolve_negative_width_left_justifies():
    spec = Spec(flags=Flag.WIDTH_ARG, conversion=Conversion.DEC)
    resolved = resolve_spec(spec, iter([-7]))
    assert resolved.width == 7
    assert Flag.LEFT_JUST in resolved.flags


def test_resolve_int_min_width_is_unset():
    spec = Spec(flags=Flag.WIDTH_ARG)
    resolved = resolve_spec(spec, iter([-(2**31)]))
    assert resolved.width is None
    assert Flag.LEFT_JUST not in resolved.flags


def test_resolve_consumes_width_before_precision():
    spec = Spec(flags=Flag.WIDTH_ARG | Flag.PREC_ARG)
    args = iter([4, 2, "rest"])
    resolved = resolve_spec(spec, args)
    assert (resolved.width, resolved.precision) == (4, 2)
    assert next(args) == "rest"


@pytest.mark.parametrize("given, expected", [(-1, None), (3, 3), (-5, -5)])
def test_resolve_precision(given, expected):
    resolved = resolve_spec(Spec(flags=Flag.PREC_ARG), iter([given]))
    assert resolved.precision == expected


def test_resolve_without_star_leaves_arguments():
    args = iter(["value"])
    spec = Spec(width=3, conversion=Conversion.STR)
    assert resolve_spec(spec, args) == spec
    assert next(args) == "value"


def test_resolve_missing_argument():
    with pytest.raises(FormatError):
        resolve_spec(Spec(flags=Flag.WIDTH_ARG), iter([]))


def test_pop_dec_wraps_to_int():
    assert pop_arg(Conversion.DEC, iter([2**31])) == -(2**31)


@pytest.mark.parametrize("conversion", [Conversion.U_INT, Conversion.HEX_LOW, Conversion.HEX_UP])
def test_pop_unsigned_wraps(conversion):
    assert pop_arg(conversion, iter([-1])) == 2**32 - 1


def test_pop_char_accepts_string():
    assert pop_arg(Conversion.CHAR, iter(["A"])) == ord("A")


def test_pop_string_and_null():
    assert pop_arg(Conversion.STR, iter(["abc"])) == "abc"
    assert pop_arg(Conversion.STR, iter([None])) is None


def test_pop_null_pointer_is_zero():
    assert pop_arg(Conversion.PTR, iter([None])) == 0


def test_pop_percent_takes_nothing():
    args = iter([5])
    assert pop_arg(Conversion.PERCENT, args) is None
    assert next(args) == 5


def test_pop_missing_argument():
    with pytest.raises(FormatError):
        pop_arg(Conversion.DEC, iter([]))


def test_pop_wrong_type():
    with pytest.raises(TypeError):
        pop_arg(Conversion.STR, iter([42]))