import pytest

DATA = bytes([0xAB, 0x01])


def test_display_forms(logic):
    view = logic.Hex(DATA)
    assert f"{view}" == "ab01"
    assert format(view) == "ab01"
    assert "{}".format(logic.Hex(DATA, upper=True)) == "AB01"


@pytest.mark.parametrize(
    "spec,expected",
    [
        ("x", "ab01"),
        ("X", "AB01"),
        ("", "ab01"),
        (">8", "    ab01"),
        ("<8X", "AB01    "),
        ("*^8x", "**ab01**"),
        ("s", "ab01"),
    ],
)
def test_format_spec(logic, spec, expected):
    assert format(logic.Hex(DATA), spec) == expected


def test_format_flag_overrides_view_case(logic):
    assert f"{logic.Hex(DATA, upper=True):x}" == "ab01"


@pytest.mark.parametrize("spec", ["d", "08b", "#x"])
def test_format_spec_errors(logic, spec):
    with pytest.raises(ValueError):
        format(logic.Hex(DATA), spec)


def test_repr(logic):
    assert repr(logic.Hex(DATA)) == "Hex(b'\\xab\\x01')"
    assert repr(logic.Hex(DATA, upper=True)) == "Hex(b'\\xab\\x01', upper=True)"


def test_equality_and_hash(logic):
    a = logic.Hex(DATA)
    b = logic.Hex(bytearray(DATA))
    assert a == b
    assert hash(a) == hash(b)
    assert a != a.upper()
    assert a != logic.Hex(b"\x01\xab")
    assert a != "ab01"
    assert len({a, b, a.upper()}) == 2


def test_bytes_roundtrip(logic):
    assert bytes(logic.Hex(bytearray(DATA))) == DATA


@pytest.mark.parametrize("spec", [".3", ".3x", ">10.1X", ".0"])
def test_precision_rejected(logic, spec):
    with pytest.raises(ValueError, match="Precision"):
        format(logic.Hex(DATA), spec)


def test_dot_as_fill_is_allowed(logic):
    assert format(logic.Hex(DATA), ".>6") == "..ab01"
    assert f"{logic.Hex(DATA):.<6X}" == "AB01.."
