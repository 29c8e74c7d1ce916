import pytest

from mis_dashboard.domain.normalization import normalize_key, to_float


@pytest.mark.parametrize("raw", ["", None])
def test_empty_key(raw):
    assert normalize_key(raw) == ""


def test_assembly_variants_share_a_key():
    assert normalize_key("bogie_assly") == "BOGIE"
    assert normalize_key("BOGIE-ASSY") == "BOGIE"
    assert normalize_key("Bogie Assembly") == "BOGIE"
    assert normalize_key("COUPLER_ASSM") == "COUPLER"


def test_draft_gear_alias():
    assert normalize_key("D_GEAR") == "DRAFTGEAR"
    assert normalize_key("DGEAR") == "DRAFTGEAR"
    assert normalize_key("Draft Gear") == "DRAFTGEAR"


def test_tokens_removed_anywhere():
    assert normalize_key("ASSY_BOGIE") == "BOGIE"
    assert normalize_key("bo-assm-gie") == "BOGIE"


@pytest.mark.parametrize(
    "raw",
    ["bogie_assly", "D_GEAR", "DRAFTGEAR", "ASASSYSY", "a\tb c-d_e", "Coupler Assembly", "x"],
)
def test_normalize_is_idempotent(raw):
    once = normalize_key(raw)
    assert normalize_key(once) == once


def test_to_float_parses_prefix_before_slash():
    assert to_float("12.5/pc") == 12.5
    assert to_float("-3.2kg") == -3.2
    assert to_float("1,234.5") == 1234.5


@pytest.mark.parametrize("value", [None, "", 0, "abc", "/12", "-", "."])
def test_to_float_defaults_to_zero(value):
    assert to_float(value) == 0


def test_to_float_accepts_numbers():
    assert to_float(7) == 7.0
    assert to_float("1.2.3") == 1.2
