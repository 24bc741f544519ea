import pytest

from fendcore.si_units import si_unit_groups
from fendcore.unit_table import (
    UnitDef,
    currency_identifiers,
    iter_unit_defs,
    lookup_default_unit,
    query_builtin_unit,
)


def test_currencies_sorted():
    currencies = list(currency_identifiers())
    assert currencies == sorted(currencies)


def test_lowercase_currency():
    assert query_builtin_unit("usd", True, True) is None
    assert query_builtin_unit("usd", True, False) == UnitDef("USD", "USD", "$CURRENCY")
    assert query_builtin_unit("USD", True, False) == UnitDef("USD", "USD", "$CURRENCY")


def test_short_prefix_lookup():
    assert query_builtin_unit("k", True, True) == UnitDef("k", "k", "sp@kilo")


def test_short_prefix_case_insensitive():
    assert query_builtin_unit("KI", True, False) == UnitDef("Ki", "Ki", "sp@kibi")


def test_short_prefix_only_when_requested():
    assert query_builtin_unit("da", True, True).definition == "sp@deka"
    assert query_builtin_unit("da", False, True).definition == "s@day"


@pytest.mark.parametrize("name", ["meter", "meters"])
def test_exact_singular_and_plural(name):
    assert query_builtin_unit(name, False, True) == UnitDef("meter", "meters", "l@!")


def test_empty_plural_is_filled_in():
    unit = query_builtin_unit("kelvin", False, True)
    assert unit.plural == "kelvin"


def test_unique_case_insensitive_match():
    assert query_builtin_unit("Metres", False, False) == UnitDef(
        "metre", "metres", "l@meter"
    )
    assert query_builtin_unit("Metres", False, True) is None


def test_ambiguous_case_insensitive_match():
    assert query_builtin_unit("MI", False, False) is None


def test_duplicate_entries_are_ambiguous():
    assert query_builtin_unit("LINK", False, False) is None
    assert query_builtin_unit("link", False, False).definition == "1/100 chain"


def test_only_ascii_case_is_folded():
    assert query_builtin_unit("\u00b0c", False, False).singular == "\u00b0C"
    assert query_builtin_unit("Z\u0141", False, False) is None
    assert query_builtin_unit("ZL", False, False).singular == "zl"


def test_currency_case_insensitive():
    assert query_builtin_unit("gbp", False, False) == UnitDef("GBP", "GBP", "$CURRENCY")


def test_unknown_unit():
    assert query_builtin_unit("xyzzy", True, False) is None


def test_description_kept():
    assert query_builtin_unit("c", False, True).description == (
        "speed of light in vacuum (exact)"
    )


@pytest.mark.parametrize(
    "base, name",
    [
        ("second^-1", "hertz"),
        ("kilogram^1 meter^2 second^-2", "joule"),
        ("meter^3", "liter"),
        ("meter^1", "meter"),
        ("kilogram^1", "kilogram"),
    ],
)
def test_lookup_default_unit(base, name):
    assert lookup_default_unit(base) == name


def test_lookup_default_unit_missing():
    assert lookup_default_unit("meter^2") is None


def test_iter_unit_defs_covers_all_groups():
    defs = list(iter_unit_defs())
    assert len(defs) == sum(len(group) for group in si_unit_groups())
    assert all(d.plural for d in defs)
    assert defs[0] == UnitDef("second", "seconds", "l@!")
    assert UnitDef("dollar", "dollars", "USD") in defs