from fendcore.si_units import (
    CURRENCY_IDENTIFIERS,
    DEFAULT_UNITS,
    IMPLICIT_UNIT_MAP,
    SHORT_PREFIXES,
    UnitTuple,
    si_unit_groups,
)


def _all_rows():
    return [row for group in si_unit_groups() for row in group]


def _first(name):
    return next(row for row in _all_rows() if row.singular == name)


def _all_names():
    names = set()
    for row in _all_rows():
        names.add(row.singular)
        if row.plural:
            names.add(row.plural)
    return names


def test_first_group_starts_with_second():
    first = si_unit_groups()[0][0]
    assert first == UnitTuple("second", "seconds", "l@!", "")


def test_last_group_is_cgs():
    last = si_unit_groups()[-1]
    assert last[0].singular == "gal"
    assert last[-1] == UnitTuple("ph", "", "phot", "")


def test_every_row_is_unit_tuple_with_name_and_definition():
    rows = _all_rows()
    assert rows
    for row in rows:
        assert isinstance(row, UnitTuple)
        assert row.singular
        assert row.definition.strip()


def test_groups_are_immutable_and_stable():
    groups = si_unit_groups()
    assert groups is si_unit_groups()
    assert all(isinstance(group, tuple) for group in groups)


def test_constant_descriptions():
    c = _first("c")
    assert c.definition == "=299792458 m/s"
    assert c.description == "speed of light in vacuum (exact)"
    assert _first("planck").definition == "=6.62607015e-34 J s"


def test_prefix_definitions():
    assert _first("kilo").definition == "lp@1e3"
    assert _first("deka").definition == "lp@deca"
    assert _first("kibi").definition == "lp@2^10"


def test_first_occurrence_wins_for_duplicates():
    # "link" is defined twice; lookups use the first definition.
    assert _first("link").definition == "1/100 chain"
    links = [row for row in _all_rows() if row.singular == "link"]
    assert len(links) == 2


def test_degree_symbols():
    assert _first("\u00b0").definition == "degree"
    assert _first("\u00b0C").definition == "celsius"
    assert _first("oC").definition == "=\u00b0C"


def test_currency_rows_reference_sorted_known_codes():
    assert list(CURRENCY_IDENTIFIERS) == sorted(CURRENCY_IDENTIFIERS)
    assert len(set(CURRENCY_IDENTIFIERS)) == len(CURRENCY_IDENTIFIERS)
    assert all(len(code) == 3 and code.isupper() for code in CURRENCY_IDENTIFIERS)
    currencies = next(g for g in si_unit_groups() if g[0].singular == "BASE_CURRENCY")
    codes = [row.definition.split()[-1] for row in currencies[1:]]
    assert "USD" in codes
    for code in codes:
        assert code in CURRENCY_IDENTIFIERS


def test_short_prefixes_point_at_long_prefixes():
    names = _all_names()
    for _, defn in SHORT_PREFIXES:
        assert defn.startswith("sp@")
        assert defn[len("sp@"):] in names
    assert dict(SHORT_PREFIXES)["k"] == "sp@kilo"
    assert dict(SHORT_PREFIXES)["\u03bc"] == "sp@micro"


def test_default_units_name_known_units():
    names = {row.singular for row in _all_rows()}
    for unit_name, _ in DEFAULT_UNITS:
        assert unit_name in names
    assert dict(DEFAULT_UNITS)["liter"] == "meter^3"


def test_implicit_unit_map_names_known_units():
    names = _all_names()
    for major, minor in IMPLICIT_UNIT_MAP:
        assert major in names
        assert minor in names
    assert dict(IMPLICIT_UNIT_MAP)["foot"] == "inches"
    assert dict(IMPLICIT_UNIT_MAP)["'"] == '"'