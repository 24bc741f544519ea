"""Lookup functions over the built-in unit table."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterator

from fendcore.si_units import (
    BASE_UNITS,
    CURRENCY_IDENTIFIERS,
    DEFAULT_UNITS,
    SHORT_PREFIXES,
    si_unit_groups,
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

CURRENCY_DEFINITION = "$CURRENCY"


def _eq_ignore_ascii_case(a: str, b: str) -> bool:
    """Compare two strings, folding only ASCII letters."""
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class UnitDef:
    """A unit name pair with its textual definition."""

    singular: str
    plural: str
    definition: str
    description: str = field(default="", compare=False)


def _normalise(singular: str, plural: str, definition: str, description: str = "") -> UnitDef:
    return UnitDef(singular, plural or singular, definition, description)


def iter_unit_defs() -> Iterator[UnitDef]:
    """Yield every built-in unit in lookup order, with the plural filled in."""
    for group in si_unit_groups():
        for entry in group:
            yield _normalise(*entry)


def currency_identifiers() -> tuple[str, ...]:
    """Return the sorted ISO 4217 currency codes."""
    return CURRENCY_IDENTIFIERS


def _find_currency(code: str) -> str | None:
    idx = bisect_left(CURRENCY_IDENTIFIERS, code)
    if idx < len(CURRENCY_IDENTIFIERS) and CURRENCY_IDENTIFIERS[idx] == code:
        return CURRENCY_IDENTIFIERS[idx]
    return None


def query_builtin_unit(
    ident: str, short_prefixes: bool, case_sensitive: bool
) -> UnitDef | None:
    """Find a built-in unit by name.

    Short prefixes are consulted only when ``short_prefixes`` is true. An
    exact match wins immediately; otherwise, when case-insensitive, a match
    is returned only if exactly one unit matches ignoring ASCII case.
    """
    if short_prefixes:
        for name, definition in SHORT_PREFIXES:
            if name == ident or (
                not case_sensitive and _eq_ignore_ascii_case(name, ident)
            ):
                return UnitDef(name, name, definition)

    currency = _find_currency(ident if case_sensitive else ident.upper())
    if currency is not None:
        return UnitDef(currency, currency, CURRENCY_DEFINITION)

    candidates: list[UnitDef] = []
    for unit in iter_unit_defs():
        if ident in (unit.singular, unit.plural):
            return unit
        if not case_sensitive and (
            _eq_ignore_ascii_case(unit.singular, ident)
            or _eq_ignore_ascii_case(unit.plural, ident)
        ):
            candidates.append(unit)
    if len(candidates) == 1:
        return candidates[0]
    return None


def lookup_default_unit(base_units: str) -> str | None:
    """Return the named unit that a base-unit combination simplifies to."""
    for unit_name, base in DEFAULT_UNITS:
        if base == base_units:
            return unit_name
    for unit in BASE_UNITS:
        if f"{unit.singular}^1" == base_units:
            return unit.singular
    return None