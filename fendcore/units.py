"""Unit name resolution: prefix rules, custom units and prefix splitting."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from fendcore.si_units import si_unit_groups
from fendcore.unit_table import CURRENCY_DEFINITION, UnitDef, query_builtin_unit

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _eq_ignore_ascii_case(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


class PrefixRule(enum.Enum):
    """Which prefixes a unit may take, or which kind of prefix it is."""

    NO_PREFIXES_ALLOWED = enum.auto()
    LONG_PREFIX_ALLOWED = enum.auto()
    LONG_PREFIX = enum.auto()
    SHORT_PREFIX_ALLOWED = enum.auto()
    SHORT_PREFIX = enum.auto()


class FCMode(enum.Enum):
    """How the lone letters ``C`` and ``F`` are interpreted."""

    CELSIUS_FAHRENHEIT = enum.auto()
    COULOMB_FARAD = enum.auto()


class UnitNotFound(LookupError):
    """Raised when an identifier does not name a unit."""

    def __init__(self, ident: str) -> None:
        super().__init__(f"unknown identifier '{ident}'")
        self.ident = ident


@dataclass
class UnitContext:
    """User-defined units and interpretation settings used during lookup."""

    custom_units: list[tuple[str, str, str]] = field(default_factory=list)
    fc_mode: FCMode = FCMode.CELSIUS_FAHRENHEIT


@dataclass(frozen=True)
class UnitDefinition:
    """A parsed unit definition, ready to be evaluated."""

    singular: str
    plural: str
    prefix_rule: PrefixRule
    alias: bool
    expression: str
    base_unit: bool = False
    currency: bool = False


@dataclass(frozen=True)
class Completion:
    """An autocompletion candidate."""

    display: str
    insert: str


_RULE_MARKERS = (
    ("l@", PrefixRule.LONG_PREFIX_ALLOWED),
    ("lp@", PrefixRule.LONG_PREFIX),
    ("s@", PrefixRule.SHORT_PREFIX_ALLOWED),
    ("sp@", PrefixRule.SHORT_PREFIX),
)


def parse_definition(singular: str, plural: str, definition: str) -> UnitDefinition:
    """Split a textual unit definition into its prefix rule, flags and expression."""
    definition = definition.strip()
    if definition == CURRENCY_DEFINITION:
        return UnitDefinition(
            singular,
            plural,
            PrefixRule.LONG_PREFIX_ALLOWED,
            alias=False,
            expression="",
            currency=True,
        )
    rule = PrefixRule.NO_PREFIXES_ALLOWED
    for marker, marker_rule in _RULE_MARKERS:
        if definition.startswith(marker):
            definition = definition[len(marker):]
            rule = marker_rule
    if definition == "!":
        return UnitDefinition(
            singular, plural, rule, alias=False, expression="", base_unit=True
        )
    alias = definition.startswith("=")
    if alias:
        definition = definition[1:]
    # long prefixes like `hecto` are always treated as aliases
    alias = alias or rule is PrefixRule.LONG_PREFIX
    return UnitDefinition(singular, plural, rule, alias=alias, expression=definition)


def query_unit_internal(
    ident: str,
    short_prefixes: bool,
    case_sensitive: bool,
    whole_unit: bool,
    context: UnitContext,
) -> UnitDef:
    """Find a unit among custom units, the C/F shorthands and built-in units."""
    if not short_prefixes:
        for singular, plural, definition in context.custom_units:
            plural = plural or singular
            if ident in (singular, plural) or (
                not case_sensitive
                and (
                    _eq_ignore_ascii_case(singular, ident)
                    or _eq_ignore_ascii_case(plural, ident)
                )
            ):
                return UnitDef(singular, plural, definition)
    if whole_unit and context.fc_mode is FCMode.CELSIUS_FAHRENHEIT:
        if ident == "C":
            return UnitDef("C", "C", "=\u00b0C")
        if ident == "F":
            return UnitDef("F", "F", "=\u00b0F")
    found = query_builtin_unit(ident, short_prefixes, case_sensitive)
    if found is None:
        raise UnitNotFound(ident)
    return found


def _parse(unit: UnitDef) -> UnitDefinition:
    return parse_definition(unit.singular, unit.plural, unit.definition)


def _prefix_applies(prefix: UnitDefinition, unit: UnitDefinition) -> bool:
    return (
        prefix.prefix_rule is PrefixRule.LONG_PREFIX
        and unit.prefix_rule is PrefixRule.LONG_PREFIX_ALLOWED
    ) or (
        prefix.prefix_rule is PrefixRule.SHORT_PREFIX
        and unit.prefix_rule is PrefixRule.SHORT_PREFIX_ALLOWED
    )


def _resolve_case(
    ident: str, case_sensitive: bool, context: UnitContext
) -> tuple[UnitDefinition | None, UnitDefinition]:
    try:
        whole = query_unit_internal(ident, False, case_sensitive, True, context)
    except UnitNotFound:
        pass
    else:
        return None, _parse(whole)

    for split in range(1, len(ident)):
        prefix, remaining = ident[:split], ident[split:]
        try:
            a = query_unit_internal(prefix, True, case_sensitive, False, context)
            b = query_unit_internal(remaining, False, case_sensitive, False, context)
        except UnitNotFound:
            continue
        prefix_def, unit_def = _parse(a), _parse(b)
        if _prefix_applies(prefix_def, unit_def):
            return prefix_def, unit_def
        raise UnitNotFound(ident)
    raise UnitNotFound(ident)


def resolve_unit(
    ident: str, context: UnitContext
) -> tuple[UnitDefinition | None, UnitDefinition]:
    """Resolve a unit name to an optional prefix and the unit it applies to.

    A name in single quotes such as ``'pigeons'`` declares a new base unit.
    Otherwise the lookup is tried case-sensitively first, then ignoring case.
    """
    if len(ident) >= 3 and ident.startswith("'") and ident.endswith("'"):
        name = ident[1:-1]
        return None, UnitDefinition(
            name,
            name,
            PrefixRule.NO_PREFIXES_ALLOWED,
            alias=False,
            expression="",
            base_unit=True,
        )
    if not ident:
        raise UnitNotFound(ident)
    try:
        return _resolve_case(ident, True, context)
    except UnitNotFound:
        pass
    return _resolve_case(ident, False, context)


def get_completions_for_prefix(prefix: str) -> list[Completion]:
    """Return singular built-in unit names that extend ``prefix``, sorted."""
    result = [
        Completion(display=unit.singular, insert=unit.singular[len(prefix):])
        for group in si_unit_groups()
        for unit in group
        if unit.singular.startswith(prefix) and unit.singular != prefix
    ]
    result.sort(key=lambda completion: completion.display)
    return result