# fendcore

Building blocks for a unit-aware calculator, in plain Python with no
third-party dependencies.

## Modules

### `fendcore.si_units`

The built-in unit tables. `si_unit_groups()` returns every group in lookup
order, with earlier entries taking precedence. The groups cover base units,
prefixes, number words, constants, angles, time, imperial units, currencies and
more. Each entry is a `UnitTuple(singular, plural, definition, description)`.
The plural is empty when it matches the singular.

A definition may begin with a prefix-rule marker. `l@` means long prefixes
such as `kilo` are allowed, and `lp@` means the unit is a long prefix itself.
`s@` means short prefixes such as `k` are allowed, and `sp@` means the unit is
a short prefix itself. After the marker, `!` declares a base unit, a leading
`=` marks an alias, and `$CURRENCY` marks a currency. The module also holds the
sorted ISO 4217 codes, the short prefixes, the default named units used when
simplifying, and the implicit unit map (`'` followed by `"`, `foot` followed by
`inches`).

### `fendcore.unit_table`

Lookups over those tables:

- `query_builtin_unit(ident, short_prefixes, case_sensitive)` returns a
  `UnitDef(singular, plural, definition)` or `None`. Short prefixes are searched
  first, and only when `short_prefixes` is true. Next come the currency codes,
  and after them the unit groups. An exact match wins at once. In
  case-insensitive mode a match that ignores ASCII case is returned only if it
  is the only one.
- `lookup_default_unit(base_units)` maps a signature such as
  `"kilogram^1 meter^1 second^-2"` to `"newton"`, or `"meter^1"` to `"meter"`.
- `iter_unit_defs()` yields every built-in unit with its plural filled in.
- `currency_identifiers()` returns the ISO 4217 codes.

### `fendcore.units`

Resolves unit names to their textual definitions.

- `parse_definition(singular, plural, definition)` splits a definition into a
  `UnitDefinition` holding its `PrefixRule`, alias flag, base-unit and currency
  flags, and the remaining expression text.
- `query_unit_internal(ident, short_prefixes, case_sensitive, whole_unit, context)`
  searches custom units from a `UnitContext`, then the `C`/`F` shorthands (in
  `FCMode.CELSIUS_FAHRENHEIT`), then the built-in tables. It raises
  `UnitNotFound` when the name is unknown.
- `resolve_unit(ident, context)` returns `(prefix, unit)`, where `prefix` is
  `None` unless the name was split into a prefix and a unit that accepts it
  (`km` becomes `k` and `m`). A quoted name such as `'pigeons'` declares a new
  base unit. Lookup is tried case-sensitively first and then ignoring case.
- `get_completions_for_prefix(prefix)` returns sorted `Completion(display, insert)`
  candidates drawn from the singular built-in names.

### `fendcore.functions`

`BuiltInFunction` enumerates the built-in functions (`sin`, `ln`, `abs`,
`base`, `not` and others). `invert()` maps each trigonometric and hyperbolic
function to its inverse and back again. For any other function it raises
`UnableToInvertFunction`. `parse_function_name`, `write_function` and
`read_function` convert a function to and from its serialized name. An unknown
name raises `DeserializationError`.

### `fendcore.parser`

A recursive-descent parser that takes tokens (`NumToken`, `IdentToken`,
`StringToken`, `SymbolToken`, `DateToken`) and builds an expression tree of
frozen dataclasses (`NumLiteral`, `Ident`, `BinaryOp`, `Apply`, `ApplyMul`,
`Fn`, `Assign`, `Statements` and others). It handles:

- operator precedence, unary `-`/`+`/`/`, factorials and right-associative powers;
- implicit multiplication and function application;
- mixed fractions (`1 2/3`) and implicit addition (`6 feet 1 inch`);
- `to` conversions, bit shifts and bitwise operators, `nCr`/`nPr`;
- lambdas (`x: ...` and `\x. ...`), assignments and `;`-separated statements;
- a closing parenthesis left off at the end of the input.

`parse_tokens(tokens, is_prefix_unit)` parses the whole sequence.
`parse_expression(tokens, is_prefix_unit)` also returns any tokens it did not
consume. The optional `is_prefix_unit` callable marks identifiers written
before their number, such as `$`. Errors raise `ParseError`.

### `fendcore.serialize`

A big-endian binary encoding made of `write_u8`/`read_u8`, `write_i32`/`read_i32`,
`write_u64`/`read_u64`, `write_usize`/`read_usize` (8 bytes),
`write_string`/`read_string` (a length-prefixed UTF-8 string) and
`write_bool`/`read_bool`. Truncated input raises `EOFError`. Invalid UTF-8, or
a boolean byte other than 0 or 1, raises `DeserializationError`.

## Example

```python
import io

from fendcore.functions import BuiltInFunction
from fendcore.parser import NumToken, Symbol, SymbolToken, parse_tokens
from fendcore.serialize import read_string, write_string
from fendcore.unit_table import lookup_default_unit, query_builtin_unit
from fendcore.units import UnitContext, resolve_unit

print(query_builtin_unit("meters", short_prefixes=False, case_sensitive=True))
# UnitDef(singular='meter', plural='meters', definition='l@!', ...)

print(lookup_default_unit("meter^3"))   # liter
print(BuiltInFunction.SIN.invert())     # asin

prefix, unit = resolve_unit("km", UnitContext())
print(prefix.expression, unit.singular)  # kilo m

print(parse_tokens([NumToken(1), SymbolToken(Symbol.ADD), NumToken(2)]))
# BinaryOp(op=<Bop.PLUS: '+'>, lhs=NumLiteral(value=1), rhs=NumLiteral(value=2))

buf = io.BytesIO()
write_string("hello", buf)
buf.seek(0)
print(read_string(buf))                 # hello
```

## What this package does not do

The package provides the parts listed above and nothing more. It contains no
tokenizer, so tokens have to be built by the caller. It does not evaluate
expression trees or unit definitions, and it has no number type, arithmetic or
conversion between units. `resolve_unit` returns definition text and does not
compute values. Exchange rates are not fetched, and `$CURRENCY` units are only
flagged. The package has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```