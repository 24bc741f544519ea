"""Recursive-descent parser turning a token sequence into an expression tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union


class Symbol(enum.Enum):
    """Punctuation and keyword tokens recognised by the parser."""

    OPEN_PARENS = "("
    CLOSE_PARENS = ")"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "mod"
    POW = "^"
    FACTORIAL = "!"
    BACKSLASH = "\\"
    DOT = "."
    OF = "of"
    FN = ":"
    EQUALS = "="
    SEMICOLON = ";"
    UNIT_CONVERSION = "to"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    BITWISE_AND = "&"
    BITWISE_XOR = "xor"
    BITWISE_OR = "|"
    COMBINATION = "nCr"
    PERMUTATION = "nPr"

    def __str__(self) -> str:
        return self.value


class Bop(enum.Enum):
    """Arithmetic binary operators."""

    PLUS = "+"
    IMPLICIT_PLUS = "implicit +"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    MOD = "mod"
    POW = "^"
    COMBINATION = "nCr"
    PERMUTATION = "nPr"


class BitwiseBop(enum.Enum):
    """Bitwise binary operators."""

    AND = "&"
    OR = "|"
    XOR = "xor"
    LEFT_SHIFT = "<<"
    RIGHT_SHIFT = ">>"


class ParseError(ValueError):
    """Raised when the tokens do not form a valid expression."""

    def __init__(self, message: str, cause: Optional["ParseError"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


def _expected_a_token() -> ParseError:
    return ParseError("expected a token")


def _expected_identifier() -> ParseError:
    return ParseError("expected an identifier")


def _invalid_mixed_fraction() -> ParseError:
    return ParseError("invalid mixed fraction")


def _invalid_apply_operands() -> ParseError:
    return ParseError("error")


# --- tokens -----------------------------------------------------------------


@dataclass(frozen=True)
class NumToken:
    value: Any


@dataclass(frozen=True)
class IdentToken:
    name: str


@dataclass(frozen=True)
class StringToken:
    value: str


@dataclass(frozen=True)
class SymbolToken:
    symbol: Symbol


@dataclass(frozen=True)
class DateToken:
    value: Any


Token = Union[NumToken, IdentToken, StringToken, SymbolToken, DateToken]


# --- expressions ------------------------------------------------------------


@dataclass(frozen=True)
class NumLiteral:
    value: Any


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class UnitLiteral:
    """The unit value ``()``."""


@dataclass(frozen=True)
class DateLiteral:
    value: Any


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Parens:
    inner: "Expr"


@dataclass(frozen=True)
class UnaryMinus:
    operand: "Expr"


@dataclass(frozen=True)
class UnaryPlus:
    operand: "Expr"


@dataclass(frozen=True)
class UnaryDiv:
    operand: "Expr"


@dataclass(frozen=True)
class Factorial:
    operand: "Expr"


@dataclass(frozen=True)
class BinaryOp:
    op: Union[Bop, BitwiseBop]
    lhs: "Expr"
    rhs: "Expr"


@dataclass(frozen=True)
class Apply:
    lhs: "Expr"
    rhs: "Expr"


@dataclass(frozen=True)
class ApplyFunctionCall:
    lhs: "Expr"
    rhs: "Expr"


@dataclass(frozen=True)
class ApplyMul:
    lhs: "Expr"
    rhs: "Expr"


@dataclass(frozen=True)
class As:
    value: "Expr"
    target: "Expr"


@dataclass(frozen=True)
class Fn:
    param: str
    body: "Expr"


@dataclass(frozen=True)
class Of:
    name: str
    inner: "Expr"


@dataclass(frozen=True)
class Assign:
    name: str
    value: "Expr"


@dataclass(frozen=True)
class Statements:
    first: "Expr"
    second: "Expr"


Expr = Union[
    NumLiteral, StringLiteral, UnitLiteral, DateLiteral, Ident, Parens,
    UnaryMinus, UnaryPlus, UnaryDiv, Factorial, BinaryOp, Apply,
    ApplyFunctionCall, ApplyMul, As, Fn, Of, Assign, Statements,
]

_LITERALS = (NumLiteral, StringLiteral, UnitLiteral, DateLiteral)
_NUMBERISH = (NumLiteral, UnaryMinus, ApplyMul)


class _Parser:
    def __init__(
        self,
        tokens: Sequence[Token],
        is_prefix_unit: Optional[Callable[[str], bool]],
    ) -> None:
        self.tokens = tuple(tokens)
        self.is_prefix_unit = is_prefix_unit

    def _prefix_unit(self, name: str) -> bool:
        return self.is_prefix_unit is not None and bool(self.is_prefix_unit(name))

    # -- primitives --

    def token(self, pos: int) -> tuple[Token, int]:
        if pos >= len(self.tokens):
            raise _expected_a_token()
        return self.tokens[pos], pos + 1

    def fixed_symbol(self, pos: int, symbol: Symbol) -> int:
        tok, nxt = self.token(pos)
        if isinstance(tok, SymbolToken):
            if tok.symbol is symbol:
                return nxt
            raise ParseError(f"found '{tok.symbol}' while expecting '{symbol}'")
        raise ParseError(f"found an invalid token while expecting '{symbol}'")

    def accept(self, pos: int, symbol: Symbol) -> Optional[int]:
        if pos < len(self.tokens):
            tok = self.tokens[pos]
            if isinstance(tok, SymbolToken) and tok.symbol is symbol:
                return pos + 1
        return None

    # -- atoms --

    def number(self, pos: int) -> tuple[Expr, int]:
        tok, nxt = self.token(pos)
        if isinstance(tok, NumToken):
            return NumLiteral(tok.value), nxt
        raise ParseError("expected a number")

    def ident(self, pos: int) -> tuple[Expr, int]:
        tok, nxt = self.token(pos)
        if not isinstance(tok, IdentToken):
            raise _expected_identifier()
        if tok.name == "light":
            try:
                second, after = self.ident(nxt)
            except ParseError:
                pass
            else:
                return Apply(Ident(tok.name), second), after
        after_of = self.accept(nxt, Symbol.OF)
        if after_of is not None:
            inner, after = self.parens_or_literal(after_of)
            return Of(tok.name, inner), after
        return Ident(tok.name), nxt

    def parens(self, pos: int) -> tuple[Expr, int]:
        pos = self.fixed_symbol(pos, Symbol.OPEN_PARENS)
        closed = self.accept(pos, Symbol.CLOSE_PARENS)
        if closed is not None:
            return UnitLiteral(), closed
        inner, pos = self.expression(pos)
        # allow omitting closing parentheses at end of input
        if pos < len(self.tokens):
            pos = self.fixed_symbol(pos, Symbol.CLOSE_PARENS)
        return Parens(inner), pos

    def backslash_lambda(self, pos: int) -> tuple[Expr, int]:
        pos = self.fixed_symbol(pos, Symbol.BACKSLASH)
        param, pos = self.ident(pos)
        if not isinstance(param, Ident):
            raise _expected_identifier()
        try:
            pos = self.fixed_symbol(pos, Symbol.DOT)
        except ParseError as exc:
            raise ParseError(
                "missing '.' in lambda (expected e.g. \\x.x)", cause=exc
            ) from exc
        body, pos = self.function(pos)
        return Fn(param.name, body), pos

    def parens_or_literal(self, pos: int) -> tuple[Expr, int]:
        tok, nxt = self.token(pos)
        if isinstance(tok, NumToken):
            return self.number(pos)
        if isinstance(tok, IdentToken):
            return self.ident(pos)
        if isinstance(tok, StringToken):
            return StringLiteral(tok.value), nxt
        if isinstance(tok, DateToken):
            return DateLiteral(tok.value), nxt
        if tok.symbol is Symbol.OPEN_PARENS:
            return self.parens(pos)
        if tok.symbol is Symbol.BACKSLASH:
            return self.backslash_lambda(pos)
        raise ParseError(f"expected a value, instead found '{tok.symbol}'")

    def factorial(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.parens_or_literal(pos)
        while (nxt := self.accept(pos, Symbol.FACTORIAL)) is not None:
            res, pos = Factorial(res), nxt
        return res, pos

    def power(self, pos: int, allow_unary: bool) -> tuple[Expr, int]:
        if allow_unary:
            for symbol, node in (
                (Symbol.SUB, UnaryMinus),
                (Symbol.ADD, UnaryPlus),
                # /a^b -> (1/a)^b == 1/(a^b), so precedence here is irrelevant
                (Symbol.DIV, UnaryDiv),
            ):
                nxt = self.accept(pos, symbol)
                if nxt is not None:
                    operand, after = self.power(nxt, True)
                    return node(operand), after
        result, pos = self.factorial(pos)
        nxt = self.accept(pos, Symbol.POW)
        if nxt is not None:
            rhs, pos = self.power(nxt, True)
            result = BinaryOp(Bop.POW, result, rhs)
        return result, pos

    # -- juxtaposition --

    def apply_cont(self, pos: int, lhs: Expr) -> tuple[Expr, int]:
        rhs, pos = self.power(pos, False)
        if isinstance(lhs, _NUMBERISH) and isinstance(rhs, NumLiteral):
            # may later be a mixed fraction (1 2/3) or a sum (6 feet 1 inch)
            raise _invalid_apply_operands()
        if (
            isinstance(lhs, _NUMBERISH)
            and isinstance(rhs, BinaryOp)
            and rhs.op is Bop.POW
        ):
            if isinstance(rhs.lhs, NumLiteral):
                raise _invalid_apply_operands()
            return Apply(lhs, rhs), pos
        if (
            isinstance(lhs, Ident)
            and isinstance(rhs, NumLiteral)
            and self._prefix_unit(lhs.name)
        ):
            # e.g. '$5' or '£3'
            return Apply(lhs, rhs), pos
        if isinstance(rhs, NumLiteral):
            return ApplyFunctionCall(lhs, rhs), pos
        if isinstance(lhs, (NumLiteral, ApplyMul)):
            return ApplyMul(lhs, rhs), pos
        return Apply(lhs, rhs), pos

    @staticmethod
    def _signed_number(expr: Expr) -> Optional[bool]:
        if isinstance(expr, NumLiteral):
            return True
        if isinstance(expr, UnaryMinus) and isinstance(expr.operand, NumLiteral):
            return False
        return None

    def mixed_fraction(self, pos: int, lhs: Expr) -> tuple[Expr, int]:
        other_factor: Optional[Expr] = None
        base = lhs
        positive = self._signed_number(lhs)
        if positive is None:
            if not (isinstance(lhs, BinaryOp) and lhs.op is Bop.MUL):
                raise _invalid_mixed_fraction()
            positive = self._signed_number(lhs.rhs)
            if positive is None:
                raise _invalid_mixed_fraction()
            base, other_factor = lhs.rhs, lhs.lhs
        top, pos = self.power(pos, False)
        if not isinstance(top, NumLiteral):
            raise _invalid_mixed_fraction()
        pos = self.fixed_symbol(pos, Symbol.DIV)
        bottom, pos = self.power(pos, False)
        if not isinstance(bottom, NumLiteral):
            raise _invalid_mixed_fraction()
        fraction = BinaryOp(Bop.DIV, top, bottom)
        result: Expr = BinaryOp(Bop.PLUS if positive else Bop.MINUS, base, fraction)
        if other_factor is not None:
            result = BinaryOp(Bop.MUL, other_factor, result)
        return result, pos

    # -- operator levels --

    def _op_cont(self, pos: int, symbol: Symbol) -> tuple[Expr, int]:
        pos = self.fixed_symbol(pos, symbol)
        return self.power(pos, True)

    def multiplicative(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.power(pos, True)
        ops = ((Symbol.MUL, Bop.MUL), (Symbol.DIV, Bop.DIV), (Symbol.MOD, Bop.MOD))
        while True:
            for symbol, bop in ops:
                try:
                    term, nxt = self._op_cont(pos, symbol)
                except ParseError:
                    continue
                res, pos = BinaryOp(bop, res, term), nxt
                break
            else:
                for step in (self.mixed_fraction, self.apply_cont):
                    try:
                        new_res, nxt = step(pos, res)
                    except ParseError:
                        continue
                    res, pos = new_res, nxt
                    break
                else:
                    return res, pos

    def implicit_addition(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.multiplicative(pos)
        try:
            rhs, after = self.implicit_addition(pos)
        except ParseError:
            return res, pos
        # n i n i, n i i n i i, etc. (n: number literal, i: identifier)
        if isinstance(res, ApplyMul) and (
            isinstance(rhs, (ApplyMul, *_LITERALS))
            or (isinstance(rhs, BinaryOp) and rhs.op is Bop.IMPLICIT_PLUS)
        ):
            return BinaryOp(Bop.IMPLICIT_PLUS, res, rhs), after
        return res, pos

    def additive(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.implicit_addition(pos)
        builders = (
            (Symbol.ADD, lambda a, b: BinaryOp(Bop.PLUS, a, b)),
            (Symbol.SUB, lambda a, b: BinaryOp(Bop.MINUS, a, b)),
            (Symbol.UNIT_CONVERSION, As),
        )
        while True:
            for symbol, build in builders:
                try:
                    nxt = self.fixed_symbol(pos, symbol)
                    term, nxt = self.implicit_addition(nxt)
                except ParseError:
                    continue
                res, pos = build(res, term), nxt
                break
            else:
                return res, pos

    def _left_assoc(
        self,
        pos: int,
        operand: Callable[[int], tuple[Expr, int]],
        ops: Sequence[tuple[Symbol, Union[Bop, BitwiseBop]]],
    ) -> tuple[Expr, int]:
        result, pos = operand(pos)
        while True:
            for symbol, bop in ops:
                nxt = self.accept(pos, symbol)
                if nxt is not None:
                    rhs, pos = operand(nxt)
                    result = BinaryOp(bop, result, rhs)
                    break
            else:
                return result, pos

    def bitshifts(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos,
            self.additive,
            (
                (Symbol.SHIFT_LEFT, BitwiseBop.LEFT_SHIFT),
                (Symbol.SHIFT_RIGHT, BitwiseBop.RIGHT_SHIFT),
            ),
        )

    def bitwise_and(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos, self.bitshifts, ((Symbol.BITWISE_AND, BitwiseBop.AND),)
        )

    def bitwise_xor(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos, self.bitwise_and, ((Symbol.BITWISE_XOR, BitwiseBop.XOR),)
        )

    def bitwise_or(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos, self.bitwise_xor, ((Symbol.BITWISE_OR, BitwiseBop.OR),)
        )

    def combination(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos, self.bitwise_or, ((Symbol.COMBINATION, Bop.COMBINATION),)
        )

    def permutation(self, pos: int) -> tuple[Expr, int]:
        return self._left_assoc(
            pos, self.combination, ((Symbol.PERMUTATION, Bop.PERMUTATION),)
        )

    def function(self, pos: int) -> tuple[Expr, int]:
        lhs, pos = self.permutation(pos)
        nxt = self.accept(pos, Symbol.FN)
        if nxt is None:
            return lhs, pos
        if not isinstance(lhs, Ident):
            raise _expected_identifier()
        body, pos = self.function(nxt)
        return Fn(lhs.name, body), pos

    def assignment(self, pos: int) -> tuple[Expr, int]:
        lhs, pos = self.function(pos)
        nxt = self.accept(pos, Symbol.EQUALS)
        if nxt is None:
            return lhs, pos
        if not isinstance(lhs, Ident):
            raise _expected_identifier()
        value, pos = self.assignment(nxt)
        return Assign(lhs.name, value), pos

    def expression(self, pos: int) -> tuple[Expr, int]:
        while (nxt := self.accept(pos, Symbol.SEMICOLON)) is not None:
            pos = nxt
        if pos >= len(self.tokens):
            return UnitLiteral(), len(self.tokens)
        result, pos = self.assignment(pos)
        while (nxt := self.accept(pos, Symbol.SEMICOLON)) is not None:
            if nxt >= len(self.tokens) or self.accept(nxt, Symbol.SEMICOLON) is not None:
                pos = nxt
                continue
            rhs, pos = self.assignment(nxt)
            result = Statements(result, rhs)
        return result, pos


def parse_expression(
    tokens: Sequence[Token],
    is_prefix_unit: Optional[Callable[[str], bool]] = None,
) -> tuple[Expr, tuple[Token, ...]]:
    """Parse as much of ``tokens`` as possible; return the tree and the rest.

    ``is_prefix_unit`` tells whether an identifier such as ``$`` is written
    before its number; without it no identifier is treated so.
    """
    parser = _Parser(tokens, is_prefix_unit)
    expr, pos = parser.expression(0)
    return expr, parser.tokens[pos:]


def parse_tokens(
    tokens: Sequence[Token],
    is_prefix_unit: Optional[Callable[[str], bool]] = None,
) -> Expr:
    """Parse all of ``tokens`` into one expression tree."""
    expr, remaining = parse_expression(tokens, is_prefix_unit)
    if remaining:
        raise ParseError("unexpected input found")
    return expr