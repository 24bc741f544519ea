import pytest

from fendcore.parser import (
    Apply,
    ApplyFunctionCall,
    ApplyMul,
    As,
    Assign,
    BinaryOp,
    BitwiseBop,
    Bop,
    DateLiteral,
    DateToken,
    Factorial,
    Fn,
    Ident,
    IdentToken,
    NumLiteral,
    NumToken,
    Of,
    ParseError,
    Parens,
    Statements,
    StringLiteral,
    StringToken,
    Symbol,
    SymbolToken,
    UnaryDiv,
    UnaryMinus,
    UnaryPlus,
    UnitLiteral,
    parse_expression,
    parse_tokens,
)


def n(value):
    return NumToken(value)


def i(name):
    return IdentToken(name)


S = Symbol
PLUS = SymbolToken(S.ADD)
MINUS = SymbolToken(S.SUB)
TIMES = SymbolToken(S.MUL)
DIV = SymbolToken(S.DIV)
POW = SymbolToken(S.POW)
OPEN = SymbolToken(S.OPEN_PARENS)
CLOSE = SymbolToken(S.CLOSE_PARENS)
SEMI = SymbolToken(S.SEMICOLON)


def N(value):
    return NumLiteral(value)


def test_empty_input_is_unit():
    assert parse_tokens([]) == UnitLiteral()


def test_only_semicolons_is_unit():
    assert parse_tokens([SEMI]) == UnitLiteral()


def test_addition():
    assert parse_tokens([n(2), PLUS, n(2)]) == BinaryOp(Bop.PLUS, N(2), N(2))


def test_precedence_of_multiplication():
    result = parse_tokens([n(2), PLUS, n(2), TIMES, n(3)])
    assert result == BinaryOp(Bop.PLUS, N(2), BinaryOp(Bop.MUL, N(2), N(3)))


def test_power_is_right_associative():
    result = parse_tokens([n(2), POW, n(3), POW, n(2)])
    assert result == BinaryOp(Bop.POW, N(2), BinaryOp(Bop.POW, N(3), N(2)))


def test_subtraction_is_left_associative():
    result = parse_tokens([n(2), MINUS, n(2), MINUS, n(3)])
    assert result == BinaryOp(Bop.MINUS, BinaryOp(Bop.MINUS, N(2), N(2)), N(3))


def test_unary_operators():
    assert parse_tokens([MINUS, MINUS, n(2)]) == UnaryMinus(UnaryMinus(N(2)))
    assert parse_tokens([PLUS, n(2)]) == UnaryPlus(N(2))
    assert parse_tokens([DIV, i("s")]) == UnaryDiv(Ident("s"))


def test_negative_power_binds_tighter_than_minus():
    result = parse_tokens([MINUS, n(2), POW, MINUS, n(3)])
    assert result == UnaryMinus(BinaryOp(Bop.POW, N(2), UnaryMinus(N(3))))


def test_factorial_chain():
    result = parse_tokens([n(3), SymbolToken(S.FACTORIAL), SymbolToken(S.FACTORIAL)])
    assert result == Factorial(Factorial(N(3)))


def test_mixed_fraction():
    result = parse_tokens([n(1), n(2), DIV, n(3)])
    assert result == BinaryOp(Bop.PLUS, N(1), BinaryOp(Bop.DIV, N(2), N(3)))


def test_negative_mixed_fraction():
    result = parse_tokens([MINUS, n(8), n(1), DIV, n(2)])
    assert result == BinaryOp(
        Bop.MINUS, UnaryMinus(N(8)), BinaryOp(Bop.DIV, N(1), N(2))
    )


def test_mixed_fraction_with_factor():
    result = parse_tokens([n(2), TIMES, n(1), n(1), DIV, n(2)])
    assert result == BinaryOp(
        Bop.MUL, N(2), BinaryOp(Bop.PLUS, N(1), BinaryOp(Bop.DIV, N(1), N(2)))
    )


@pytest.mark.parametrize(
    "tokens",
    [
        [n(1), n(2)],
        [n(1), n(2), n(3), n(4), n(5)],
        [n(1), n(2), DIV, n(3), POW, n(2)],
        [n(2), n(4), POW, n(3)],
        [MINUS, n(2), n(4), POW, n(3)],
    ],
)
def test_adjacent_numbers_are_rejected(tokens):
    with pytest.raises(ParseError, match="unexpected input found"):
        parse_tokens(tokens)


def test_number_times_identifier():
    assert parse_tokens([n(2), i("pi")]) == ApplyMul(N(2), Ident("pi"))


def test_function_call_with_number():
    assert parse_tokens([i("sin"), n(0)]) == ApplyFunctionCall(Ident("sin"), N(0))


def test_prefix_unit():
    tokens = [i("$"), n(5)]
    assert parse_tokens(tokens, lambda name: name == "$") == Apply(Ident("$"), N(5))
    assert parse_tokens(tokens) == ApplyFunctionCall(Ident("$"), N(5))


def test_identifier_applied_to_identifier():
    assert parse_tokens([i("abs"), i("x")]) == Apply(Ident("abs"), Ident("x"))


def test_implicit_addition_of_units():
    result = parse_tokens([n(5), i("feet"), n(12), i("inch")])
    assert result == BinaryOp(
        Bop.IMPLICIT_PLUS,
        ApplyMul(N(5), Ident("feet")),
        ApplyMul(N(12), Ident("inch")),
    )


def test_implicit_addition_with_trailing_number():
    result = parse_tokens([n(5), i("foot"), n(1)])
    assert result == BinaryOp(Bop.IMPLICIT_PLUS, ApplyMul(N(5), Ident("foot")), N(1))


def test_parentheses():
    result = parse_tokens([OPEN, n(1), PLUS, n(2), CLOSE, TIMES, n(3)])
    assert result == BinaryOp(
        Bop.MUL, Parens(BinaryOp(Bop.PLUS, N(1), N(2))), N(3)
    )


def test_missing_closing_parenthesis_at_end():
    result = parse_tokens([n(2), TIMES, OPEN, n(1), PLUS, n(3)])
    assert result == BinaryOp(Bop.MUL, N(2), Parens(BinaryOp(Bop.PLUS, N(1), N(3))))


def test_empty_parentheses_are_unit():
    assert parse_tokens([OPEN, CLOSE]) == UnitLiteral()


def test_backslash_lambda():
    tokens = [SymbolToken(S.BACKSLASH), i("x"), SymbolToken(S.DOT), i("x")]
    assert parse_tokens(tokens) == Fn("x", Ident("x"))


def test_backslash_lambda_without_dot():
    tokens = [SymbolToken(S.BACKSLASH), i("x"), i("x")]
    with pytest.raises(ParseError) as info:
        parse_tokens(tokens)
    assert str(info.value) == "missing '.' in lambda (expected e.g. \\x.x)"
    assert info.value.cause is not None


def test_colon_lambda_nests():
    fn = SymbolToken(S.FN)
    result = parse_tokens([i("x"), fn, i("y"), fn, i("x")])
    assert result == Fn("x", Fn("y", Ident("x")))


def test_lambda_needs_identifier():
    with pytest.raises(ParseError, match="expected an identifier"):
        parse_tokens([n(1), SymbolToken(S.FN), i("x")])


def test_chained_assignment():
    eq = SymbolToken(S.EQUALS)
    result = parse_tokens([i("a"), eq, i("b"), eq, n(2)])
    assert result == Assign("a", Assign("b", N(2)))


def test_assignment_needs_identifier():
    with pytest.raises(ParseError, match="expected an identifier"):
        parse_tokens([n(2), SymbolToken(S.EQUALS), n(3)])


def test_statements():
    assert parse_tokens([n(2), SEMI, n(4)]) == Statements(N(2), N(4))


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([n(1234), SEMI], N(1234)),
        ([SEMI, n(432)], N(432)),
        ([SEMI, SEMI, n(3)], N(3)),
        ([n(34), SEMI, SEMI, SEMI], N(34)),
    ],
)
def test_empty_statements_are_skipped(tokens, expected):
    assert parse_tokens(tokens) == expected


def test_of():
    result = parse_tokens([i("mass"), SymbolToken(S.OF), i("earth")])
    assert result == Of("mass", Ident("earth"))


def test_light_applies_to_next_identifier():
    assert parse_tokens([i("light"), i("year")]) == Apply(Ident("light"), Ident("year"))


def test_unit_conversion():
    result = parse_tokens([n(1), SymbolToken(S.UNIT_CONVERSION), i("kg")])
    assert result == As(N(1), Ident("kg"))


def test_bitwise_precedence():
    tokens = [
        n(54), SymbolToken(S.SHIFT_LEFT), n(1),
        SymbolToken(S.BITWISE_AND),
        n(54), SymbolToken(S.SHIFT_RIGHT), n(1),
    ]
    assert parse_tokens(tokens) == BinaryOp(
        BitwiseBop.AND,
        BinaryOp(BitwiseBop.LEFT_SHIFT, N(54), N(1)),
        BinaryOp(BitwiseBop.RIGHT_SHIFT, N(54), N(1)),
    )


def test_or_binds_looser_than_xor():
    tokens = [n(1), SymbolToken(S.BITWISE_OR), n(2), SymbolToken(S.BITWISE_XOR), n(3)]
    assert parse_tokens(tokens) == BinaryOp(
        BitwiseBop.OR, N(1), BinaryOp(BitwiseBop.XOR, N(2), N(3))
    )


def test_combination_and_permutation():
    assert parse_tokens([n(5), SymbolToken(S.COMBINATION), n(2)]) == BinaryOp(
        Bop.COMBINATION, N(5), N(2)
    )
    assert parse_tokens([n(5), SymbolToken(S.PERMUTATION), n(2)]) == BinaryOp(
        Bop.PERMUTATION, N(5), N(2)
    )


def test_modulo():
    result = parse_tokens([n(5), SymbolToken(S.MOD), n(3)])
    assert result == BinaryOp(Bop.MOD, N(5), N(3))


def test_string_and_date_literals():
    assert parse_tokens([StringToken("hi")]) == StringLiteral("hi")
    assert parse_tokens([DateToken("2020-01-01")]) == DateLiteral("2020-01-01")


def test_unexpected_symbol():
    with pytest.raises(ParseError) as info:
        parse_tokens([CLOSE])
    assert str(info.value) == f"expected a value, instead found '{Symbol.CLOSE_PARENS}'"


def test_missing_operand_at_end():
    with pytest.raises(ParseError, match="expected a token"):
        parse_tokens([n(2), POW])


def test_parse_expression_returns_remaining_tokens():
    expr, rest = parse_expression([n(1), CLOSE, n(2)])
    assert expr == N(1)
    assert rest == (CLOSE, n(2))


def test_parse_tokens_rejects_leftover():
    with pytest.raises(ParseError, match="unexpected input found"):
        parse_tokens([n(1), CLOSE])