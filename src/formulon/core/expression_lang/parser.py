"""
Recursive descent parser for the Formulon expression language.

Grammar (precedence low to high):
    add_sub  → term (("+" | "-") term)*          left-associative
    term     → power (("*" | "/") power)*        left-associative
    power    → unary ("^" power)?                right-associative
    unary    → ("-" | "+") unary | atom
    atom     → NUMBER | VARIABLE | FUNCTION "(" add_sub ")" | "(" add_sub ")"

Unary sits inside power's left operand, so "-2 ^ 2" is (-2) ^ 2 = 4, while
"2 ^ -1" still parses because the exponent is itself a power.
"""

from __future__ import annotations

from formulon.core.errors import ParseError, ParseErrorKind
from formulon.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from formulon.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
    UnaryOp,
    VariableRef,
)

_ADDITIVE = {"+": BinaryOp.ADD, "-": BinaryOp.SUB}
_MULTIPLICATIVE = {"*": BinaryOp.MUL, "/": BinaryOp.DIV}
_SIGNS = {"-": UnaryOp.NEG, "+": UnaryOp.POS}


class _Parser:
    """Recursive descent parser over a token list without an EOF sentinel."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match_operator(self, *symbols: str) -> Token | None:
        tok = self.current
        if tok is not None and tok.is_operator(*symbols):
            return self.advance()
        return None

    def expect_close_paren(self, context: str) -> None:
        tok = self.current
        if tok is None or not tok.is_close_paren:
            raise ParseError(
                ParseErrorKind.MISMATCHED_PARENS,
                f"Mismatched parentheses: expected ')' {context}",
                pos=tok.pos if tok else None,
            )
        self.advance()

    # -- Grammar rules --

    def parse_add_sub(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while tok := self.match_operator(*_ADDITIVE):
            right = self.parse_term()
            left = BinaryExpr(op=_ADDITIVE[str(tok.value)], left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """power (('*' | '/') power)*"""
        left = self.parse_power()
        while tok := self.match_operator(*_MULTIPLICATIVE):
            right = self.parse_power()
            left = BinaryExpr(op=_MULTIPLICATIVE[str(tok.value)], left=left, right=right)
        return left

    def parse_power(self) -> Expr:
        """unary ('^' power)?"""
        base = self.parse_unary()
        if self.match_operator("^"):
            exponent = self.parse_power()
            return BinaryExpr(op=BinaryOp.POW, left=base, right=exponent)
        return base

    def parse_unary(self) -> Expr:
        """('-' | '+') unary | atom"""
        if tok := self.match_operator(*_SIGNS):
            operand = self.parse_unary()
            return UnaryExpr(op=_SIGNS[str(tok.value)], operand=operand)
        return self.parse_atom()

    def parse_atom(self) -> Expr:
        """NUMBER | VARIABLE | FUNCTION '(' add_sub ')' | '(' add_sub ')'"""
        tok = self.current
        if tok is None:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_END_OF_INPUT,
                "Unexpected end of expression",
            )

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return NumberLiteral(value=float(tok.value))

        if tok.kind == TokenKind.VARIABLE:
            self.advance()
            return VariableRef(name=str(tok.value))

        if tok.kind == TokenKind.FUNCTION:
            return self._parse_func_call()

        if tok.is_open_paren:
            self.advance()
            expr = self.parse_add_sub()
            self.expect_close_paren("to close group")
            return expr

        raise ParseError(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"Unexpected token: {tok.value!r}",
            detail=str(tok.value),
            pos=tok.pos,
        )

    def _parse_func_call(self) -> FuncCall:
        """FUNCTION '(' add_sub ')'"""
        name_tok = self.advance()
        name = str(name_tok.value)
        tok = self.current
        if tok is None or not tok.is_open_paren:
            raise ParseError(
                ParseErrorKind.EXPECTED_OPEN_PAREN,
                f"Expected ( after function {name}",
                detail=name,
                pos=tok.pos if tok else name_tok.pos,
            )
        self.advance()
        arg = self.parse_add_sub()
        self.expect_close_paren(f"after argument of {name}")
        return FuncCall(name=name, arg=arg)


def parse_tokens(tokens: list[Token]) -> Expr:
    """Parse an already tokenized expression into an AST.

    Raises:
        ParseError: If the tokens do not form exactly one expression.
    """
    parser = _Parser(tokens)
    try:
        expr = parser.parse_add_sub()
    except RecursionError:
        raise ParseError(
            ParseErrorKind.NESTING_TOO_DEEP,
            "Expression is nested too deeply",
        ) from None

    # Ensure all tokens consumed
    if not parser.at_end:
        tok = parser.tokens[parser.pos]
        raise ParseError(
            ParseErrorKind.TRAILING_TOKENS,
            f"Unexpected tokens after expression: {tok.value!r}",
            detail=str(tok.value),
            pos=tok.pos,
        )

    return expr


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "x * 2 + sqrt(y)")

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid.
    """
    return parse_tokens(tokenize(source))
