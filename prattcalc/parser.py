import enum
import logging
import re
from dataclasses import dataclass

from prattcalc.rules import ParseRule, Precedence, build_rule_table
from prattcalc.tokenizer import Token, TokenType, untokenize
from prattcalc.utils import PrintableEnum, caret_diagnostic

logger = logging.getLogger(__name__)


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    @property
    def lexeme(self) -> str:
        return self.tokens[self.error_token_idx].lexeme

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        caret_idx = len(untokenize(parsed_tokens)) + (1 if parsed_tokens else 0)
        return caret_diagnostic(f"Parser error: {self.errmsg}", untokenize(self.tokens), caret_idx)


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


class UnaryOperator(PrintableEnum):
    POS = enum.auto()
    NEG = enum.auto()


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class UnaryOperation:
    operator: UnaryOperator
    operand: "Expression"


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


Expression = Literal | UnaryOperation | BinaryOperation

BINARY_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}

UNARY_OPERATORS = {
    TokenType.PLUS: UnaryOperator.POS,
    TokenType.MINUS: UnaryOperator.NEG,
}

# longest prefix of a number lexeme that float() accepts
_FLOAT_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(lexeme: str) -> float:
    """Convert a number lexeme, ignoring a malformed tail like the dangling 'e' in '1e'"""
    match = _FLOAT_PREFIX_RE.match(lexeme)
    if match is None:
        raise ValueError(f"Not a number lexeme: {lexeme!r}")
    return float(match.group())


class Parser:
    """Pratt parser over a tokenized line.

    The rule table is rebuilt for every instance.
    """

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].type is not TokenType.EXPR_END:
            raise ValueError("Token list must end with an EXPR_END token")
        self.tokens = tokens
        self.current = 0
        self.rules = build_rule_table(literal=self._literal, unary=self._unary, binary=self._binary)

    def rule_for(self, token_type: TokenType) -> ParseRule:
        return self.rules[token_type]

    def peek(self) -> Token:
        return self.tokens[self.current]

    def is_at_end(self) -> bool:
        return self.peek().type is TokenType.EXPR_END

    def advance(self) -> tuple[Token, int]:
        """Consume the next token, never moving past EXPR_END; returns it with its index"""
        idx = self.current
        if not self.is_at_end():
            self.current += 1
        return self.tokens[idx], idx

    def parse(self) -> Expression:
        expression = self.expression()
        logger.debug("Parsed %d tokens into %s", len(self.tokens), type(expression).__name__)
        return expression

    def expression(self) -> Expression:
        return self.parse_precedence(Precedence.TERM)

    def parse_precedence(self, precedence: Precedence) -> Expression:
        token, token_idx = self.advance()
        prefix = self.rule_for(token.type).prefix
        if prefix is None:
            found = f"{token.lexeme!r}" if token.type is not TokenType.EXPR_END else "end of input"
            raise ParserError(f"Expected expression, found {found}", tokens=self.tokens, error_token_idx=token_idx)

        expression = prefix(token)

        while True:
            next_rule = self.rule_for(self.peek().type)
            # a NUMBER right after a complete expression has no infix action and is left unconsumed
            if next_rule.precedence < precedence or next_rule.infix is None:
                break
            operator_token, _ = self.advance()
            expression = next_rule.infix(expression, operator_token)

        return expression

    def _literal(self, token: Token) -> Expression:
        return Literal(parse_number(token.lexeme))

    def _unary(self, token: Token) -> Expression:
        # a run of signs is consumed here in a loop, one recursion per sign would overflow the stack
        operators = [UNARY_OPERATORS[token.type]]
        while self.peek().type in UNARY_OPERATORS:
            sign, _ = self.advance()
            operators.append(UNARY_OPERATORS[sign.type])
        expression = self.parse_precedence(Precedence.UNARY)
        for operator in reversed(operators):
            expression = UnaryOperation(operator=operator, operand=expression)
        return expression

    def _binary(self, left: Expression, token: Token) -> Expression:
        right = self.parse_precedence(Precedence(self.rule_for(token.type).precedence + 1))
        return BinaryOperation(operator=BINARY_OPERATORS[token.type], left=left, right=right)


def parse(tokens: list[Token]) -> Expression:
    return Parser(tokens).parse()
