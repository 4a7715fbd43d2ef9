import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from prattcalc.tokenizer import Token, TokenType

if TYPE_CHECKING:
    from prattcalc.parser import Expression


class Precedence(enum.IntEnum):
    NONE = 0
    TERM = enum.auto()
    FACTOR = enum.auto()
    UNARY = enum.auto()
    PRIMARY = enum.auto()

    def __str__(self) -> str:
        return self.name


PrefixAction = Callable[[Token], "Expression"]
InfixAction = Callable[["Expression", Token], "Expression"]


@dataclass(frozen=True)
class ParseRule:
    precedence: Precedence
    prefix: Optional[PrefixAction] = None
    infix: Optional[InfixAction] = None


def build_rule_table(literal: PrefixAction, unary: PrefixAction, binary: InfixAction) -> dict[TokenType, ParseRule]:
    """How each token type may begin (prefix) or continue (infix) an expression"""
    return {
        TokenType.PLUS: ParseRule(Precedence.TERM, prefix=unary, infix=binary),
        TokenType.MINUS: ParseRule(Precedence.TERM, prefix=unary, infix=binary),
        TokenType.STAR: ParseRule(Precedence.FACTOR, infix=binary),
        TokenType.SLASH: ParseRule(Precedence.FACTOR, infix=binary),
        TokenType.NUMBER: ParseRule(Precedence.PRIMARY, prefix=literal),
        TokenType.EXPR_END: ParseRule(Precedence.NONE),
    }
