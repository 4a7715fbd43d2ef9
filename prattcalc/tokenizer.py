import enum
import logging
from dataclasses import dataclass

from prattcalc.utils import PrintableEnum, caret_diagnostic

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    @property
    def char(self) -> str:
        return self.code[self.error_char_idx]

    @property
    def column(self) -> int:
        return self.error_char_idx

    def __str__(self) -> str:
        return caret_diagnostic(f"[Tokenizer error] {self.errmsg}", self.code, self.error_char_idx, context=10)


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    EXPR_END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return "0" <= s <= "9"


def _skip_digits(code: str, i: int) -> int:
    while i < len(code) and _is_digit(code[i]):
        i += 1
    return i


def _number_end(code: str, i: int) -> int:
    """Greedy scan of digit+ ('.' digit*)? ('e' ('+'|'-')? digit*)? starting at i.

    Malformed tails such as "1." or "1e" are not rejected here, the literal
    conversion in the parser takes care of them.
    """
    i = _skip_digits(code, i)
    if i < len(code) and code[i] == ".":
        i = _skip_digits(code, i + 1)
    if i >= len(code) or code[i] != "e":
        return i
    i += 1
    if i < len(code) and code[i] in "+-":
        i += 1
    return _skip_digits(code, i)


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_digit(code[i]):
            number_end_idx = _number_end(code, i)
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx]))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i]))
        elif code[i].isspace():
            pass
        else:
            raise TokenizerError(f"Unexpected character at column {i}: {code[i]!r}", code=code, error_char_idx=i)
        i += 1

    tokens.append(Token(type=TokenType.EXPR_END, lexeme=""))
    logger.debug("Tokenized %d characters into %d tokens", len(code), len(tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return " ".join(t.lexeme for t in tokens if t.type is not TokenType.EXPR_END)
