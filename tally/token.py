from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from tally.utils import format_int


class TokenKind(IntEnum):
    Number = 1
    Plus = 2
    Subtract = 3


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[int] = None

    def __repr__(self) -> str:
        if self.kind == TokenKind.Number:
            return f"Number({format_int(self.value)})"
        return self.kind.name

    __str__ = __repr__


PLUS = Token(TokenKind.Plus)
SUBTRACT = Token(TokenKind.Subtract)


def new_number(value: int) -> Token:
    assert value >= 0, "number literals are non-negative"
    return Token(TokenKind.Number, value)
