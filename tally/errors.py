"""Failures reported by the two pipeline stages.

Scanner failures and evaluator failures are kept as separate types with no
common base: a lexical error knows where in the text it happened, a parse
error only knows which token it saw.
"""
from dataclasses import dataclass

from tally.token import Token


@dataclass(frozen=True)
class InvalidCharacter:
    character: str
    position: int

    def describe(self) -> str:
        return f"invalid character {self.character!r} at {self.position}"


@dataclass(frozen=True)
class UnexpectedEndOfInput:
    def describe(self) -> str:
        return "unexpected end of input"


@dataclass(frozen=True)
class InvalidToken:
    token: Token

    def describe(self) -> str:
        return f"invalid token {self.token}"


LexError = InvalidCharacter
ParseError = UnexpectedEndOfInput | InvalidToken
