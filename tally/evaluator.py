from typing import Optional, Sequence, assert_never

from tally.errors import (
    InvalidToken,
    LexError,
    ParseError,
    UnexpectedEndOfInput,
)
from tally.scanner import scan
from tally.token import Token, TokenKind
from tally.utils import Cursor, Ok, Err, Result


class Evaluator:
    """Evaluates ``number (("+" | "-") number)*`` left to right.

    One instance handles one token sequence; the parse position is kept on
    the instance and is never shared.
    """

    cursor: Cursor[Token]

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.cursor = Cursor(tokens)

    @property
    def position(self) -> int:
        return self.cursor.position

    def next_token(self) -> Optional[Token]:
        return next(self.cursor, None)

    def expect_number(self) -> Result[int, ParseError]:
        token = self.next_token()
        if token is None:
            return Err(UnexpectedEndOfInput())
        match token.kind:
            case TokenKind.Number:
                return Ok(token.value)
            case TokenKind.Plus | TokenKind.Subtract:
                return Err(InvalidToken(token))
            case _:
                assert_never(token.kind)

    def evaluate(self) -> Result[int, ParseError]:
        first = self.expect_number()
        if isinstance(first, Err):
            return first
        accumulator = first.value
        while (token := self.next_token()) is not None:
            match token.kind:
                case TokenKind.Plus:
                    operand = self.expect_number()
                    if isinstance(operand, Err):
                        return operand
                    accumulator += operand.value
                case TokenKind.Subtract:
                    operand = self.expect_number()
                    if isinstance(operand, Err):
                        return operand
                    accumulator -= operand.value
                case TokenKind.Number:
                    return Err(InvalidToken(token))
                case _:
                    assert_never(token.kind)
        return Ok(accumulator)


def evaluate_tokens(tokens: Sequence[Token]) -> Result[int, ParseError]:
    return Evaluator(tokens).evaluate()


def evaluate(expression: str) -> Result[int, LexError | ParseError]:
    """Scan ``expression`` and evaluate the tokens.

    Whichever stage fails first has its error returned untouched, so the
    caller can still tell a lexical failure from a structural one.
    """
    scanned = scan(expression)
    if isinstance(scanned, Err):
        return scanned
    return evaluate_tokens(scanned.value)
