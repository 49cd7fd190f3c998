from typing import Optional

from tally.errors import InvalidCharacter, LexError
from tally.token import Token, PLUS, SUBTRACT, new_number
from tally.utils import Cursor, Ok, Err, Result

DIGITS = "0123456789"


class Scanner:
    """Turns one input text into tokens. Not reusable: build one per scan."""

    cursor: Cursor[str]

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.cursor = Cursor(expression)

    @property
    def position(self) -> int:
        return self.cursor.position

    def peek(self) -> Optional[str]:
        return self.cursor.peek()

    def advance(self) -> None:
        self.cursor.advance()

    def scan_number(self) -> int:
        # Python ints do not overflow, so any literal length decodes exactly.
        value = 0
        while (char := self.peek()) is not None and char in DIGITS:
            value = value * 10 + ord(char) - ord("0")
            self.advance()
        return value

    def scan(self) -> Result[list[Token], LexError]:
        tokens = []
        while (char := self.peek()) is not None:
            match char:
                case _ if char in DIGITS:
                    tokens.append(new_number(self.scan_number()))
                case "+":
                    tokens.append(PLUS)
                    self.advance()
                case "-":
                    tokens.append(SUBTRACT)
                    self.advance()
                case " ":
                    self.advance()
                case _:
                    return Err(InvalidCharacter(char, self.position))
        return Ok(tokens)


def scan(expression: str) -> Result[list[Token], LexError]:
    return Scanner(expression).scan()
