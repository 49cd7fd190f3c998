import pytest

from tally.errors import InvalidCharacter, InvalidToken, UnexpectedEndOfInput
from tally.evaluator import Evaluator, evaluate, evaluate_tokens
from tally.token import PLUS, SUBTRACT, Token, new_number
from tally.utils import Err, Ok


class TestEvaluateTokens:
    def test_single_number(self) -> None:
        assert evaluate_tokens([new_number(7)]) == Ok(7)

    def test_sum(self) -> None:
        tokens = [new_number(10), PLUS, new_number(3), PLUS, new_number(7)]
        assert evaluate_tokens(tokens) == Ok(20)

    def test_empty(self) -> None:
        assert evaluate_tokens([]) == Err(UnexpectedEndOfInput())

    def test_leading_operator(self) -> None:
        assert evaluate_tokens([SUBTRACT, new_number(1)]) == Err(InvalidToken(SUBTRACT))

    def test_trailing_operator(self) -> None:
        assert evaluate_tokens([new_number(5), PLUS]) == Err(UnexpectedEndOfInput())

    def test_consecutive_numbers(self) -> None:
        tokens = [new_number(1), new_number(2)]
        assert evaluate_tokens(tokens) == Err(InvalidToken(new_number(2)))

    def test_consecutive_operators(self) -> None:
        tokens = [new_number(1), PLUS, SUBTRACT, new_number(2)]
        assert evaluate_tokens(tokens) == Err(InvalidToken(SUBTRACT))


class TestEvaluate:
    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("10 + 3 + 7", 20),
            ("10 - 3 - 2", 5),
            ("10+3", 13),
            ("10 + 3", 13),
            ("10  +  3", 13),
            ("3 - 10", -7),
            ("0", 0),
            ("1 - 1 + 1 - 1", 0),
        ],
    )
    def test_well_formed(self, expression: str, expected: int) -> None:
        assert evaluate(expression) == Ok(expected)

    def test_big_numbers(self) -> None:
        assert evaluate("99999999999999999999 + 1") == Ok(100000000000000000000)

    def test_lexical_failure_is_returned_unchanged(self) -> None:
        assert evaluate("10 + 3 + 7a + 8") == Err(InvalidCharacter("a", 10))

    def test_leading_plus(self) -> None:
        assert evaluate("+ 5") == Err(InvalidToken(PLUS))

    def test_trailing_plus(self) -> None:
        assert evaluate("5 +") == Err(UnexpectedEndOfInput())

    def test_empty(self) -> None:
        assert evaluate("") == Err(UnexpectedEndOfInput())

    def test_space_separated_numbers(self) -> None:
        assert evaluate("1 2") == Err(InvalidToken(new_number(2)))


class TestEvaluator:
    def test_next_token_advances(self) -> None:
        evaluator = Evaluator([new_number(1), PLUS])
        assert evaluator.next_token() == new_number(1)
        assert evaluator.position == 1
        assert evaluator.next_token() == PLUS
        assert evaluator.position == 2

    def test_next_token_when_exhausted(self) -> None:
        evaluator = Evaluator([new_number(1)])
        evaluator.next_token()
        assert evaluator.next_token() is None
        assert evaluator.next_token() is None
        assert evaluator.position == 1

    def test_expect_number(self) -> None:
        evaluator = Evaluator([new_number(4), PLUS])
        assert evaluator.expect_number() == Ok(4)
        assert evaluator.expect_number() == Err(InvalidToken(PLUS))
        assert evaluator.expect_number() == Err(UnexpectedEndOfInput())

    def test_error_descriptions(self) -> None:
        assert UnexpectedEndOfInput().describe() == "unexpected end of input"
        assert InvalidToken(PLUS).describe() == "invalid token Plus"
        assert InvalidToken(new_number(2)).describe() == "invalid token Number(2)"


def test_describe_huge_token() -> None:
    huge = "9" * 5000
    result = evaluate(f"1 {huge}")
    assert isinstance(result, Err)
    assert result.error.describe() == f"invalid token Number({huge})"


class TestUnknownKind:
    def test_expect_number_rejects_unknown_kind(self) -> None:
        with pytest.raises(AssertionError):
            Evaluator([Token(99)]).expect_number()

    def test_evaluate_rejects_unknown_kind(self) -> None:
        with pytest.raises(AssertionError):
            Evaluator([new_number(1), Token(99)]).evaluate()
