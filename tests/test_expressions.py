import pytest
from hypothesis import given
from hypothesis import strategies as st

from dskit.expressions import PostfixError, evaluate_postfix, is_balanced


@pytest.mark.parametrize(
    "text, expected",
    [
        ("({})", True),
        ("({)", False),
        ("(asd{asda}asd)", True),
        ("asd({asd)", False),
        ("{{}}", True),
        ("({)}", False),
    ],
)
def test_is_balanced_cases(text, expected):
    assert is_balanced(text) is expected


def test_unmatched_closer_is_unbalanced():
    assert not is_balanced(")")
    assert not is_balanced("a]")


def test_unclosed_opener_is_unbalanced():
    assert not is_balanced("(")


@given(st.text(alphabet="abc xyz123"))
def test_text_without_brackets_is_balanced(text):
    assert is_balanced(text)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("12 3 +", 15),
        ("100 3 +", 103),
        ("12 3 + 4 +", 19),
        ("1 1 12 3 + 1 * + 4 + *", 20),
        ("6 5 2 3 + 8 * + 3 + *", 288),
    ],
)
def test_evaluate_postfix_cases(expression, expected):
    assert evaluate_postfix(expression) == expected


@pytest.mark.parametrize("expression", ["12 3 ", "12 3 + +", "", "+", "1 x +"])
def test_evaluate_postfix_errors(expression):
    with pytest.raises(PostfixError):
        evaluate_postfix(expression)


def test_division_by_zero_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("1 0 /")


def test_subtraction_takes_deeper_operand_first():
    assert evaluate_postfix("10 4 -") == 6


def test_division_truncates_toward_zero():
    assert evaluate_postfix("-7 2 /") == -3


@given(st.integers(), st.integers())
def test_addition_round_trip(a, b):
    assert evaluate_postfix(f"{a} {b} +") == a + b
    assert evaluate_postfix(f"{a} {b} *") == a * b


@given(st.integers())
def test_single_number(value):
    assert evaluate_postfix(str(value)) == value