"""Bracket matching and postfix evaluation with a stack."""

from __future__ import annotations

from dskit.stack import Stack, StackEmptyError

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


class PostfixError(ValueError):
    """Raised for a malformed or unevaluable postfix expression."""


def is_balanced(text: str) -> bool:
    """Return whether the brackets ``()``, ``[]`` and ``{}`` in ``text`` are balanced and ordered."""
    stack = Stack()
    for char in text:
        if char in _OPENERS:
            stack.push(char)
        elif char in _PAIRS:
            try:
                if stack.pop() != _PAIRS[char]:
                    return False
            except StackEmptyError:
                return False
    return len(stack) == 0


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise PostfixError("division by zero")
    return _truncating_divide(left, right)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a space-separated postfix expression of integers and ``+ - * /``.

    Division truncates toward zero.
    """
    stack = Stack()
    for token in expression.split():
        if token in _OPERATORS:
            try:
                right = stack.pop()
                left = stack.pop()
            except StackEmptyError as exc:
                raise PostfixError(f"not enough operands for {token!r}") from exc
            stack.push(_apply(token, left, right))
        else:
            try:
                stack.push(int(token))
            except ValueError as exc:
                raise PostfixError(f"invalid token {token!r}") from exc
    if len(stack) != 1:
        raise PostfixError(f"expression leaves {len(stack)} values on the stack")
    return stack.pop()