"""Infix to postfix conversion and postfix evaluation over named operands."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping

_PRECEDENCE = {"^": 6, "*": 5, "/": 5, "+": 4, "-": 4}
_DEFAULT_PRECEDENCE = 3
_INFIX_OPERATORS = "+-*/"


class ExpressionError(ValueError):
    """Raised for malformed expressions or ones that cannot be evaluated."""


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; unknown symbols rank lowest."""
    return _PRECEDENCE.get(operator, _DEFAULT_PRECEDENCE)


def _is_infix_operand(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "\x7f"


def _is_operand_name(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-letter operands to postfix.

    Letters are operands, ``+ - * /`` are operators and parentheses group;
    any other character is skipped.
    """
    stack = ["("]
    output: list[str] = []
    for ch in expression + ")":
        if ch == "(":
            stack.append(ch)
        elif _is_infix_operand(ch):
            output.append(ch)
        elif ch == ")":
            while True:
                if not stack:
                    raise ExpressionError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif ch in _INFIX_OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    if stack:
        raise ExpressionError("unmatched '(' in expression")
    return "".join(output)


def operand_names(expression: str) -> list[str]:
    """Return the operand letters of ``expression`` in order of first use."""
    return list(dict.fromkeys(ch for ch in expression if _is_operand_name(ch)))


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return math.trunc(base**exponent)


_APPLY: dict[str, Callable[[int, int], int]] = {
    "^": _power,
    "/": _divide,
    "*": lambda left, right: left * right,
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
}


def evaluate_postfix(expression: str, values: Mapping[str, int]) -> int:
    """Evaluate a postfix expression, taking operand values from ``values``.

    Arithmetic is on integers; division truncates toward zero.
    """
    stack: list[int] = []
    for ch in expression:
        if _is_operand_name(ch):
            try:
                stack.append(int(values[ch]))
            except KeyError:
                raise ExpressionError(f"no value given for operand {ch!r}") from None
        elif ch.isspace():
            continue
        elif ch in _APPLY:
            if len(stack) < 2:
                raise ExpressionError(f"operator {ch!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(_APPLY[ch](left, right))
        else:
            raise ExpressionError(f"unexpected character {ch!r} in expression")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]