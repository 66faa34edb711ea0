"""Conversion of arithmetic expressions from infix to postfix notation."""

from __future__ import annotations

import string

_ALL_OPERATORS = "+-*/"
_ADDITIVE = "+-"
_MULTIPLICATIVE = "*/"


def to_postfix(expression: str) -> str:
    """Rewrite ``expression`` in postfix form, tokens separated by single spaces.

    An operator pops at most one earlier operator from the stack before it
    is pushed, and a closing bracket also releases one additive operator
    waiting beneath the matching opening bracket. Characters that are not
    digits, operators or brackets are skipped.
    """
    output: list[str] = []
    stack: list[str] = []
    number = ""
    for char in expression:
        if char in string.digits:
            number += char
            continue
        if number:
            output.append(number)
            number = ""
        if char in _ADDITIVE:
            if stack and stack[-1] in _ALL_OPERATORS:
                output.append(stack.pop())
            stack.append(char)
        elif char in _MULTIPLICATIVE:
            if stack and stack[-1] in _MULTIPLICATIVE:
                output.append(stack.pop())
            stack.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
            if stack and stack[-1] in _ADDITIVE:
                output.append(stack.pop())
    if number:
        output.append(number)
    if "(" in stack:
        raise ValueError("unmatched '(' in expression")
    output.extend(reversed(stack))
    return " ".join(output)