"""Evaluate arithmetic expressions built from numbers, + - * / and parentheses.

Grammar::

    E ::= F (('+'|'-') F)*
    F ::= G (('*'|'/') G)*
    G ::= ('+'|'-') G | H
    H ::= number | '(' E ')'

Spaces are not allowed, and every number is treated as a real number.
"""

from __future__ import annotations

import math
import re
import sys

MAX_LINE = 1000

_NUMBER = re.compile(
    r"0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|\d+(?:\.\d*)?(?:[eE][+-]?\d+)?"
)


class ExpressionSyntaxError(ValueError):
    """Raised when the input is not a valid expression."""

    def __init__(self, text: str, position: int) -> None:
        super().__init__(text, position)
        self.text = text
        self.position = position

    def caret_line(self) -> str:
        """Return a line with a caret under the offending character."""
        return " " * self.position + "^"

    def __str__(self) -> str:
        return f"syntax error:\n{self.text}\n{self.caret_line()}"


def _convert(token: str) -> float:
    """Convert a number token, raising OverflowError when out of range."""
    if token[:2].lower() == "0x":
        value = float.fromhex(token)
        mantissa = token[2:].lower().split("p")[0]
    else:
        value = float(token)
        mantissa = token.lower().split("e")[0]
    if math.isinf(value):
        raise OverflowError(token)
    if value == 0.0 and any(ch not in "0." for ch in mantissa):
        raise OverflowError(token)
    return value


def _divide(x: float, y: float) -> float:
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def _error(self) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(self.text, self.pos)

    def expression(self) -> float:
        value = self._term()
        while (op := self._peek()) in ("+", "-"):
            self.pos += 1
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def _term(self) -> float:
        value = self._unary()
        while (op := self._peek()) in ("*", "/"):
            self.pos += 1
            rhs = self._unary()
            value = value * rhs if op == "*" else _divide(value, rhs)
        return value

    def _unary(self) -> float:
        negate = False
        while (op := self._peek()) in ("+", "-"):
            self.pos += 1
            if op == "-":
                negate = not negate
        value = self._primary()
        return -value if negate else value

    def _primary(self) -> float:
        match = _NUMBER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            try:
                return _convert(match.group())
            except OverflowError:
                raise self._error() from None
        if self._peek() == "(":
            self.pos += 1
            value = self.expression()
            if self._peek() != ")":
                raise self._error()
            self.pos += 1
            return value
        raise self._error()


def evaluate(text: str) -> float:
    """Evaluate one expression; a single trailing newline is allowed."""
    body = text[:-1] if text.endswith("\n") else text
    parser = _Parser(body)
    value = parser.expression()
    if parser.pos != len(body):
        raise ExpressionSyntaxError(body, parser.pos)
    return value


def main(argv: list[str] | None = None) -> int:
    """Read one line from standard input, evaluate it and print the result."""
    line = sys.stdin.readline()
    if not line:
        print("fgets: no input", file=sys.stderr)
        return 1
    line = line[:MAX_LINE]
    terminated = line.endswith("\n")
    body = line[:-1] if terminated else line
    if not terminated:
        print(f"line too long (should be < {MAX_LINE} chars)", file=sys.stderr)
    parser = _Parser(body)
    try:
        value = parser.expression()
        if parser.pos != len(body) or not terminated:
            raise ExpressionSyntaxError(body, parser.pos)
    except ExpressionSyntaxError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"{value:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())