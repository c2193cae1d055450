"""Recursive-descent evaluation of calculator statements."""

from __future__ import annotations

import math
import operator

from .symbols import SymbolTable
from .tokens import CalculatorError, Kind, Token, TokenStream, narrow_int

_PI = 3.1415926535
_BITWISE = {"&": operator.and_, "|": operator.or_, "^": operator.xor}
DEMO = "let a=7;let b=3; let c = a*b; a+b*8;"


def _to_int(value: float) -> int:
    try:
        return int(value)
    except (OverflowError, ValueError):
        raise CalculatorError(f"cannot convert {value} to an integer") from None


def _int_power(base: float, power: int) -> float:
    try:
        return float(base) ** power
    except (ZeroDivisionError, OverflowError):
        negative = math.copysign(1.0, base) < 0 and power % 2 == 1
        return -math.inf if negative else math.inf


class Calculator:
    """Evaluates statements, keeping variables between them."""

    def __init__(self) -> None:
        self._symbols = SymbolTable()
        self._ts = TokenStream("")

    def calculation(self, expr: str) -> list[str]:
        """Evaluate each ';'-separated statement and describe its result."""
        statements = expr.split(";")
        if statements and statements[-1] == "":
            statements.pop()
        results = []
        for stmt in statements:
            value = self.statement(stmt.rstrip(" \n\r\t") + ";")
            results.append(f"{stmt} EVAL=> {value:f}")
        return results

    def statement(self, expr: str) -> float:
        """Evaluate one statement: a declaration or an expression."""
        self._ts = TokenStream(expr)
        token = self._ts.get()
        if token.kind == Kind.LET:
            return self._declaration()
        self._ts.putback(token)
        return self._expression_bitwise()

    def _expect(self, kind: str) -> None:
        if self._ts.get().kind != kind:
            raise CalculatorError(f"'{kind}' expected")

    def _declaration(self) -> float:
        token = self._ts.get()
        if token.kind != Kind.NAME:
            raise CalculatorError("name expected in declaration")
        if self._ts.get().kind != "=":
            raise CalculatorError(f"= missing in declaration of {token.name}")
        value = self._expression_bitwise()
        self._symbols.define_name(token.name, value)
        return value

    def _expression_bitwise(self) -> float:
        token = self._ts.get()
        if token.kind == "~":
            return float(~_to_int(self._expression()))
        self._ts.putback(token)

        left = self._expression()
        while True:
            token = self._ts.get()
            op = _BITWISE.get(token.kind)
            if op is None:
                self._ts.putback(token)
                return left
            left = float(op(_to_int(left), _to_int(self._expression())))

    def _expression(self) -> float:
        left = self._term()
        while True:
            token = self._ts.get()
            if token.kind == "+":
                left += self._term()
            elif token.kind == "-":
                left -= self._term()
            else:
                self._ts.putback(token)
                return left

    def _term(self) -> float:
        left = self._secondary()
        while True:
            token = self._ts.get()
            if token.kind == "*":
                left *= self._secondary()
            elif token.kind == "/":
                divisor = self._secondary()
                if divisor == 0:
                    raise CalculatorError("divide by zero")
                left /= divisor
            elif token.kind == "%":
                divisor = self._secondary()
                if divisor == 0:
                    raise CalculatorError("%: divide by zero")
                left = math.fmod(left, divisor)
            else:
                self._ts.putback(token)
                return left

    def _secondary(self) -> float:
        left = self._primary()
        while True:
            token = self._ts.get()
            if token.kind != "!":
                self._ts.putback(token)
                return left
            if left == 0:
                return 1.0
            for factor in range(_to_int(left) - 1, 0, -1):
                left *= factor

    def _primary(self) -> float:
        token = self._ts.get()
        kind = token.kind
        if kind == "(":
            value = self._expression_bitwise()
            self._expect(")")
            return value
        if kind == "{":
            value = self._expression_bitwise()
            self._expect("}")
            return value
        if kind == Kind.NUMBER:
            return token.value
        if kind == Kind.NAME:
            return self._handle_variable(token)
        if kind == "-":
            return -self._primary()
        if kind == "+":
            return self._primary()
        if kind == Kind.SQRT:
            return self._calc_sqrt()
        if kind == Kind.POW:
            return self._calc_pow()
        if kind == Kind.SIN:
            return self._calc_sin()
        if kind == Kind.COS:
            return self._calc_cos()
        raise CalculatorError("primary expected")

    def _require_open_paren(self) -> None:
        ch = self._ts.next_char()
        if ch and ch != "(":
            raise CalculatorError("'(' expected")
        if ch:
            self._ts.unread_char()

    def _calc_sqrt(self) -> float:
        self._require_open_paren()
        value = self._expression()
        if value < 0:
            raise CalculatorError("sqrt: negative val is imaginary")
        return math.sqrt(value)

    def _calc_pow(self) -> float:
        self._expect("(")
        base = self._expression_bitwise()
        self._expect(",")
        power = narrow_int(self._expression_bitwise())
        self._expect(")")
        return _int_power(base, power)

    def _calc_sin(self) -> float:
        self._require_open_paren()
        degrees = self._expression()
        if degrees in (0, 180):
            return 0.0
        return math.sin(degrees * _PI / 180)

    def _calc_cos(self) -> float:
        self._require_open_paren()
        degrees = self._expression()
        if degrees in (90, 270):
            return 0.0
        return math.cos(degrees * _PI / 180)

    def _handle_variable(self, token: Token) -> float:
        following = self._ts.get()
        if following.kind == "=":
            return self._symbols.set_value(token.name, self._expression())
        self._ts.putback(following)
        return self._symbols.get_value(token.name)


def main(argv: list[str] | None = None) -> int:
    """Evaluate the demonstration statements and print each result."""
    for line in Calculator().calculation(DEMO):
        print(line)
    return 0