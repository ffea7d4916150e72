from functools import total_ordering
from math import gcd


@total_ordering
class Rational:
    """有理数 numer/denom，构造时约分，符号统一放在分子上"""

    def __init__(self, numer: int, denom: int = 1):
        if denom == 0:
            raise ZeroDivisionError("denominator must be nonzero")
        g = gcd(numer, denom)
        if denom < 0:
            g = -g
        self.numer = numer // g
        self.denom = denom // g

    def __add__(self, that: "Rational") -> "Rational":
        if not isinstance(that, Rational):
            return NotImplemented
        return Rational(self.numer * that.denom + that.numer * self.denom,
                        self.denom * that.denom)

    def __neg__(self) -> "Rational":
        return Rational(-self.numer, self.denom)

    def __sub__(self, that: "Rational") -> "Rational":
        if not isinstance(that, Rational):
            return NotImplemented
        return self + -that

    def __mul__(self, that: "Rational") -> "Rational":
        if not isinstance(that, Rational):
            return NotImplemented
        return Rational(self.numer * that.numer, self.denom * that.denom)

    def __lt__(self, that: "Rational") -> bool:
        if not isinstance(that, Rational):
            return NotImplemented
        return self.numer * that.denom < that.numer * self.denom

    def __eq__(self, that):
        if not isinstance(that, Rational):
            return NotImplemented
        return self.numer == that.numer and self.denom == that.denom

    def __hash__(self):
        return hash((self.numer, self.denom))

    def __str__(self):
        return f"{self.numer}/{self.denom}"

    def __repr__(self):
        return f"Rational({self.numer}, {self.denom})"
