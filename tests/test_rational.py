import pytest

from rational import Rational


class TestRational:

    def test_quarters_add_to_one(self):
        assert Rational(1, 4) + Rational(3, 4) == Rational(1)

    def test_normalised(self):
        r = Rational(2, 8)
        assert (r.numer, r.denom) == (1, 4)
        assert str(Rational(6, -4)) == "-3/2"
        assert str(Rational(0, 5)) == "0/1"

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            Rational(1, 0)

    def test_subtraction_and_negation(self):
        x, y, z = Rational(1, 3), Rational(5, 7), Rational(3, 2)
        assert x - y - z == Rational(-79, 42)
        assert -x == Rational(-1, 3)

    def test_multiplication(self):
        assert Rational(2, 3) * Rational(3, 4) == Rational(1, 2)

    def test_ordering(self):
        assert Rational(1, 3) < Rational(1, 2)
        assert Rational(1, 2) >= Rational(2, 4)
        assert max(Rational(1, 3), Rational(5, 7)) == Rational(5, 7)

    @pytest.mark.parametrize("op", [
        lambda r: r + 1,
        lambda r: 1 + r,
        lambda r: r - 1,
        lambda r: r * 2,
        lambda r: r * "x",
    ])
    def test_non_rational_operand(self, op):
        with pytest.raises(TypeError):
            op(Rational(1, 2))

    def test_hash(self):
        assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}) == 1

    def test_str(self):
        assert str(Rational(1, 4)) == "1/4"
        assert str(Rational(3)) == "3/1"
