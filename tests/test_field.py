"""Tests for the field implementations."""

import itertools

import pytest

from fieldrs.algebra import (
    INTEGER_RING,
    BinaryField,
    IntegerRing,
    PrimeField,
    QuadraticSurd,
    QuadraticSurdField,
    power,
)


def _surd_samples(field):
    return [
        field.zero(),
        field.one(),
        field.element(3),
        field.element(0, 1),
        field.element(1, 1),
        field.element(-2, 5, 3),
        field.element(7, -1, 4),
    ]


FIELDS = [
    (BinaryField(0x13), list(range(16))),
    (BinaryField(0x11D), [0, 1, 2, 3, 0x1D, 0x80, 0xA7, 0xFF]),
    (PrimeField(7), list(range(7))),
    (PrimeField(1231), [0, 1, 2, 3, 500, 1000, 1230]),
    (QuadraticSurdField(2), None),
    (QuadraticSurdField(-3), None),
]


def _samples(field, values):
    return _surd_samples(field) if values is None else values


@pytest.fixture(params=FIELDS, ids=lambda p: repr(p[0]))
def field_and_samples(request):
    field, values = request.param
    return field, _samples(field, values)


class TestFieldAxioms:
    def test_additive_inverse(self, field_and_samples):
        f, xs = field_and_samples
        for x in xs:
            assert f.equals(f.add(x, f.negate(x)), f.zero())
            assert f.equals(f.subtract(x, x), f.zero())

    def test_identities(self, field_and_samples):
        f, xs = field_and_samples
        for x in xs:
            assert f.equals(f.add(x, f.zero()), x)
            assert f.equals(f.multiply(x, f.one()), x)
            assert f.equals(f.multiply(x, f.zero()), f.zero())

    def test_multiplicative_inverse(self, field_and_samples):
        f, xs = field_and_samples
        for x in xs:
            if f.equals(x, f.zero()):
                continue
            assert f.equals(f.multiply(x, f.reciprocal(x)), f.one())
            assert f.equals(f.divide(x, x), f.one())

    def test_reciprocal_of_zero_fails(self, field_and_samples):
        f, _ = field_and_samples
        with pytest.raises(ZeroDivisionError):
            f.reciprocal(f.zero())
        with pytest.raises(ZeroDivisionError):
            f.divide(f.one(), f.zero())

    def test_commutative(self, field_and_samples):
        f, xs = field_and_samples
        for x, y in itertools.product(xs, repeat=2):
            assert f.equals(f.add(x, y), f.add(y, x))
            assert f.equals(f.multiply(x, y), f.multiply(y, x))

    def test_associative_and_distributive(self, field_and_samples):
        f, xs = field_and_samples
        for x, y, z in itertools.product(xs, repeat=3):
            assert f.equals(f.add(f.add(x, y), z), f.add(x, f.add(y, z)))
            assert f.equals(f.multiply(f.multiply(x, y), z),
                            f.multiply(x, f.multiply(y, z)))
            assert f.equals(f.multiply(x, f.add(y, z)),
                            f.add(f.multiply(x, y), f.multiply(x, z)))

    def test_divide_is_multiply_by_reciprocal(self, field_and_samples):
        f, xs = field_and_samples
        for x, y in itertools.product(xs, repeat=2):
            if f.equals(y, f.zero()):
                continue
            assert f.equals(f.divide(x, y), f.multiply(x, f.reciprocal(y)))


class TestBinaryField:
    def test_size(self):
        assert BinaryField(0x11D).size == 256
        assert BinaryField(0x13).size == 16
        assert BinaryField(0b10).size == 2

    def test_invalid_modulus(self):
        for mod in (0, 1, -5):
            with pytest.raises(ValueError):
                BinaryField(mod)

    def test_known_products(self):
        f = BinaryField(0x11D)
        assert f.multiply(0x80, 2) == 0x1D
        assert f.multiply(3, 3) == 5
        assert f.reciprocal(2) == 0x8E
        assert f.reciprocal(1) == 1

    def test_add_is_xor(self):
        f = BinaryField(0x11D)
        assert f.add(0b1010, 0b0110) == 0b1100
        assert f.negate(0x42) == 0x42

    def test_every_nonzero_element_invertible(self):
        f = BinaryField(0x11D)
        for x in range(1, 256):
            assert f.multiply(x, f.reciprocal(x)) == 1

    def test_out_of_domain(self):
        f = BinaryField(0x11D)
        with pytest.raises(ValueError):
            f.add(256, 1)
        with pytest.raises(ValueError):
            f.multiply(-1, 1)
        with pytest.raises(ValueError):
            f.equals(1, 300)
        with pytest.raises(ValueError):
            f.negate(1.0)

    def test_reducible_modulus_detected_lazily(self):
        # x^2 + 1 == (x + 1)^2 over GF(2)
        f = BinaryField(0b101)
        assert f.multiply(2, f.reciprocal(2)) == 1
        with pytest.raises(ValueError, match="irreducible"):
            f.reciprocal(3)


class TestPrimeField:
    def test_invalid_modulus(self):
        for mod in (1, 0, -7):
            with pytest.raises(ValueError):
                PrimeField(mod)

    def test_arithmetic(self):
        f = PrimeField(1231)
        assert f.add(1230, 5) == 4
        assert f.subtract(3, 5) == 1229
        assert f.negate(0) == 0
        assert f.negate(1) == 1230
        assert f.multiply(1000, 1000) == 1000000 % 1231
        assert f.reciprocal(3) == 821

    def test_out_of_domain(self):
        f = PrimeField(7)
        with pytest.raises(ValueError):
            f.add(7, 0)
        with pytest.raises(ValueError):
            f.multiply(-1, 2)
        with pytest.raises(ValueError):
            f.reciprocal(10)


class TestQuadraticSurd:
    def test_canonical_form(self):
        x = QuadraticSurd(2, 4, -6, 3)
        assert (x.a, x.b, x.c, x.d) == (-1, -2, 3, 3)

    def test_zero_is_reduced(self):
        assert QuadraticSurd(0, 0, 5, 2) == QuadraticSurd(0, 0, 1, 2)

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            QuadraticSurd(1, 1, 0, 2)

    def test_equality_and_hash(self):
        assert QuadraticSurd(2, 2, 4, 5) == QuadraticSurd(1, 1, 2, 5)
        assert hash(QuadraticSurd(2, 2, 4, 5)) == hash(QuadraticSurd(1, 1, 2, 5))
        assert QuadraticSurd(1, 1, 2, 5) != QuadraticSurd(1, 1, 2, 3)

    def test_str(self):
        assert str(QuadraticSurd(1, -2, 3, 7)) == "(1 + -2*sqrt(7)) / 3"


class TestQuadraticSurdField:
    def test_perfect_square_radicand_rejected(self):
        for d in (0, 1, 4, 9):
            with pytest.raises(ValueError):
                QuadraticSurdField(d)
        QuadraticSurdField(-1)
        QuadraticSurdField(2)

    def test_sqrt_squared(self):
        f = QuadraticSurdField(2)
        root = f.element(0, 1)
        assert f.multiply(root, root) == f.element(2)

    def test_reciprocal_formula(self):
        f = QuadraticSurdField(2)
        assert f.reciprocal(f.element(1, 1)) == f.element(-1, 1)
        assert f.reciprocal(f.element(2)) == f.element(1, 0, 2)

    def test_radicand_mismatch(self):
        f = QuadraticSurdField(2)
        other = QuadraticSurdField(3)
        with pytest.raises(ValueError):
            f.add(f.one(), other.one())
        with pytest.raises(ValueError):
            f.multiply(other.element(1, 1), f.one())

    def test_non_surd_rejected(self):
        f = QuadraticSurdField(2)
        with pytest.raises(ValueError):
            f.add(1, f.one())


class TestIntegerRing:
    def test_ring_operations(self):
        r = IntegerRing()
        big = 2 ** 100
        assert r.add(big, 1) == big + 1
        assert r.multiply(big, big) == 2 ** 200
        assert r.negate(5) == -5
        assert r.subtract(3, 10) == -7

    def test_only_one_is_invertible(self):
        assert INTEGER_RING.reciprocal(1) == 1
        for x in (0, 2, -1):
            with pytest.raises(ZeroDivisionError):
                INTEGER_RING.reciprocal(x)

    def test_exact_division(self):
        assert INTEGER_RING.divide(12, 4) == 3
        assert INTEGER_RING.divide(-12, 4) == -3
        with pytest.raises(ValueError):
            INTEGER_RING.divide(7, 2)
        with pytest.raises(ZeroDivisionError):
            INTEGER_RING.divide(7, 0)

    def test_out_of_domain(self):
        with pytest.raises(ValueError):
            INTEGER_RING.add(True, 1)
        with pytest.raises(ValueError):
            INTEGER_RING.multiply(1.5, 2)

    def test_divide_does_not_go_through_reciprocal(self):
        # 3 has no reciprocal, yet 6 / 3 is exact
        with pytest.raises(ZeroDivisionError):
            INTEGER_RING.reciprocal(3)
        assert INTEGER_RING.divide(6, 3) == 2


class TestPower:
    def test_power(self):
        f = PrimeField(1231)
        assert power(f, 3, 0) == 1
        assert power(f, 3, 5) == 243
        assert power(f, 3, 1229) == f.reciprocal(3)

    def test_power_binary(self):
        f = BinaryField(0x11D)
        assert power(f, 2, 8) == 0x1D
        assert power(f, 2, 255) == 1

    def test_negative_exponent(self):
        with pytest.raises(ValueError):
            power(PrimeField(7), 3, -1)
