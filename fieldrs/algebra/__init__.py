"""Algebras implementing the Field contract."""

from .binary import BinaryField
from .field import Field, power
from .integer import INTEGER_RING, IntegerRing
from .prime import PrimeField
from .surd import QuadraticSurd, QuadraticSurdField

__all__ = [
    "BinaryField",
    "Field",
    "INTEGER_RING",
    "IntegerRing",
    "PrimeField",
    "QuadraticSurd",
    "QuadraticSurdField",
    "power",
]
