"""fieldrs: Reed-Solomon coding over arbitrary finite fields."""

from .algebra import (
    BinaryField,
    Field,
    IntegerRing,
    PrimeField,
    QuadraticSurd,
    QuadraticSurdField,
)
from .coding import DecodeResult, DecodeStatus, ECCCodec, ECCConfig, ReedSolomon
from .linalg import Matrix

__version__ = "0.1.0"

__all__ = [
    "BinaryField",
    "DecodeResult",
    "DecodeStatus",
    "ECCCodec",
    "ECCConfig",
    "Field",
    "IntegerRing",
    "Matrix",
    "PrimeField",
    "QuadraticSurd",
    "QuadraticSurdField",
    "ReedSolomon",
]
