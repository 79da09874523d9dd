"""Reed-Solomon coding on top of the generic field and matrix layers."""

from .ecc import ECCCodec, ECCConfig
from .reed_solomon import DecodeResult, DecodeStatus, ReedSolomon

__all__ = ["DecodeResult", "DecodeStatus", "ECCCodec", "ECCConfig", "ReedSolomon"]
