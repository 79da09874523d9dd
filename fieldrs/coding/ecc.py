"""Reed-Solomon error correction for byte strings.

Wraps the generic ReedSolomon codec over GF(2^8) with the byte layout used
by most RS libraries: each block is data followed by parity, highest-degree
symbol first. With the default parameters the output matches the
`reedsolo` package byte for byte (prim=0x11D, generator=2, fcr=0).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..algebra.binary import BinaryField
from .reed_solomon import ReedSolomon

logger = logging.getLogger(__name__)


@dataclass
class ECCConfig:
    """Error correction configuration.

    nsym: number of error-correction symbols per block. Can correct up to
          nsym//2 symbol errors. Overhead is nsym bytes per block.
    """
    nsym: int = 20
    prim: int = 0x11D      # x^8 + x^4 + x^3 + x^2 + 1
    generator: int = 2


class ECCCodec:
    """Reed-Solomon error correction encoder/decoder for bytes."""

    def __init__(self, config: ECCConfig | None = None):
        self.config = config or ECCConfig()
        self.field = BinaryField(self.config.prim)
        if self.field.size != 256:
            raise ValueError(f"Not a byte field: prim=0x{self.config.prim:X}")
        if not 0 < self.config.nsym < self.block_size:
            raise ValueError(
                f"nsym must be in (0, {self.block_size}), got {self.config.nsym}")
        # message length -> codec
        self._codecs: dict[int, ReedSolomon] = {}

    @property
    def overhead(self) -> int:
        """Number of bytes of ECC overhead added per block."""
        return self.config.nsym

    @property
    def block_size(self) -> int:
        """Longest codeword, data plus parity (255 for GF(256))."""
        return self.field.size - 1

    def max_payload(self, block_size: int) -> int:
        """Maximum payload bytes that fit in a block of *block_size* bytes."""
        return block_size - self.config.nsym

    def _codec(self, message_len: int) -> ReedSolomon:
        codec = self._codecs.get(message_len)
        if codec is None:
            codec = ReedSolomon(self.field, self.config.generator,
                                message_len, self.config.nsym)
            self._codecs[message_len] = codec
        return codec

    def encode(self, data: bytes) -> bytes:
        """Add error correction codes to data.

        Returns data + ECC parity bytes for every block.
        """
        chunk_size = self.max_payload(self.block_size)
        out = bytearray()
        for offset in range(0, len(data), chunk_size):
            chunk = data[offset:offset + chunk_size]
            codeword = self._codec(len(chunk)).encode(list(reversed(chunk)))
            out += bytes(reversed(codeword))
        return bytes(out)

    def decode(self, data: bytes) -> bytes | None:
        """Decode data with error correction.

        Returns the corrected original data, or None if uncorrectable.
        """
        nsym = self.config.nsym
        out = bytearray()
        for offset in range(0, len(data), self.block_size):
            block = data[offset:offset + self.block_size]
            if len(block) <= nsym:
                logger.warning("Truncated ECC block at offset %d: %d bytes",
                               offset, len(block))
                return None
            result = self._codec(len(block) - nsym).decode(list(reversed(block)))
            if not result.ok:
                return None
            out += bytes(reversed(result.message))
        return bytes(out)
