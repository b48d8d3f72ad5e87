"""Message padding and block splitting for SHA-2.

Padding rules (FIPS 180-4, section 5.1):

1. Append bit '1' to the message (0x80 byte).
2. Append zero bytes until the length is congruent to
   `block_size - length_field_size` modulo `block_size`.
3. Append the original message length in bits as a big-endian integer
   filling the length field (8 bytes for 32-bit words, 16 bytes for 64-bit
   words).
"""

from __future__ import annotations

from typing import Iterable, List

from compress import WORD32, WordClass


def pad_message(message: bytes, word: WordClass = WORD32) -> bytes:
    """Pad `message` so its length is a multiple of `word.block_size`."""
    ml_bits = len(message) * 8
    block_size = word.block_size
    field = word.length_field_size

    padded = bytearray(message)
    padded.append(0x80)

    padding_length = (block_size - field - len(padded)) % block_size
    padded.extend(b"\x00" * padding_length)

    padded.extend(ml_bits.to_bytes(field, byteorder="big"))
    return bytes(padded)


def chunks(data: bytes, size: int) -> Iterable[bytes]:
    """Yield successive `size`-byte chunks from `data`."""
    for i in range(0, len(data), size):
        yield data[i : i + size]


def split_into_blocks(padded: bytes, word: WordClass = WORD32) -> List[bytes]:
    """Split an already padded message into blocks of `word.block_size` bytes."""
    if len(padded) % word.block_size != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {word.block_size} bytes, "
            f"got {len(padded)}"
        )
    return list(chunks(padded, word.block_size))
