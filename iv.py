"""SHA-512/t initial hash value generation (FIPS 180-4, section 5.3.6).

The IV for SHA-512/t is itself a SHA-512 digest: the string "SHA-512/t"
(with `t` written in decimal) is hashed through the ordinary 64-bit
padding and compression pipeline, starting from the SHA-512 initial
value with every word XOR-ed with 0xA5A5A5A5A5A5A5A5. The untruncated
8-word result is the IV.

For t = 224 and t = 256 this reproduces the published SHA-512/224 and
SHA-512/256 initial values.
"""

from __future__ import annotations

from functools import lru_cache

from compress import WORD64, State, compress_block
from constants import H0_SHA512, IV_GENERATION_MASK
from padding import pad_message, split_into_blocks


def generation_state() -> State:
    """Return the modified SHA-512 initial value used to seed IV generation."""
    return tuple(h ^ IV_GENERATION_MASK for h in H0_SHA512)


@lru_cache(maxsize=None)
def derive_iv(t: int) -> State:
    """Compute the SHA-512/t initial hash value for truncation length `t`.

    `t` is expected to be validated by the caller (see `variants.validate_t`).
    """
    seed = f"SHA-512/{t}".encode("ascii")

    state = generation_state()
    for block in split_into_blocks(pad_message(seed, WORD64), WORD64):
        state = compress_block(state, block, WORD64)
    return state
