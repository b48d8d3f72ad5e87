"""Forward SHA-2 compression for both word classes.

SHA-224/256 operate on 32-bit words and SHA-384/512 (with their truncated
variants) on 64-bit words. The round function is the same for both; only
the word width, the Σ/σ rotation and shift amounts and the constant table
differ, so everything here is parameterised by a `WordClass`.

All additions are performed modulo 2**32 or 2**64 depending on the word class.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from constants import K32, K64


MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

State = Tuple[int, int, int, int, int, int, int, int]


class WordClass(NamedTuple):
    """Parameters shared by every variant with the same word width."""

    bits: int
    mask: int
    block_size: int
    length_field_size: int
    constants: Tuple[int, ...]
    # (rotr, rotr, shr) amounts for the message schedule functions.
    sigma0: Tuple[int, int, int]
    sigma1: Tuple[int, int, int]
    # (rotr, rotr, rotr) amounts for the round functions.
    big_sigma0: Tuple[int, int, int]
    big_sigma1: Tuple[int, int, int]

    @property
    def word_bytes(self) -> int:
        return self.bits // 8

    @property
    def round_count(self) -> int:
        return len(self.constants)


WORD32 = WordClass(
    bits=32,
    mask=MASK32,
    block_size=64,
    length_field_size=8,
    constants=K32,
    sigma0=(7, 18, 3),
    sigma1=(17, 19, 10),
    big_sigma0=(2, 13, 22),
    big_sigma1=(6, 11, 25),
)

WORD64 = WordClass(
    bits=64,
    mask=MASK64,
    block_size=128,
    length_field_size=16,
    constants=K64,
    sigma0=(1, 8, 7),
    sigma1=(19, 61, 6),
    big_sigma0=(28, 34, 39),
    big_sigma1=(14, 18, 41),
)


def _rotr(x: int, n: int, bits: int = 32) -> int:
    """Right-rotate a `bits`-wide word `x` by `n` bits."""
    mask = (1 << bits) - 1
    x &= mask
    return ((x >> n) | (x << (bits - n))) & mask


def _shr(x: int, n: int, bits: int = 32) -> int:
    """Right-shift a `bits`-wide word `x` by `n` bits."""
    x &= (1 << bits) - 1
    return x >> n


def _add(word: WordClass, *values: int) -> int:
    """Sum `values` modulo 2**word.bits."""
    return sum(values) & word.mask


def _small_sigma0(x: int, word: WordClass = WORD32) -> int:
    """Function σ0 used in the message schedule."""
    r1, r2, s = word.sigma0
    return _rotr(x, r1, word.bits) ^ _rotr(x, r2, word.bits) ^ _shr(x, s, word.bits)


def _small_sigma1(x: int, word: WordClass = WORD32) -> int:
    """Function σ1 used in the message schedule."""
    r1, r2, s = word.sigma1
    return _rotr(x, r1, word.bits) ^ _rotr(x, r2, word.bits) ^ _shr(x, s, word.bits)


def _big_sigma0(x: int, word: WordClass = WORD32) -> int:
    r1, r2, r3 = word.big_sigma0
    return _rotr(x, r1, word.bits) ^ _rotr(x, r2, word.bits) ^ _rotr(x, r3, word.bits)


def _big_sigma1(x: int, word: WordClass = WORD32) -> int:
    r1, r2, r3 = word.big_sigma1
    return _rotr(x, r1, word.bits) ^ _rotr(x, r2, word.bits) ^ _rotr(x, r3, word.bits)


def compression(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    w: int,
    k: int,
    word: WordClass = WORD32,
) -> State:
    """Perform one SHA-2 compression round.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        Words representing the current working state.
    w : int
        Message schedule word `w[i]`.
    k : int
        Round constant `k[i]`.
    word : WordClass
        Word class of the variant (`WORD32` or `WORD64`).

    Returns
    -------
    (a_new, b_new, c_new, d_new, e_new, f_new, g_new, h_new) : tuple[int, ...]
        Updated working state after one round, reduced modulo 2**word.bits.
    """
    mask = word.mask

    ch = (e & f) ^ ((~e & mask) & g)
    temp1 = _add(word, h, _big_sigma1(e, word), ch, k, w)

    maj = (a & b) ^ (a & c) ^ (b & c)
    temp2 = _add(word, _big_sigma0(a, word), maj)

    return (
        _add(word, temp1, temp2),
        a,
        b,
        c,
        _add(word, d, temp1),
        e,
        f,
        g,
    )


def compress_rounds(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    ws: Sequence[int],
    word: WordClass = WORD32,
) -> State:
    """Run the full compression loop (64 or 80 rounds) for one block.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        Initial working state words (typically the current hash value).
    ws : Sequence[int]
        The message schedule `w[0..round_count-1]` for this block.

    Returns
    -------
    (a, b, c, d, e, f, g, h) : tuple[int, ...]
        Final working state words after all rounds.
    """
    if len(ws) != word.round_count:
        raise ValueError(
            f"compress_rounds expects {word.round_count} message schedule words, got {len(ws)}"
        )

    state = (a, b, c, d, e, f, g, h)
    for k, w in zip(word.constants, ws):
        state = compression(*state, w, k, word)
    return state


def build_message_schedule(block: bytes, word: WordClass = WORD32) -> List[int]:
    """Given one block, build the message schedule w[0..round_count-1]."""
    if len(block) != word.block_size:
        raise ValueError(f"Expected {word.block_size}-byte block, got {len(block)}")

    size = word.word_bytes
    w: List[int] = [0] * word.round_count

    # First 16 words come directly from the block (big-endian).
    for i in range(16):
        w[i] = int.from_bytes(block[size * i : size * (i + 1)], byteorder="big")

    for i in range(16, word.round_count):
        s0 = _small_sigma0(w[i - 15], word)
        s1 = _small_sigma1(w[i - 2], word)
        w[i] = _add(word, w[i - 16], s0, w[i - 7], s1)

    return w


def update_hash_state(
    prev_state: Sequence[int],
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h_out: int,
    word: WordClass = WORD32,
) -> State:
    """Add the working registers to the chaining value:

        H_{i+1}[j] = (H_i[j] + working[j]) mod 2**word.bits
    """
    working = (a, b, c, d, e, f, g, h_out)
    return tuple(_add(word, h, x) for h, x in zip(prev_state, working))


def compress_block(state: Sequence[int], block: bytes, word: WordClass = WORD32) -> State:
    """Compress one block into `state` and return the next chaining value.

    `state` itself is left untouched.
    """
    if len(state) != 8:
        raise ValueError(f"State must contain 8 words, got {len(state)}")

    ws = build_message_schedule(block, word)
    work_out = compress_rounds(*state, ws, word)
    return update_hash_state(state, *work_out, word)
