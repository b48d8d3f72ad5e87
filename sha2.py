"""SHA-2 digests built on `compress_block`.

This module provides:

- `digest(variant_name, data, t=None) -> bytes`: the single-shot digest of
  `data` (bytes, or a str hashed as UTF-8) for any SHA-2 variant.
- `hexdigest(...)`: the same digest as lowercase hex.
- `sha2_before` / `sha2_after`: the work done before and after the
  per-block compression calls, for callers driving their own pipeline.
- Named helpers `sha224`, `sha256`, `sha384`, `sha512`, `sha512_224`,
  `sha512_256` and `sha512_t`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from compress import State, build_message_schedule, compress_rounds, update_hash_state
from padding import pad_message, split_into_blocks
from variants import Variant, VariantConfig, variant_config


Message = Union[bytes, bytearray, memoryview, str]


def _to_bytes(data: Message) -> bytes:
    """Return `data` as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"data must be bytes or str, not {type(data).__name__}")


def serialize_state(state: Sequence[int], word_bytes: int) -> bytes:
    """Concatenate the state words as big-endian bytes."""
    return b"".join(w.to_bytes(word_bytes, byteorder="big") for w in state)


def truncate_digest(full: bytes, output_bits: int) -> bytes:
    """Keep the leftmost `output_bits` bits of `full`.

    When `output_bits` is not a multiple of 8 the result is rounded up to
    whole bytes; the last byte is the state byte as-is, including the bits
    past `output_bits`.
    """
    return bytes(full[: (output_bits + 7) // 8])


def sha2_before(
    variant_name: Union[str, Variant],
    data: Message,
    t: Optional[int] = None,
) -> Tuple[VariantConfig, State, List[List[int]]]:
    """Prepare everything needed before the compression loop.

    This performs:
    - Variant resolution and validation (and IV generation for SHA-512/t).
    - Padding of the message.
    - Splitting into blocks.
    - Building the message schedule for each block.

    A custom pipeline then looks like:

        config, state, schedules = sha2_before("SHA-512", data)
        for ws in schedules:
            work_out = compress_rounds(*state, ws, config.word)
            state = update_hash_state(state, *work_out, config.word)
        result = sha2_after(config, state)
    """
    config = variant_config(variant_name, t)
    message = _to_bytes(data)

    padded = pad_message(message, config.word)
    schedules = [
        build_message_schedule(block, config.word)
        for block in split_into_blocks(padded, config.word)
    ]
    return config, config.initial_state, schedules


def sha2_after(config: VariantConfig, final_state: Sequence[int]) -> bytes:
    """Serialise the final state and truncate it to the variant's output length."""
    full = serialize_state(final_state, config.word.word_bytes)
    return truncate_digest(full, config.output_bits)


def digest(
    variant_name: Union[str, Variant],
    data: Message,
    t: Optional[int] = None,
) -> bytes:
    """Compute the SHA-2 digest of `data`.

    Parameters
    ----------
    variant_name : str or Variant
        Any accepted spelling, e.g. "SHA-256", "sha_512_224", "SHA512t".
    data : bytes or str
        Message to hash. Text is encoded as UTF-8 first.
    t : int, optional
        Output length in bits, required for SHA-512/t and rejected otherwise.

    Returns
    -------
    bytes
        `ceil(output_bits / 8)` bytes of raw digest.

    Raises
    ------
    InvalidParameterError
        For an unknown variant name or an unsupported `t`.
    """
    config, state, schedules = sha2_before(variant_name, data, t)

    for ws in schedules:
        work_out = compress_rounds(*state, ws, config.word)
        state = update_hash_state(state, *work_out, config.word)

    return sha2_after(config, state)


def hexdigest(
    variant_name: Union[str, Variant],
    data: Message,
    t: Optional[int] = None,
) -> str:
    """Convenience helper returning the lowercase hex digest."""
    return digest(variant_name, data, t).hex()


def sha224(data: Message) -> bytes:
    return digest(Variant.SHA224, data)


def sha256(data: Message) -> bytes:
    return digest(Variant.SHA256, data)


def sha384(data: Message) -> bytes:
    return digest(Variant.SHA384, data)


def sha512(data: Message) -> bytes:
    return digest(Variant.SHA512, data)


def sha512_224(data: Message) -> bytes:
    return digest(Variant.SHA512_224, data)


def sha512_256(data: Message) -> bytes:
    return digest(Variant.SHA512_256, data)


def sha512_t(t: int, data: Message) -> bytes:
    """SHA-512 truncated to `t` bits with the IV generated for `t`."""
    return digest(Variant.SHA512_T, data, t)
