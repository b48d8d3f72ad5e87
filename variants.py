"""SHA-2 variant selection.

Maps the many accepted spellings of a variant name ("SHA-512/256",
"sha_512_256", "SHA512256", ...) onto a `Variant`, validates the SHA-512/t
truncation length and builds the `VariantConfig` that parameterises padding
and compression.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

from compress import WORD32, WORD64, State, WordClass
from constants import (
    H0_SHA224,
    H0_SHA256,
    H0_SHA384,
    H0_SHA512,
    H0_SHA512_224,
    H0_SHA512_256,
)
from iv import derive_iv


class InvalidParameterError(ValueError):
    """Unknown variant name or unsupported SHA-512/t truncation length."""


class Variant(Enum):
    SHA224 = "SHA-224"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"
    SHA512_224 = "SHA-512/224"
    SHA512_256 = "SHA-512/256"
    SHA512_T = "SHA-512/t"


class VariantConfig(NamedTuple):
    name: str
    word: WordClass
    initial_state: State
    output_bits: int

    @property
    def word_width(self) -> int:
        return self.word.bits

    @property
    def block_size(self) -> int:
        return self.word.block_size

    @property
    def round_count(self) -> int:
        return self.word.round_count

    @property
    def constants(self) -> Tuple[int, ...]:
        return self.word.constants

    @property
    def output_bytes(self) -> int:
        return (self.output_bits + 7) // 8


# Normalised spelling -> variant. Normalisation upper-cases the name and
# strips '-', '_' and '/' separators.
ALIASES: Dict[str, Variant] = {
    "SHA224": Variant.SHA224,
    "SHA256": Variant.SHA256,
    "SHA384": Variant.SHA384,
    "SHA512": Variant.SHA512,
    "SHA512224": Variant.SHA512_224,
    "SHA512256": Variant.SHA512_256,
    "SHA512T": Variant.SHA512_T,
}

_FIXED: Dict[Variant, Tuple[WordClass, State, int]] = {
    Variant.SHA224: (WORD32, H0_SHA224, 224),
    Variant.SHA256: (WORD32, H0_SHA256, 256),
    Variant.SHA384: (WORD64, H0_SHA384, 384),
    Variant.SHA512: (WORD64, H0_SHA512, 512),
    Variant.SHA512_224: (WORD64, H0_SHA512_224, 224),
    Variant.SHA512_256: (WORD64, H0_SHA512_256, 256),
}

_SEPARATORS = str.maketrans("", "", "-_/")


def normalize_name(name: str) -> str:
    """Upper-case `name` and drop separator characters."""
    return name.strip().upper().translate(_SEPARATORS)


def resolve_variant(name: Union[str, Variant]) -> Variant:
    """Resolve a variant name (or pass a `Variant` through)."""
    if isinstance(name, Variant):
        return name
    if not isinstance(name, str):
        raise InvalidParameterError(f"Variant name must be a string, got {type(name).__name__}")

    variant = ALIASES.get(normalize_name(name))
    if variant is None:
        raise InvalidParameterError(f"Unknown SHA-2 variant: {name!r}")
    return variant


def validate_t(t: object) -> int:
    """Check a SHA-512/t truncation length: 1 <= t <= 511 and t != 384."""
    if isinstance(t, bool) or not isinstance(t, int):
        raise InvalidParameterError(f"t must be an integer, got {type(t).__name__}")
    if not 1 <= t <= 511:
        raise InvalidParameterError(f"t must be between 1 and 511, got {t}")
    if t == 384:
        raise InvalidParameterError("t = 384 is not permitted for SHA-512/t; use SHA-384")
    return t


def variant_config(name: Union[str, Variant], t: Optional[int] = None) -> VariantConfig:
    """Build the configuration for a variant.

    For SHA-512/t the initial state is produced by running the IV generation
    function, which is a full SHA-512 computation in its own right.
    """
    variant = resolve_variant(name)

    if variant is Variant.SHA512_T:
        if t is None:
            raise InvalidParameterError("SHA-512/t requires a truncation length t")
        t = validate_t(t)
        return VariantConfig(f"SHA-512/{t}", WORD64, derive_iv(t), t)

    if t is not None:
        raise InvalidParameterError(f"t is only accepted for SHA-512/t, not {variant.value}")

    word, initial_state, output_bits = _FIXED[variant]
    return VariantConfig(variant.value, word, initial_state, output_bits)
