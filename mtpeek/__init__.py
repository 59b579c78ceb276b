"""Public package surface for the peekable MT19937 generator."""

from .models import MTState
from .mt19937 import DEFAULT_SEED, DEFAULT_SEED_PS2, LOOKAHEAD_GENERATIONS, MT19937
from .transforms import temper, twist

__all__ = [
    "DEFAULT_SEED",
    "DEFAULT_SEED_PS2",
    "LOOKAHEAD_GENERATIONS",
    "MT19937",
    "MTState",
    "temper",
    "twist",
]
