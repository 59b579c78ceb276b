"""Pure MT19937 primitives: seeding recurrence, twist and temper."""

from typing import List, MutableSequence

N = 624
M = 397

MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
WORD_MASK = 0xFFFFFFFF

INIT_MULTIPLIER = 1812433253


def init_state(seed: int) -> List[int]:
    """Fill a fresh N-word state from a 32-bit seed (init_genrand)."""
    state = [0] * N
    state[0] = seed & WORD_MASK
    for i in range(1, N):
        prev = state[i - 1]
        state[i] = (INIT_MULTIPLIER * (prev ^ (prev >> 30)) + i) & WORD_MASK
    return state


def twist(state: MutableSequence[int]) -> None:
    """Advance ``state`` to the next generation in place."""
    # Forward order matters: once i + M wraps past N the recurrence reads
    # words already twisted in this pass.
    for i in range(N):
        x = (state[i] & UPPER_MASK) + (state[(i + 1) % N] & LOWER_MASK)
        x_a = x >> 1
        if x & 1:
            x_a ^= MATRIX_A
        state[i] = state[(i + M) % N] ^ x_a


def twisted(state: List[int]) -> List[int]:
    """Return the next generation of ``state`` without touching it."""
    nxt = list(state)
    twist(nxt)
    return nxt


def temper(y: int) -> int:
    """Whiten one raw state word into its public output."""
    y ^= y >> 11
    y ^= (y << 7) & 0x9D2C5680
    y ^= (y << 15) & 0xEFC60000
    y ^= y >> 18
    return y & WORD_MASK
