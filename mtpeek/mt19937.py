"""MT19937 with a bounded lookahead buffer for non-consuming peeks.

``states[0]`` is the generation being consumed and ``states[g]`` is always
``twist(states[g - 1])``.  Peeks read straight out of that buffer, so they
are O(1) and never move the cursor.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .models import MTState
from .transforms import N, WORD_MASK, init_state, temper, twist, twisted

logger = logging.getLogger(__name__)

DEFAULT_SEED = 5489
# Default seed of a known console port; kept for its test vectors.
DEFAULT_SEED_PS2 = 4537
LOOKAHEAD_GENERATIONS = 10


@dataclass
class MT19937:
    seed: int = field(default=DEFAULT_SEED, compare=False)
    lookahead: int = LOOKAHEAD_GENERATIONS
    states: List[List[int]] = field(init=False, repr=False)
    index: int = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.lookahead, bool) or not isinstance(self.lookahead, int):
            raise ValueError(f"lookahead must be an int, got {self.lookahead!r}")
        if self.lookahead < 1:
            raise ValueError(f"lookahead must be at least 1, got {self.lookahead}")
        self.sgenrand(self.seed)

    @classmethod
    def new_with_seed(cls, seed: int, lookahead: int = LOOKAHEAD_GENERATIONS) -> "MT19937":
        return cls(seed=seed, lookahead=lookahead)

    @property
    def horizon(self) -> int:
        """Largest offset ``peek`` can currently answer."""
        return N * self.lookahead - self.index - 1

    def sgenrand(self, seed: int) -> None:
        """Reseed from scratch and rebuild the whole lookahead buffer."""
        self.seed = seed & WORD_MASK
        head = init_state(self.seed)
        twist(head)
        self._build_from(head)
        self.index = 0
        logger.debug("seeded with %d (lookahead=%d)", self.seed, self.lookahead)

    def genrand(self) -> int:
        """Consume and return the next 32-bit output."""
        if self.index >= N:
            self._advance()
        raw = self.states[0][self.index]
        self.index += 1
        return temper(raw)

    def random(self) -> float:
        return self.genrand() / 2**32

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        if b < a:
            raise ValueError(f"empty range for randint({a}, {b})")
        span = b - a + 1
        return a + int(self.random() * span)

    def get_state(self) -> Tuple[List[int], int]:
        """Snapshot ``(states[0], index)``; feed it back through ``load_state``."""
        return list(self.states[0]), self.index

    def load_state(self, state: Iterable[int], index: int) -> None:
        """Replace generation 0 and the cursor, then rebuild the lookahead chain.

        The pair is validated before anything is touched: ``state`` must hold
        exactly N words in ``[0, 2**32)`` and ``index`` must lie in ``[0, N]``.
        ``index == N`` is allowed and means the next read twists first.
        """
        head = list(state)
        if len(head) != N:
            raise ValueError(f"state must contain {N} words, got {len(head)}")
        for pos, word in enumerate(head):
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise ValueError(f"state word {pos} is not a 32-bit unsigned value: {word!r}")
        if not isinstance(index, int) or not 0 <= index <= N:
            raise ValueError(f"index must lie in [0, {N}], got {index!r}")

        self._build_from(head)
        self.index = index
        logger.debug("loaded external state at index %d", index)

    def peek(self, offset: int) -> Optional[int]:
        """Tempered value ``offset`` words ahead of the cursor, or None past the horizon."""
        slot = self.peek_state(offset)
        return None if slot is None else slot.value

    def peek_state(self, offset: int) -> Optional[MTState]:
        if offset < 0:
            return None
        absolute = self.index + offset
        return self.peek_specific_state(absolute // N, absolute % N)

    def peek_specific(self, generation: int, word_index: int) -> Optional[int]:
        slot = self.peek_specific_state(generation, word_index)
        return None if slot is None else slot.value

    def peek_specific_state(self, generation: int, word_index: int) -> Optional[MTState]:
        """Look up a buffered slot by coordinate; None when it is not buffered."""
        if generation < 0 or word_index < 0 or word_index >= N:
            return None
        if generation >= self.lookahead or generation > self.horizon:
            return None
        raw = self.states[generation][word_index]
        return MTState(word_index=word_index, raw=raw, value=temper(raw), generation=generation)

    def copy(self) -> "MT19937":
        """Independent clone sharing no buffers with this generator."""
        clone = copy.copy(self)
        clone.states = [list(gen) for gen in self.states]
        return clone

    def _build_from(self, head: List[int]) -> None:
        chain = [head]
        for _ in range(1, self.lookahead):
            chain.append(twisted(chain[-1]))
        self.states = chain

    def _advance(self) -> None:
        # states[1] already holds twist(states[0]); shifting keeps every
        # buffered generation bit-identical to a wholesale rebuild.
        self.states = self.states[1:] + [twisted(self.states[-1])]
        self.index = 0
        logger.debug("advanced to next generation")
