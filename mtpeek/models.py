from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MTState:
    """One buffered slot as seen by a peek."""

    word_index: int
    raw: int
    value: int
    generation: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
