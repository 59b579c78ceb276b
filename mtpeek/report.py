"""Deterministic draw reports used by the command line harness."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .mt19937 import DEFAULT_SEED, LOOKAHEAD_GENERATIONS, MT19937


@dataclass
class RunConfig:
    """Configuration for a single report run."""

    seed: int = DEFAULT_SEED
    count: int = 5
    skip: int = 0
    peek_offsets: tuple[int, ...] = ()
    lookahead: int = LOOKAHEAD_GENERATIONS


def run_report(cfg: RunConfig) -> Dict[str, Any]:
    """Seed a generator, record the requested peeks, then draw ``count`` words."""

    if cfg.count < 0 or cfg.skip < 0:
        raise ValueError("count and skip must be non-negative")

    mt = MT19937(cfg.seed, lookahead=cfg.lookahead)
    for _ in range(cfg.skip):
        mt.genrand()

    # Peeks are taken before drawing so they line up with ``values``.
    peeks: List[Dict[str, Any]] = []
    for offset in cfg.peek_offsets:
        slot = mt.peek_state(offset)
        peeks.append({"offset": offset, "state": None if slot is None else slot.as_dict()})

    values = [mt.genrand() for _ in range(cfg.count)]
    state, index = mt.get_state()

    return {
        "config": asdict(cfg),
        "peeks": peeks,
        "values": values,
        "final": {
            "index": index,
            "horizon": mt.horizon,
            "head": state[:4],
        },
    }


if __name__ == "__main__":
    import json

    print(json.dumps(run_report(RunConfig()), indent=2))
