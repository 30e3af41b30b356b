"""Deterministic draw runs that turn a PCG32 configuration into a JSON report."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional

from .errors import InvalidArgument
from .prng import DEFAULT_STREAM, PCG32

logger = logging.getLogger(__name__)

MODES = ("u32", "next", "below", "range", "sample", "bytes")


@dataclass
class DrawConfig:
    """Configuration for a single draw run."""

    seed: Optional[int] = None  # None seeds from the clock
    stream: int = DEFAULT_STREAM
    count: int = 10
    mode: str = "u32"
    max_value: int = 6  # "below" and "range" upper bound (exclusive)
    min_value: int = 0  # "range" lower bound (inclusive)
    byte_length: int = 16  # bytes per draw in "bytes" mode

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidArgument("count", self.count, "must be non-negative")
        if self.mode not in MODES:
            raise InvalidArgument("mode", self.mode, f"is not one of {', '.join(MODES)}")
        if self.byte_length < 0:
            raise InvalidArgument("byte_length", self.byte_length, "must be non-negative")


def _drawer(rng: PCG32, cfg: DrawConfig) -> Callable[[], Any]:
    if cfg.mode == "u32":
        return rng.next_u32
    if cfg.mode == "next":
        return rng.next
    if cfg.mode == "below":
        return lambda: rng.next_below(cfg.max_value)
    if cfg.mode == "range":
        return lambda: rng.next_in_range(cfg.min_value, cfg.max_value)
    if cfg.mode == "sample":
        return rng.sample
    return lambda: rng.random_bytes(cfg.byte_length).hex()


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Perform ``cfg.count`` draws; fully determined by seed and stream."""

    rng = PCG32(cfg.seed, cfg.stream)
    draw = _drawer(rng, cfg)
    draws: List[Any] = [draw() for _ in range(cfg.count)]
    logger.info(f"Drew {cfg.count} {cfg.mode} values (seed={rng.seed}, stream={rng.stream})")

    summary: Dict[str, Any] = {"count": len(draws)}
    if cfg.mode != "bytes" and draws:
        summary["min"] = min(draws)
        summary["max"] = max(draws)
        summary["mean"] = sum(draws) / len(draws)

    config = asdict(cfg)
    config["seed"] = rng.seed
    return {"config": config, "draws": draws, "summary": summary}


if __name__ == "__main__":
    import json

    result = run_draws(DrawConfig())
    print(json.dumps(result, indent=2))
