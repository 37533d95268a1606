"""configuration for the enumeration engine."""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class EnumerationConfig:
    """knobs shared by every enumeration started after a change."""

    # consecutive resolution misses before a single stall warning is logged.
    # the enumeration keeps going either way; None disables the warning.
    stall_warning_threshold: Optional[int] = 1_000_000

    # demultiplexer used by comb.pairs() when no order is given
    default_demultiplexer: str = "uniform"

    def validate(self) -> None:
        from .demux import DEMULTIPLEXERS
        if self.stall_warning_threshold is not None and self.stall_warning_threshold < 1:
            raise ValueError("stall_warning_threshold must be positive or None")
        if self.default_demultiplexer not in DEMULTIPLEXERS:
            raise ValueError(f"unknown demultiplexer: {self.default_demultiplexer!r}")


# global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()


def configure(**kwargs) -> EnumerationConfig:
    """update the global configuration in place. unknown keys raise ValueError."""
    known = {f.name for f in fields(EnumerationConfig)}
    unknown = set(kwargs) - known
    if unknown:
        raise ValueError(f"unknown configuration keys: {sorted(unknown)}")

    candidate = EnumerationConfig(**{**vars(ENUMERATION_CONFIG), **kwargs})
    candidate.validate()
    for key, value in kwargs.items():
        setattr(ENUMERATION_CONFIG, key, value)
    return ENUMERATION_CONFIG
