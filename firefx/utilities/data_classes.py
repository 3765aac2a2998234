from dataclasses import dataclass, asdict
from typing import Optional

from firefx.exceptions import ConfigurationError


class HeatOverflow:
    """How heat values above 255 are reduced to a palette index.

    Attributes:
        - **WRAP** (str): index with ``heat % 256``.
        - **CLAMP** (str): index with ``min(heat, 255)``.
    """
    WRAP, CLAMP = "wrap", "clamp"

    modes = (WRAP, CLAMP)


@dataclass
class FireParams:
    width: int = 30
    height: int = 100
    seed: Optional[int] = None
    overflow: str = HeatOverflow.WRAP
    frame_interval_ms: int = 30

    def validate(self):
        """Check the parameters, raising ConfigurationError on the first bad one."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"Grid {name} must be a positive integer, got {value!r}",
                                         parameter=name)

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)
                                      or self.seed < 0):
            raise ConfigurationError(f"Seed must be None or a non-negative integer, got {self.seed!r}",
                                     parameter="seed")

        if self.overflow not in HeatOverflow.modes:
            raise ConfigurationError(f"Unknown overflow mode {self.overflow!r}, "
                                     f"expected one of {HeatOverflow.modes}",
                                     parameter="overflow")

        interval = self.frame_interval_ms
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or not interval > 0:
            raise ConfigurationError(f"Frame interval must be a positive number, got {interval!r}",
                                     parameter="frame_interval_ms")

    @property
    def shape(self):
        return (self.height, self.width)

    @property
    def frame_size(self) -> int:
        """Length in bytes of one rendered RGB frame."""
        return self.width * self.height * 3

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'FireParams':
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown parameters: {sorted(unknown)}")
        params = cls(**data)
        params.validate()
        return params
