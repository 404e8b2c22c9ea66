"""Stereo effect wrapper with parameter ranges and per-channel condensers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from condenser_fx.condenser import Condenser


@dataclass(frozen=True)
class ParamSpec:
    """Display name, default and allowed range of one parameter."""

    name: str
    default: float
    minimum: float
    maximum: float
    unit: str = ""

    def clamp(self, value: float) -> float:
        """Limit ``value`` to the parameter's range."""
        return min(max(value, self.minimum), self.maximum)


PARAM_SPECS: dict[str, ParamSpec] = {
    "threshold_db": ParamSpec("Threshold", -40.0, -80.0, 0.0, " dB"),
    "dry_wet": ParamSpec("Dry/Wet", 0.5, 0.0, 1.0),
    "fade_ms": ParamSpec("Fade", 10.0, 1.0, 100.0, " ms"),
    "rel_ms": ParamSpec("Release", 50.0, 1.0, 1000.0, " ms"),
    "ring_sec": ParamSpec("Loop Length", 60, 1, 120),
    "warmup_s": ParamSpec("Warmup", 0.3, 0.0, 5.0, " s"),
}


@dataclass
class CondenserParams:
    """User-facing settings shared by both channels."""

    threshold_db: float = -40.0
    dry_wet: float = 0.5
    fade_ms: float = 10.0
    rel_ms: float = 50.0
    ring_sec: int = 60
    warmup_s: float = 0.3
    loop_mode: bool = False

    def __post_init__(self) -> None:
        self.ring_sec = int(self.ring_sec)
        self.loop_mode = bool(self.loop_mode)
        for name, spec in PARAM_SPECS.items():
            setattr(self, name, spec.clamp(getattr(self, name)))


class StereoCondenser:
    """Runs one condenser on each of the first two channels."""

    def __init__(self, params: CondenserParams | None = None) -> None:
        self.params = params if params is not None else CondenserParams()
        self.left: Condenser | None = None
        self.right: Condenser | None = None

    def _build(self, fs: int) -> Condenser:
        p = self.params
        return Condenser(
            fs,
            p.threshold_db,
            p.dry_wet,
            p.fade_ms,
            p.rel_ms,
            p.ring_sec,
            p.warmup_s,
            p.loop_mode,
        )

    def initialize(self, sample_rate: float) -> bool:
        """Create both channel processors for ``sample_rate``."""
        fs = int(sample_rate)
        self.left = self._build(fs)
        self.right = self._build(fs)
        return True

    def reset(self) -> None:
        """Discard all state, keeping the sample rate."""
        if self.left is not None:
            self.left = self._build(self.left.fs)
        if self.right is not None:
            self.right = self._build(self.right.fs)

    def process(self, channels: Iterable[Sequence[float]]) -> list[list[float]]:
        """Process one block per channel and return the resulting channels."""
        out = [list(channel) for channel in channels]
        p = self.params
        for index, fx in enumerate((self.left, self.right)):
            if fx is None:
                continue
            fx.configure(
                p.threshold_db,
                p.dry_wet,
                p.fade_ms,
                p.rel_ms,
                p.ring_sec,
                p.warmup_s,
                p.loop_mode,
            )
            if index < len(out):
                out[index] = fx.process(out[index])
        return out