"""Threshold-gated loop recorder that mixes its recording back into the signal."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum


class State(Enum):
    """Phase of the capture state machine."""

    FADE_IN = "fade_in"
    RECORD = "record"
    FADE_OUT = "fade_out"
    IDLE = "idle"


def _db_to_linear(db: float) -> float:
    return 10.0 ** (db / 20.0)


def _frames(seconds: float, fs: int) -> int:
    frames = seconds * fs
    if math.isnan(frames) or frames <= 0:
        return 0
    return int(frames)


def _fade_length(fade_ms: float, fs: int) -> int:
    return max(_frames(fade_ms * 1e-3, fs), 1)


def _fade_curve(length: int) -> list[float]:
    """Raised-cosine window that rises from 0 to 1 and back over ``length`` points."""
    if length == 1:
        # A single-point window divides zero by zero.
        return [math.nan]
    return [
        0.5 - 0.5 * math.cos(2.0 * math.pi * t / (length - 1.0))
        for t in range(length)
    ]


def _release_coef(rel_ms: float, fs: int) -> float:
    span = rel_ms * 1e-3 * fs
    if span == 0:
        return 0.0
    return math.exp(-1.0 / span)


def _peak(samples: Iterable[float]) -> float:
    return max((abs(s) for s in samples if not math.isnan(s)), default=0.0)


class Condenser:
    """Records passages louder than a threshold into a ring buffer and plays it back.

    Every processed block is mixed with an equal-length block read from the
    recorded loop, weighted by the dry/wet ratio.
    """

    def __init__(
        self,
        fs: int,
        threshold_db: float,
        dry_wet: float,
        fade_ms: float,
        rel_ms: float,
        max_seconds: int,
        warmup_sec: float,
        loop_mode: bool,
    ) -> None:
        self.fs = int(fs)
        self.loop_mode = bool(loop_mode)
        self.state = State.IDLE

        self._threshold = _db_to_linear(threshold_db)
        self._dry_wet = min(max(dry_wet, 0.0), 1.0)
        self._warmup_frames = _frames(warmup_sec, self.fs)
        self._processed_frames = 0

        self._max_frames = self.fs * int(max_seconds)
        self._buf = [0.0] * self._max_frames
        self._write_ptr = 0
        self._read_ptr = 0
        self._recorded_frames = 0

        self._fade_len = _fade_length(fade_ms, self.fs)
        self._fade_curve = _fade_curve(self._fade_len)
        self._fade_pos = 0

        self._rel_coef = _release_coef(rel_ms, self.fs)
        self._env = 0.0

    def configure(
        self,
        threshold_db: float,
        dry_wet: float,
        fade_ms: float,
        rel_ms: float,
        ring_sec: int,
        warmup_sec: float,
        loop_mode: bool,
    ) -> None:
        """Apply new settings without losing the recording unless the ring size changes."""
        self._threshold = _db_to_linear(threshold_db)
        self._dry_wet = min(max(dry_wet, 0.0), 1.0)

        fade_len = _fade_length(fade_ms, self.fs)
        if fade_len != self._fade_len:
            self._fade_len = fade_len
            self._fade_curve = _fade_curve(fade_len)

        self._rel_coef = _release_coef(rel_ms, self.fs)

        new_frames = self.fs * int(ring_sec)
        if new_frames != self._max_frames:
            self._max_frames = new_frames
            self._buf = [0.0] * new_frames
            self._write_ptr = 0
            self._read_ptr = 0
            self._recorded_frames = 0

        self._warmup_frames = _frames(warmup_sec, self.fs)
        self.loop_mode = bool(loop_mode)

    def _ring_write(self, data: Sequence[float]) -> None:
        if self.loop_mode:
            return
        n = len(data)
        if n > self._max_frames:
            raise ValueError(
                f"cannot write {n} frames into a ring of {self._max_frames}"
            )
        end = self._write_ptr + n
        if end <= self._max_frames:
            self._buf[self._write_ptr:end] = data
        else:
            first = self._max_frames - self._write_ptr
            self._buf[self._write_ptr:] = data[:first]
            self._buf[: n - first] = data[first:]
        self._write_ptr = end % self._max_frames
        self._recorded_frames = min(max(self._recorded_frames, end), self._max_frames)

    def _ring_read(self, n: int) -> list[float]:
        if self._recorded_frames == 0:
            return [0.0] * n
        loop_len = self._recorded_frames
        end = self._read_ptr + n
        if end <= loop_len:
            out = self._buf[self._read_ptr:end]
        else:
            first = loop_len - self._read_ptr
            if n - first > len(self._buf):
                raise ValueError(f"cannot read {n} frames from a loop of {loop_len}")
            out = self._buf[self._read_ptr:loop_len] + self._buf[: n - first]
        self._read_ptr = end % loop_len
        return out

    def _mix(self, dry: Sequence[float]) -> list[float]:
        wet = self._ring_read(len(dry))
        ratio = self._dry_wet
        return [(1.0 - ratio) * d + ratio * w for d, w in zip(dry, wet)]

    def _capture(self, samples: list[float]) -> None:
        n_total = len(samples)
        idx = 0
        while idx < n_total:
            seg = samples[idx:]
            remain = len(seg)

            peak = _peak(seg)
            if peak > self._env:
                self._env = peak
            else:
                self._env *= self._rel_coef**remain

            if self.state is State.IDLE:
                if self._env > self._threshold:
                    self.state = State.FADE_IN
                    self._fade_pos = 0
                else:
                    break

            if self.state is State.FADE_IN:
                span = max(0, min(remain, self._fade_len - self._fade_pos))
                gains = self._fade_curve[self._fade_pos : self._fade_pos + span]
                self._ring_write([s * g for s, g in zip(seg[:span], gains)])
                idx += span
                self._fade_pos += span
                if self._fade_pos >= self._fade_len:
                    self.state = State.RECORD
            elif self.state is State.RECORD:
                if self._env > self._threshold:
                    self._ring_write(seg)
                    idx = n_total
                else:
                    self.state = State.FADE_OUT
                    self._fade_pos = 0
            elif self.state is State.FADE_OUT:
                span = max(0, min(remain, self._fade_len - self._fade_pos))
                stop = self._fade_len - self._fade_pos
                gains = reversed(self._fade_curve[stop - span : stop]) if span else ()
                self._ring_write([s * g for s, g in zip(seg[:span], gains)])
                idx += span
                self._fade_pos += span
                if self._fade_pos >= self._fade_len:
                    self.state = State.IDLE

    def process(self, block: Iterable[float]) -> list[float]:
        """Feed one block of samples and return the dry/wet mix for it."""
        samples = [float(x) for x in block]
        if not self.loop_mode:
            if self._processed_frames >= self._warmup_frames:
                self._capture(samples)
            self._processed_frames += len(samples)
        return self._mix(samples)

    def recorded(self) -> list[float]:
        """Return a copy of everything recorded so far."""
        return self._buf[: self._recorded_frames]