"""Per-block azimuth spans and time offsets inside one MSOP packet."""

from __future__ import annotations

import abc
import struct
from typing import Iterator, Sequence

AZIMUTH_CIRCLE = 36000
FOV_BLIND_THRESHOLD = 100
CHANNELS = 32


def float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _wrap(diff: int) -> int:
    return diff + AZIMUTH_CIRCLE if diff < 0 else diff


class BlockIterator(abc.ABC):
    """Azimuth difference and time offset of each block of a packet.

    ``azimuths`` holds the azimuth of each block in host order, in
    hundredths of a degree.
    """

    MAX_BLOCKS_PER_PKT = 12
    MIN_BLOCKS = 1

    def __init__(
        self,
        azimuths: Sequence[int],
        blocks_per_pkt: int,
        block_duration: float,
        block_az_duration: int,
        fov_blind_duration: float,
    ) -> None:
        if not self.MIN_BLOCKS <= blocks_per_pkt <= self.MAX_BLOCKS_PER_PKT:
            raise ValueError(
                f"blocks per packet must be in [{self.MIN_BLOCKS}, "
                f"{self.MAX_BLOCKS_PER_PKT}], got {blocks_per_pkt}"
            )
        if len(azimuths) < blocks_per_pkt:
            raise ValueError(
                f"{blocks_per_pkt} blocks expected, {len(azimuths)} azimuths given"
            )
        self.blocks_per_pkt = blocks_per_pkt
        self.block_duration = block_duration
        self.block_az_duration = block_az_duration
        self.fov_blind_duration = fov_blind_duration
        az_diffs, tss = self._compute(list(azimuths[:blocks_per_pkt]))
        self._az_diffs = az_diffs[:blocks_per_pkt]
        self._tss = tss[:blocks_per_pkt]

    @abc.abstractmethod
    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        """Return the azimuth differences and time offsets of all blocks."""

    def _step(self, raw_diff: int, ts_diff: float, az_duration: int) -> tuple[int, float]:
        diff = _wrap(raw_diff)
        if diff > FOV_BLIND_THRESHOLD:
            # Skip the FOV blind zone.
            return az_duration, self.fov_blind_duration
        return diff, ts_diff

    def _consecutive(
        self, azimuths: list[int], ts_diff: float, az_duration: int
    ) -> tuple[list[int], list[float]]:
        az_diffs: list[int] = []
        tss: list[float] = []
        ts = 0.0
        for current, following in zip(azimuths, azimuths[1:]):
            az_diff, step = self._step(following - current, ts_diff, az_duration)
            az_diffs.append(az_diff)
            tss.append(ts)
            ts += step
        az_diffs.append(az_duration)
        tss.append(ts)
        return az_diffs, tss

    def get(self, blk: int) -> tuple[int, float]:
        """Return ``(azimuth difference, time offset)`` of block ``blk``."""
        if not 0 <= blk < len(self._az_diffs):
            raise IndexError(f"block {blk} out of range")
        return self._az_diffs[blk], self._tss[blk]

    def __len__(self) -> int:
        return len(self._az_diffs)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return zip(self._az_diffs, self._tss)


class SingleReturnBlockIterator(BlockIterator):
    """Each block is one firing; the next block follows it."""

    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        return self._consecutive(azimuths, self.block_duration, self.block_az_duration)


class DualReturnBlockIterator(BlockIterator):
    """Blocks come in pairs of returns sharing one firing."""

    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        az_diffs: list[int] = []
        tss: list[float] = []
        ts = 0.0
        for current, following in zip(azimuths[::2], azimuths[2::2]):
            az_diff, step = self._step(following - current, self.block_duration, self.block_az_duration)
            az_diffs += [az_diff, az_diff]
            tss += [ts, ts]
            ts += step
        az_diffs += [self.block_az_duration, self.block_az_duration]
        tss += [ts, ts]
        return az_diffs, tss


class ABDualReturnBlockIterator(BlockIterator):
    """Three blocks laid out as AAB or ABB returns."""

    MIN_BLOCKS = 3

    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        az_diff, ts_diff = self._step(
            azimuths[2] - azimuths[0], self.block_duration, self.block_az_duration
        )
        last = self.block_az_duration
        if azimuths[0] == azimuths[1]:  # AAB
            return [az_diff, az_diff, last], [0.0, 0.0, ts_diff]
        return [az_diff, last, last], [0.0, ts_diff, ts_diff]  # ABB


class Rs16SingleReturnBlockIterator(BlockIterator):
    """Single return on a 16-laser unit: each block holds two firings."""

    @staticmethod
    def calc_channel(
        blk_ts: float, firing_tss: Sequence[float]
    ) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """Return per-channel azimuth fractions and time offsets in seconds."""
        if len(firing_tss) < CHANNELS:
            raise ValueError(f"{CHANNELS} firing times expected, {len(firing_tss)} given")
        span = float32(float32(blk_ts) * 2)
        fired = [float32(t) for t in firing_tss[:CHANNELS]]
        az_percents = tuple(float32(t / span) for t in fired)
        ts_diffs = tuple(t / 1_000_000 for t in fired)
        return az_percents, ts_diffs

    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        return self._consecutive(azimuths, self.block_duration * 2, self.block_az_duration * 2)


class Rs16DualReturnBlockIterator(BlockIterator):
    """Dual return on a 16-laser unit: each block holds both returns of one firing."""

    @staticmethod
    def calc_channel(
        blk_ts: float, firing_tss: Sequence[float]
    ) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """Return per-channel azimuth fractions and time offsets in seconds."""
        lasers = CHANNELS // 2
        if len(firing_tss) < lasers:
            raise ValueError(f"{lasers} firing times expected, {len(firing_tss)} given")
        span = float32(blk_ts)
        fired = [float32(t) for t in firing_tss[:lasers]] * 2
        az_percents = tuple(float32(t / span) for t in fired)
        ts_diffs = tuple(t / 1_000_000 for t in fired)
        return az_percents, ts_diffs

    def _compute(self, azimuths: list[int]) -> tuple[list[int], list[float]]:
        return self._consecutive(azimuths, self.block_duration, self.block_az_duration)