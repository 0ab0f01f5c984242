from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from .scheduler import DEFAULT_SLOT_DURATION, RankScheduler

logger = logging.getLogger(__name__)


@dataclass
class DocketEntry:
    name: str
    rank: int
    round: int
    wait_time: float


@dataclass
class DocketStats:
    size: int
    rounds: int
    mean_wait: float
    total_time: float  # when the last hearing ends
    wait_percentiles: dict[float, float] = field(default_factory=dict)


def docket_wait_times(
    names: Sequence[str],
    capacity: int,
    slot_duration: float = DEFAULT_SLOT_DURATION,
) -> list[DocketEntry]:
    """Wait time for every person on a docket, each ranked against all the others.

    One sort plus a vectorized binary search replaces len(names) linear passes.
    Entries come back in input order.
    """
    scheduler = RankScheduler(capacity, slot_duration)
    if len(names) == 0:
        return []

    # object dtype keeps Python's str ordering (numpy's unicode dtype drops trailing NULs)
    arr = np.array(list(names), dtype=object)
    ordered = np.sort(arr, kind="stable")
    # side="left" counts strictly smaller names, so duplicates never push each other back
    smaller = np.searchsorted(ordered, arr, side="left")

    entries = []
    for name, n_smaller in zip(names, smaller.tolist()):
        rank = n_smaller + 1
        round_id = scheduler.round_for(rank)
        entries.append(
            DocketEntry(
                name=name,
                rank=rank,
                round=round_id,
                wait_time=round_id * scheduler.slot_duration,
            )
        )
    return entries


def summarize(entries: list[DocketEntry], percentiles: Sequence[float] = (10, 50, 90)) -> DocketStats | None:
    """Summary of a docket's waits. `wait_percentiles` is keyed by the requested percentile."""
    if not entries:
        return None
    waits = np.array([e.wait_time for e in entries], dtype=float)
    percentiles = list(percentiles)
    vals = np.percentile(waits, percentiles) if percentiles else []
    stats = DocketStats(
        size=len(entries),
        rounds=max(e.round for e in entries),
        mean_wait=float(waits.mean()),
        wait_percentiles={float(p): float(v) for p, v in zip(percentiles, vals)},
        total_time=float(waits.max()),
    )
    pct_str = " ".join(f"p{p:g}={v:.1f}" for p, v in stats.wait_percentiles.items())
    logger.info(
        f"Docket of {stats.size}: {stats.rounds} rounds, "
        f"mean_wait={stats.mean_wait:.1f} {pct_str} total={stats.total_time:.1f}"
    )
    return stats
