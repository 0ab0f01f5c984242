from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable

from .cohort import parse_cohort
from .errors import InvalidCapacityError, InvalidSlotDurationError
from .rankers import CountingRanker, Ranker, build_ranker

logger = logging.getLogger(__name__)

DEFAULT_SLOT_DURATION = 30


def validate_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral) or capacity < 1:
        raise InvalidCapacityError(capacity)
    return int(capacity)


def validate_slot_duration(slot_duration):
    if (
        isinstance(slot_duration, bool)
        or not isinstance(slot_duration, numbers.Real)
        or not math.isfinite(slot_duration)
        or slot_duration <= 0
    ):
        raise InvalidSlotDurationError(slot_duration)
    return slot_duration


class RankScheduler:
    """Maps a name's alphabetical rank to the time its hearing ends.

    `capacity` judges hear one person each per round, and a round lasts
    `slot_duration`. Rank r finishes at the end of round ceil(r / capacity).
    """

    def __init__(
        self,
        capacity: int,
        slot_duration: float = DEFAULT_SLOT_DURATION,
        ranker: Ranker | None = None,
    ):
        self.capacity = validate_capacity(capacity)
        self.slot_duration = validate_slot_duration(slot_duration)
        self.ranker = ranker if ranker is not None else CountingRanker()

    def rank(self, target: str, cohort: str | Iterable[str]) -> int:
        if isinstance(cohort, str):
            cohort = parse_cohort(cohort)
        return self.ranker.rank(target, cohort)

    def round_for(self, rank: int) -> int:
        # integer ceiling division
        return -(-rank // self.capacity)

    def wait_time(self, target: str, cohort: str | Iterable[str]):
        rank = self.rank(target, cohort)
        round_id = self.round_for(rank)
        result = round_id * self.slot_duration
        logger.debug(
            f"{target!r}: rank={rank} round={round_id} "
            f"capacity={self.capacity} wait={result}"
        )
        return result


def compute_wait_time(
    target: str,
    capacity: int,
    cohort: str | Iterable[str],
    slot_duration: float = DEFAULT_SLOT_DURATION,
):
    return RankScheduler(capacity, slot_duration).wait_time(target, cohort)


def build_scheduler(cfg: dict) -> RankScheduler:
    sched_cfg = cfg.get("schedule", {})
    return RankScheduler(
        capacity=sched_cfg.get("capacity"),
        slot_duration=sched_cfg.get("slot_duration", DEFAULT_SLOT_DURATION),
        ranker=build_ranker(cfg),
    )
