from .base import Ranker
from .counting import CountingRanker
from .sorting import SortingRanker

RANKERS = {
    "count": CountingRanker,
    "sort": SortingRanker,
}


def build_ranker(cfg: dict) -> Ranker:
    rtype = cfg.get("schedule", {}).get("ranker", "count")
    if rtype not in RANKERS:
        raise ValueError(f"Ranker '{rtype}' not found. Available: {list(RANKERS)}")
    return RANKERS[rtype]()
