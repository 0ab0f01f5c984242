from __future__ import annotations

from .base import Ranker


class CountingRanker(Ranker):
    """Linear-time ranker: count the names that sort strictly before the target.

    Exact duplicates of the target are never counted, so the target always
    goes ahead of names identical to it.
    """

    def rank(self, target, cohort):
        smaller = 0
        for name in cohort:
            if name < target:
                smaller += 1
        return smaller + 1
