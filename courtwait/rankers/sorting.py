from __future__ import annotations

from .base import Ranker


class SortingRanker(Ranker):
    """Reference ranker: sort everyone and look the target up.

    O(n log n). Kept to cross-check CountingRanker, not for production use.
    """

    def rank(self, target, cohort):
        names = [target, *cohort]
        names.sort()
        # index() finds the first equal name, which keeps ties in the target's favour
        return names.index(target) + 1
