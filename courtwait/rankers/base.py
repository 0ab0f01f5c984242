from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Ranker(ABC):
    @abstractmethod
    def rank(self, target: str, cohort: Iterable[str]) -> int:
        """Return the 1-indexed position of target among {target} and cohort."""
        ...
