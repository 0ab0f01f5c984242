from __future__ import annotations

from .errors import MalformedCohortError

DELIMITER = " "


def parse_cohort(others: str) -> list[str]:
    """Split a single-space-delimited name list into a cohort.

    An empty string is an empty cohort. Tabs and newlines are not delimiters.
    """
    if others == "":
        return []
    names = others.split(DELIMITER)
    for i, name in enumerate(names):
        if not name:
            raise MalformedCohortError(others, i)
    return names
