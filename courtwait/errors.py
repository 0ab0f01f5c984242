from __future__ import annotations


class InvalidCapacityError(ValueError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class InvalidSlotDurationError(ValueError):
    def __init__(self, slot_duration):
        self.slot_duration = slot_duration
        super().__init__(f"slot_duration must be a positive number, got {slot_duration!r}")


class MalformedCohortError(ValueError):
    """Raised when a space-delimited name list contains an empty token."""

    def __init__(self, others: str, position: int):
        self.others = others
        self.position = position
        super().__init__(f"empty name at token {position} in {others!r}")
