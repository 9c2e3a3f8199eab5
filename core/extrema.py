import math


class ExtremaTracker:
    """
    Running (min, max) accumulator for plot scaling.

    Non-finite readings are not bounds and are skipped. Until a finite
    value has been seen, minimum/maximum/bounds are None.
    """

    def __init__(self, values=None):
        self.minimum = None
        self.maximum = None
        self.count = 0
        if values is not None:
            self.extend(values)

    def update(self, value):
        value = float(value)
        if not math.isfinite(value):
            return
        if self.count == 0:
            self.minimum = value
            self.maximum = value
        else:
            self.minimum = min(self.minimum, value)
            self.maximum = max(self.maximum, value)
        self.count += 1

    def extend(self, values):
        for v in values:
            self.update(v)

    @property
    def bounds(self):
        """(min, max), or None when no finite sample was offered."""
        if self.count == 0:
            return None
        return self.minimum, self.maximum

    def __repr__(self):
        return f"ExtremaTracker(bounds={self.bounds}, count={self.count})"
