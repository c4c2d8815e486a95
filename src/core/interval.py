# core/interval.py
import math

class Interval:
    """
    A closed range of ray parameters [min, max].

    `contains` is inclusive at both ends, `surrounds` is strict.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        # The default interval is empty.
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def with_max(self, maximum: float) -> "Interval":
        """Same lower bound, narrowed (or widened) upper bound."""
        return Interval(self.min, maximum)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
