"""Arc-length reparameterisation of evaluable curves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from . import coordinate
from .evaluate import Evaluable


@dataclass
class ArcLengthParameterization:
    """A table of cumulative lengths along a curve.

    It maps a fraction ``u`` of the total arc length to the curve parameter
    ``t`` at which that length is reached, so 0.5 is halfway along the curve.
    """

    arclens: List[float] = field(default_factory=list)

    @classmethod
    def from_evaluable(cls, evaluable: Evaluable, accuracy: int) -> "ArcLengthParameterization":
        """Measure ``evaluable`` with ``accuracy`` straight segments."""
        lengths = [0.0]
        prev = evaluable.at(0.0)
        total = 0.0
        for i in range(1, accuracy + 1):
            point = evaluable.at(i / accuracy)
            total += coordinate.distance(point, prev)
            lengths.append(total)
            prev = point
        return cls(lengths)

    def total_arclen(self) -> float:
        return self.arclens[-1]

    def _search_for_index(self, target: float) -> int:
        """Index of the greatest table entry below ``target`` (or equal to it)."""
        left = 0
        right = len(self.arclens) - 1
        while left < right:
            middle = (left + right) // 2
            if left == middle:
                return middle
            if right == middle:
                return left
            if self.arclens[middle] == target:
                return middle
            if self.arclens[middle] < target:
                left = middle
            else:
                right = middle
        raise ValueError("couldn't find the target arc length")

    def arclen_from_t(self, t: float) -> float:
        last = len(self.arclens) - 1
        fractional_index = t * last
        index = max(0, int(fractional_index))
        fraction = fractional_index - index
        len_start = self.arclens[index]
        len_end = self.arclens[index + 1] if index != last else 1.0
        segment_len = len_start - len_end
        return len_start + segment_len * fraction

    def parameterize(self, u: float) -> float:
        """Curve parameter at which the fraction ``u`` of the total length is reached."""
        last = len(self.arclens) - 1
        target = u * self.arclens[last]
        index = self._search_for_index(target)
        len_start = self.arclens[index]
        if target == len_start:
            return index / last
        segment_len = self.arclens[index + 1] - len_start
        if segment_len == 0:
            return index / last
        return (index + (target - len_start) / segment_len) / last