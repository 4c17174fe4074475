"""
Relationship tiers.

Maps an affinity value to a named tier. Each tier covers values from its
lower bound up to the next tier's lower bound.
"""

from bisect import bisect_right
from typing import Iterable, List, Optional, Tuple, Union

from world.relations.core import UNKNOWN_TIER, TierRange
from world.relations.validation import validate_tier_ranges


TierSpec = Union[TierRange, Tuple[int, str]]


class TierClassifier:
    """
    Classify affinity values into tiers.

    Ranges are sorted by lower bound on construction, so authoring order
    does not matter. With no ranges every value is unknown.
    """

    def __init__(
        self,
        tiers: Optional[Iterable[TierSpec]] = None,
        unknown_label: str = UNKNOWN_TIER,
    ):
        ranges = [t if isinstance(t, TierRange) else TierRange(*t) for t in (tiers or ())]
        self._tiers: List[TierRange] = validate_tier_ranges(ranges)
        self._bounds: List[int] = [t.lower_bound for t in self._tiers]
        self.unknown_label = unknown_label

    @property
    def configured(self) -> bool:
        return bool(self._tiers)

    @property
    def labels(self) -> List[str]:
        """Tier labels, weakest first."""
        return [t.label for t in self._tiers]

    @property
    def tiers(self) -> List[TierRange]:
        return list(self._tiers)

    def classify(self, value: int) -> str:
        """
        Label of the tier with the greatest lower bound <= value.

        Args:
            value: Affinity value

        Returns:
            Tier label, or the unknown label if nothing qualifies
        """
        position = bisect_right(self._bounds, value)
        if position == 0:
            return self.unknown_label
        return self._tiers[position - 1].label

    def tier_index(self, label: str) -> int:
        """
        Ordinal position of a tier (higher is a stronger relationship).

        Returns -1 for labels not in the config, including the unknown label.
        """
        for index, tier in enumerate(self._tiers):
            if tier.label == label:
                return index
        return -1

    def meets_tier(self, value: int, required_label: str) -> bool:
        """True if value falls in required_label's tier or a stronger one."""
        current = self.tier_index(self.classify(value))
        required = self.tier_index(required_label)
        if current < 0 or required < 0:
            return False
        return current >= required

    def __repr__(self) -> str:
        ranges = ", ".join(f"{t.lower_bound}:{t.label}" for t in self._tiers)
        return f"TierClassifier([{ranges}])"
