"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Item:
    """Single line item on a receipt"""

    short_description: str = ""
    price: str = ""  # decimal string, e.g. "6.49"


@dataclass(frozen=True)
class Receipt:
    """Submitted purchase receipt"""

    retailer: str = ""
    purchase_date: str = ""  # YYYY-MM-DD
    purchase_time: str = ""  # HH:MM, 24h
    total: str = ""
    items: Tuple[Item, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ScoreRecord:
    """Points awarded to a stored receipt"""

    id: str
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points contributed by each scoring rule"""

    retailer_points: int
    round_total_points: int
    quarter_total_points: int
    item_pair_points: int
    description_points: int
    odd_day_points: int
    afternoon_points: int

    @property
    def total(self) -> int:
        return (
            self.retailer_points
            + self.round_total_points
            + self.quarter_total_points
            + self.item_pair_points
            + self.description_points
            + self.odd_day_points
            + self.afternoon_points
        )
