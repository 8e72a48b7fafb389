"""Stats Snapshot - shape of the collection statistics and the pure helpers that build it.

Invariants:
    - Every count/sum defaults to 0 and every group list to [] for an empty collection
    - by_genre/by_platform ordered by count desc; ties keep the order the store gave
    - by_year ordered by year desc (by key, not by count)
    - avg_score rounds halves up (74.5 -> 75) and is 0 when no game has a score
"""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GroupCount:
    key: object
    count: int

    def to_dict(self) -> dict:
        return {"key": self.key, "count": self.count}


@dataclass(frozen=True)
class StatsSnapshot:
    total: int = 0
    completed: int = 0
    favorite: int = 0
    total_play_hours: float = 0
    avg_score: int = 0
    by_genre: list[GroupCount] = field(default_factory=list)
    by_platform: list[GroupCount] = field(default_factory=list)
    by_year: list[GroupCount] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "completed": self.completed,
            "favorite": self.favorite,
            "total_play_hours": self.total_play_hours,
            "avg_score": self.avg_score,
            "by_genre": [g.to_dict() for g in self.by_genre],
            "by_platform": [g.to_dict() for g in self.by_platform],
            "by_year": [g.to_dict() for g in self.by_year],
        }


def rank_by_count(groups: list[GroupCount]) -> list[GroupCount]:
    """Sort by count descending; stable, so ties keep their incoming order."""
    return sorted(groups, key=lambda g: g.count, reverse=True)


def rank_by_key(groups: list[GroupCount]) -> list[GroupCount]:
    """Sort by key descending."""
    return sorted(groups, key=lambda g: g.key, reverse=True)


def round_score(average: float | None) -> int:
    if average is None:
        return 0
    return int(math.floor(average + 0.5))
