# mentorium/models/stats.py
"""Per-mentor statistics"""
from typing import Dict, Any


class MentorStats:
    """Summary metrics for one mentor's bucket"""

    def __init__(self, mentor_index: int, count: int, average_cwa: float,
                 highest_cwa: float, lowest_cwa: float):
        self.mentor_index = mentor_index
        self.count = count
        self.average_cwa = average_cwa
        self.highest_cwa = highest_cwa
        self.lowest_cwa = lowest_cwa

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'mentor_index': self.mentor_index,
            'count': self.count,
            'average_cwa': self.average_cwa,
            'highest_cwa': self.highest_cwa,
            'lowest_cwa': self.lowest_cwa,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, MentorStats):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"MentorStats({self.mentor_index}, count={self.count}, "
                f"avg={self.average_cwa}, hi={self.highest_cwa}, lo={self.lowest_cwa})")
