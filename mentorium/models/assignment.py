# mentorium/models/assignment.py
"""Mentor assignment models"""
from typing import List, Dict, Any

from .student import Student

FORWARD = 'forward'
BACKWARD = 'backward'


class MentorAssignment:
    """One mentor's bucket of students, in assignment order"""

    def __init__(self, mentor_index: int, students: List[Student] = None):
        self.mentor_index: int = mentor_index
        self.students: List[Student] = students if students is not None else []

    @property
    def display_number(self) -> int:
        """1-based mentor number used in exports"""
        return self.mentor_index + 1

    def __len__(self) -> int:
        return len(self.students)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'mentor_index': self.mentor_index,
            'students': [s.to_dict() for s in self.students],
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, MentorAssignment):
            return NotImplemented
        return self.mentor_index == other.mentor_index and self.students == other.students

    def __repr__(self) -> str:
        return f"MentorAssignment({self.mentor_index}, {len(self.students)} students)"


class AssignmentResult:
    """Outcome of one allocation run"""

    def __init__(self, assignments: List[MentorAssignment], passes: List[str]):
        self.assignments = assignments
        self.passes = passes

    @property
    def num_mentors(self) -> int:
        return len(self.assignments)

    @property
    def total_students(self) -> int:
        return sum(len(a.students) for a in self.assignments)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'assignments': [a.to_dict() for a in self.assignments],
            'passes': list(self.passes),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, AssignmentResult):
            return NotImplemented
        return self.assignments == other.assignments and self.passes == other.passes

    def __repr__(self) -> str:
        return f"AssignmentResult({self.num_mentors} mentors, {self.total_students} students, {len(self.passes)} passes)"
