# mentorium/models/__init__.py
"""Data models for students and mentor assignments"""

from .student import Student
from .assignment import MentorAssignment, AssignmentResult, FORWARD, BACKWARD
from .stats import MentorStats

__all__ = ['Student', 'MentorAssignment', 'AssignmentResult', 'MentorStats', 'FORWARD', 'BACKWARD']
