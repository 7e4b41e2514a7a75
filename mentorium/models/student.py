# mentorium/models/student.py
"""Student model"""
from typing import Dict, Any


class Student:
    """Represents one learner on the roster.

    Records are read-only once built; a score edit produces a new record
    through ``with_cwa``.
    """

    __slots__ = ('_student_id', '_index_no', '_name', '_cwa')

    def __init__(self, student_id: str, index_no: str, name: str, cwa: float):
        self._student_id = student_id
        self._index_no = index_no
        self._name = name
        self._cwa = cwa

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Student':
        """Build a student from a dictionary"""
        return cls(
            student_id=data['student_id'],
            index_no=data['index_no'],
            name=data.get('name', ''),
            cwa=float(data['cwa']),
        )

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def index_no(self) -> str:
        return self._index_no

    @property
    def name(self) -> str:
        return self._name

    @property
    def cwa(self) -> float:
        return self._cwa

    def with_cwa(self, value) -> 'Student':
        """Return a copy with an edited score, clamped into [0, 100]"""
        from mentorium.utils import clamp_cwa
        return Student(self._student_id, self._index_no, self._name, clamp_cwa(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'student_id': self._student_id,
            'index_no': self._index_no,
            'name': self._name,
            'cwa': self._cwa,
        }

    def to_row(self) -> Dict[str, Any]:
        """Convert to a spreadsheet row keyed by the upload columns"""
        return {
            'STUDENTID': self._student_id,
            'INDEXNO': self._index_no,
            'NAME': self._name,
            'CWA': self._cwa,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self._student_id, self._index_no, self._name, self._cwa))

    def __repr__(self) -> str:
        return f"Student({self._student_id}, {self._name}, {self._cwa})"
