# mentorium/allocation/allocator.py
"""Main allocation engine"""
import math
from typing import Dict, Any, List

from mentorium.exceptions import InvalidMentorCountError
from mentorium.models import Student, MentorAssignment, AssignmentResult, FORWARD, BACKWARD
from mentorium.analysis import StatsCalculator, MetricsCalculator
from mentorium.utils import is_finite_number


def _validate_mentor_count(num_mentors) -> int:
    if isinstance(num_mentors, bool):
        raise InvalidMentorCountError(num_mentors)
    if isinstance(num_mentors, float) and math.isfinite(num_mentors) and num_mentors.is_integer():
        num_mentors = int(num_mentors)
    if not isinstance(num_mentors, int) or num_mentors <= 0:
        raise InvalidMentorCountError(num_mentors)
    return num_mentors


class AllocationEngine:
    """Bidirectional score-based round robin.

    Students are ranked by CWA (highest first) and dealt out to mentors in
    serpentine order: mentors 0..n-1 on the first sweep, n-1..0 on the
    second, and so on. Mentor 0 takes the top score of the first sweep but
    the lowest score of the second, so no mentor is systematically favoured.
    """

    @staticmethod
    def allocate(students: List[Student], num_mentors: int) -> AssignmentResult:
        """Distribute students across num_mentors buckets"""
        num_mentors = _validate_mentor_count(num_mentors)

        ranked = AllocationEngine.rank(students)
        assignments = [MentorAssignment(i) for i in range(num_mentors)]

        passes = []
        direction = FORWARD
        i = 0
        while i < len(ranked):
            passes.append(direction)
            if direction == FORWARD:
                order = range(num_mentors)
                direction = BACKWARD
            else:
                order = range(num_mentors - 1, -1, -1)
                direction = FORWARD

            for m in order:
                if i >= len(ranked):
                    break
                assignments[m].students.append(ranked[i])
                i += 1

        return AssignmentResult(assignments, passes)

    @staticmethod
    def rank(students: List[Student]) -> List[Student]:
        """Drop non-finite scores and sort by CWA descending, keeping ties in input order"""
        cleaned = [s for s in students if is_finite_number(s.cwa)]
        return sorted(cleaned, key=lambda s: s.cwa, reverse=True)

    @staticmethod
    def build_complete_output(result: AssignmentResult) -> Dict[str, Any]:
        """Build complete output with all metadata"""
        stats = StatsCalculator.calculate(result.assignments)
        metrics = MetricsCalculator.calculate(result, stats)

        mentors = []
        for assignment, mentor_stats in zip(result.assignments, stats):
            mentors.append({
                'mentor_index': assignment.mentor_index,
                'mentor_number': assignment.display_number,
                'stats': mentor_stats.to_dict(),
                'students': [s.to_dict() for s in assignment.students],
            })

        return {
            'mentors': mentors,
            'passes': list(result.passes),
            'metrics': metrics,
            'summary': {
                'total_mentors': result.num_mentors,
                'total_students': result.total_students,
                'total_passes': len(result.passes),
            },
        }
