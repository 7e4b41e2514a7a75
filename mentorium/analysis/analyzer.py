# mentorium/analysis/analyzer.py
"""Data analysis functionality"""
from typing import Dict, Any, List

from mentorium.models import Student, MentorAssignment, AssignmentResult, MentorStats
from mentorium.utils import is_finite_number, round_score

SCORE_BANDS = ['0-9', '10-19', '20-29', '30-39', '40-49',
               '50-59', '60-69', '70-79', '80-89', '90-100']


def _score_band(cwa: float) -> str:
    # 100 falls into the top band
    return SCORE_BANDS[min(int(cwa // 10), len(SCORE_BANDS) - 1)]


class RosterAnalyzer:
    """Analyzes roster data before allocation"""

    @staticmethod
    def analyze(students: List[Student]) -> Dict[str, Any]:
        """Summarize the roster's score distribution"""
        scores = [s.cwa for s in students if is_finite_number(s.cwa)]

        analysis = {
            'total_students': len(students),
            'valid_scores': len(scores),
            'invalid_scores': len(students) - len(scores),
            'average_cwa': round_score(sum(scores) / len(scores)) if scores else 0,
            'highest_cwa': max(scores) if scores else 0,
            'lowest_cwa': min(scores) if scores else 0,
            'score_bands': {band: 0 for band in SCORE_BANDS},
        }

        for cwa in scores:
            if 0 <= cwa <= 100:
                analysis['score_bands'][_score_band(cwa)] += 1

        return analysis


class StatsCalculator:
    """Calculates per-mentor statistics from allocations"""

    @staticmethod
    def calculate(assignments: List[MentorAssignment]) -> List[MentorStats]:
        """One MentorStats per bucket, in bucket order"""
        return [StatsCalculator.for_assignment(a) for a in assignments]

    @staticmethod
    def for_assignment(assignment: MentorAssignment) -> MentorStats:
        scores = [s.cwa for s in assignment.students]
        count = len(scores)

        if not count:
            return MentorStats(assignment.mentor_index, 0, 0, 0, 0)

        return MentorStats(
            mentor_index=assignment.mentor_index,
            count=count,
            average_cwa=round_score(sum(scores) / count),
            highest_cwa=max(scores),
            lowest_cwa=min(scores),
        )


class MetricsCalculator:
    """Calculates overall balance metrics for an allocation"""

    @staticmethod
    def calculate(result: AssignmentResult,
                  stats: List[MentorStats] = None) -> Dict[str, Any]:
        """Calculate metrics across all mentors"""
        if stats is None:
            stats = StatsCalculator.calculate(result.assignments)

        sizes = [s.count for s in stats]
        averages = [s.average_cwa for s in stats if s.count > 0]
        total = result.total_students
        score_sum = sum(s.cwa for a in result.assignments for s in a.students)

        return {
            'num_mentors': result.num_mentors,
            'total_assigned': total,
            'passes': len(result.passes),
            'min_group_size': min(sizes) if sizes else 0,
            'max_group_size': max(sizes) if sizes else 0,
            'average_spread': round_score(max(averages) - min(averages)) if averages else 0,
            'overall_average_cwa': round_score(score_sum / total) if total > 0 else 0,
        }
