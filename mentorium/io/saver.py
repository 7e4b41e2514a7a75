# mentorium/io/saver.py
"""Data saving functionality"""
import json
from typing import Dict, Any, List

import pandas as pd

from mentorium.config import DATA_DIR, REQUIRED_COLUMNS, TEMPLATE_SHEET
from mentorium.models import Student, AssignmentResult, MentorStats
from mentorium.analysis import StatsCalculator
from mentorium.utils import ensure_directory

SUMMARY_COLUMNS = ['Mentor', 'Students', 'Average CWA', 'Highest CWA', 'Lowest CWA']
DETAILED_COLUMNS = ['Mentor', 'Position'] + list(REQUIRED_COLUMNS)


def build_summary_frame(stats: List[MentorStats]) -> pd.DataFrame:
    """Summary table, one row per mentor, numbered from 1"""
    rows = [
        [s.mentor_index + 1, s.count, s.average_cwa, s.highest_cwa, s.lowest_cwa]
        for s in stats
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build_detailed_frame(result: AssignmentResult) -> pd.DataFrame:
    """Every assigned student with their mentor and position in the bucket"""
    rows = []
    for assignment in result.assignments:
        for position, student in enumerate(assignment.students, start=1):
            row = student.to_row()
            rows.append([assignment.display_number, position] + [row[c] for c in REQUIRED_COLUMNS])
    return pd.DataFrame(rows, columns=DETAILED_COLUMNS)


def build_roster_frame(students: List[Student]) -> pd.DataFrame:
    """Students keyed by the upload columns"""
    return pd.DataFrame([s.to_row() for s in students], columns=list(REQUIRED_COLUMNS))


class ResultSaver:
    """Handles saving of allocation results"""

    def __init__(self, output_dir: str = DATA_DIR):
        self.output_dir = output_dir
        ensure_directory(self.output_dir)

    def save_final_results(self, complete_output: Dict[str, Any],
                           output_file: str) -> None:
        """Save final allocation results to file"""
        with open(output_file, 'w') as f:
            json.dump(complete_output, f, indent=2)
        print(f"\n💾 Final results saved to {output_file}")

    @staticmethod
    def export_workbook(result: AssignmentResult, target,
                        stats: List[MentorStats] = None):
        """Write summary, detailed and per-mentor sheets.

        ``target`` is a path or a binary buffer.
        """
        if stats is None:
            stats = StatsCalculator.calculate(result.assignments)

        with pd.ExcelWriter(target, engine='openpyxl') as writer:
            build_summary_frame(stats).to_excel(writer, sheet_name='Summary', index=False)
            build_detailed_frame(result).to_excel(writer, sheet_name='Detailed', index=False)
            for assignment in result.assignments:
                sheet = f'Mentor {assignment.display_number}'
                build_roster_frame(assignment.students).to_excel(writer, sheet_name=sheet, index=False)

        return target

    @staticmethod
    def write_template(target, students: List[Student] = None):
        """Write an upload template, prefilled with students when given"""
        frame = build_roster_frame(students or [])
        with pd.ExcelWriter(target, engine='openpyxl') as writer:
            frame.to_excel(writer, sheet_name=TEMPLATE_SHEET, index=False)
        return target
