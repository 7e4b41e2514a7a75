# mentorium/io/report.py
"""Printable PDF report"""
from datetime import datetime
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mentorium.config import REPORT_TITLE, REPORT_SUBTITLE
from mentorium.models import AssignmentResult, MentorStats
from mentorium.analysis import StatsCalculator

HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("ALIGN", (0, 0), (-1, -1), "LEFT"),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
]


class ReportGenerator:
    """Renders an allocation as a paginated PDF document"""

    def __init__(self, title: str = REPORT_TITLE):
        self.title = title
        self.styles = getSampleStyleSheet()

    def generate(self, result: AssignmentResult, target,
                 stats: List[MentorStats] = None, generated_at: datetime = None):
        """Build the report into a path or binary buffer"""
        if stats is None:
            stats = StatsCalculator.calculate(result.assignments)
        if generated_at is None:
            generated_at = datetime.now()

        doc = SimpleDocTemplate(target, pagesize=A4, rightMargin=36, leftMargin=36,
                                topMargin=36, bottomMargin=36, title=self.title)
        story = [
            Paragraph(self.title, self.styles["Title"]),
            Paragraph(REPORT_SUBTITLE, self.styles["Italic"]),
            Paragraph(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M')}", self.styles["Normal"]),
            Spacer(1, 12),
            Paragraph("Summary", self.styles["Heading2"]),
            self._table(self.summary_rows(stats)),
        ]

        for assignment, mentor_stats in zip(result.assignments, stats):
            story.append(Spacer(1, 12))
            story.append(Paragraph(
                f"Mentor {assignment.display_number} "
                f"({mentor_stats.count} mentees, avg {mentor_stats.average_cwa})",
                self.styles["Heading3"],
            ))
            rows = [["#", "Student ID", "Index No", "Name", "CWA"]]
            for position, student in enumerate(assignment.students, start=1):
                rows.append([position, student.student_id, student.index_no, student.name, student.cwa])
            story.append(self._table(rows))

        doc.build(story)
        return target

    @staticmethod
    def summary_rows(stats: List[MentorStats]) -> List[list]:
        rows = [["Mentor", "Students", "Average CWA", "Highest CWA", "Lowest CWA"]]
        for s in stats:
            rows.append([s.mentor_index + 1, s.count, s.average_cwa, s.highest_cwa, s.lowest_cwa])
        return rows

    @staticmethod
    def _table(rows: List[list]) -> Table:
        table = Table(rows, repeatRows=1)
        table.setStyle(TableStyle(HEADER_STYLE))
        return table
