# mentorium/validation/record_validator.py
"""Roster record validation"""
import math
import re
from typing import List, Dict, Any, Iterable, Optional

from mentorium.config import REQUIRED_COLUMNS, CWA_MIN, CWA_MAX
from mentorium.models import Student
from mentorium.utils import round_score

STUDENT_ID_PATTERN = re.compile(r'[0-9]{8}')
INDEX_NO_PATTERN = re.compile(r'[0-9]{7}')
# Leading numeric prefix, the way a lenient float parser reads "65abc" as 65
_FLOAT_PREFIX = re.compile(
    r'^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))'
)

NO_SHEETS_ERROR = "No sheets found in file"
EMPTY_SHEET_ERROR = "Sheet is empty"


def parse_float(text: str) -> float:
    """Parse the leading number out of text; NaN when there is none"""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return math.nan
    token = match.group(1)
    if token.lstrip('+-') == 'Infinity':
        return -math.inf if token.startswith('-') else math.inf
    return float(token)


def _cell_text(row: Dict[str, Any], column: str) -> str:
    value = row.get(column, '')
    if value is None:
        return ''
    return str(value).strip()


class ParseResult:
    """Students parsed from a roster along with any validation errors"""

    def __init__(self, students: List[Student] = None, errors: List[str] = None):
        self.students: List[Student] = students if students is not None else []
        self.errors: List[str] = errors if errors is not None else []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'students': [s.to_dict() for s in self.students],
            'errors': list(self.errors),
        }

    def __repr__(self) -> str:
        return f"ParseResult({len(self.students)} students, {len(self.errors)} errors)"


class RecordValidator:
    """Validates raw roster rows and turns them into Student records.

    Errors accumulate rather than short-circuit: every row is converted to a
    Student even when it fails validation, and it is up to the caller to
    decide whether a non-empty error list blocks allocation.
    """

    def __init__(self, required_columns: Iterable[str] = REQUIRED_COLUMNS):
        self.required_columns = tuple(required_columns)

    def validate(self, rows: Optional[List[Dict[str, Any]]]) -> ParseResult:
        """Validate rows keyed by column header"""
        if rows is None:
            return ParseResult(errors=[NO_SHEETS_ERROR])

        rows = list(rows)
        if not rows:
            return ParseResult(errors=[EMPTY_SHEET_ERROR])

        errors = self.check_headers(rows[0])
        students = []

        for i, row in enumerate(rows):
            # header occupies line 1
            row_num = i + 2
            student, row_errors = self.validate_row(row, row_num)
            students.append(student)
            errors.extend(row_errors)

        return ParseResult(students, errors)

    def check_headers(self, first_row: Dict[str, Any]) -> List[str]:
        """Report required columns missing from the first record"""
        return [
            f"Missing required column: {column}"
            for column in self.required_columns
            if column not in first_row
        ]

    def validate_row(self, row: Dict[str, Any], row_num: int):
        """Coerce one row into a Student and collect its errors"""
        errors = []

        student_id = _cell_text(row, 'STUDENTID')
        index_no = _cell_text(row, 'INDEXNO')
        name = _cell_text(row, 'NAME')
        cwa = parse_float(_cell_text(row, 'CWA'))

        if not STUDENT_ID_PATTERN.fullmatch(student_id):
            errors.append(f"Row {row_num}: STUDENTID must be 8 digits")
        if not INDEX_NO_PATTERN.fullmatch(index_no):
            errors.append(f"Row {row_num}: INDEXNO must be 7 digits")
        if not name:
            errors.append(f"Row {row_num}: NAME is required")
        if not math.isfinite(cwa) or cwa < CWA_MIN or cwa > CWA_MAX:
            errors.append(f"Row {row_num}: CWA must be a number between 0 and 100")

        student = Student(student_id, index_no, name, round_score(cwa))
        return student, errors
