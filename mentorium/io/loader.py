# mentorium/io/loader.py
"""Data loading functionality"""
import json
import os
from typing import List, Dict, Any, Optional

import pandas as pd

from mentorium.exceptions import SpreadsheetReadError
from mentorium.validation import RecordValidator, ParseResult

SPREADSHEET_EXTENSIONS = ('.xlsx', '.xls')
ROSTER_EXTENSIONS = SPREADSHEET_EXTENSIONS + ('.csv', '.json')


class DataLoader:
    """Handles loading of roster data from spreadsheets"""

    @staticmethod
    def load_json(filepath) -> List[dict]:
        """Load JSON file"""
        if hasattr(filepath, 'read'):
            return json.load(filepath)
        with open(filepath, 'r') as f:
            return json.load(f)

    @staticmethod
    def read_rows(source, filename: str = None) -> Optional[List[Dict[str, Any]]]:
        """Read the first sheet of a workbook as header-keyed rows.

        ``source`` is a path or a binary file object; ``filename`` picks the
        format when the source has no name of its own. Returns None when the
        workbook has no sheets. A JSON roster must be a list of objects.
        """
        name = filename or getattr(source, 'name', None) or str(source)
        ext = os.path.splitext(name)[1].lower()

        try:
            if ext == '.json':
                rows = DataLoader.load_json(source)
            elif ext == '.csv':
                sheets = {'Sheet1': pd.read_csv(source, dtype=object, keep_default_na=False)}
            else:
                sheets = pd.read_excel(source, sheet_name=None, dtype=object, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return []
        except ImportError:
            # a missing reader engine is an install problem, not a bad file
            raise
        except Exception as e:
            raise SpreadsheetReadError(name, str(e)) from e

        if ext == '.json':
            if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
                raise SpreadsheetReadError(name, 'JSON roster must be a list of objects')
            return rows

        if not sheets:
            return None

        first = next(iter(sheets.values()))
        first = first.fillna('')
        return first.to_dict(orient='records')

    @staticmethod
    def load_students(source, filename: str = None) -> ParseResult:
        """Load and validate a roster file"""
        rows = DataLoader.read_rows(source, filename)
        result = RecordValidator().validate(rows)

        print(f"Loaded {len(result.students)} students ({len(result.errors)} issues)")

        return result
