# mentorium/validation/__init__.py
"""Input record validation"""

from .record_validator import RecordValidator, ParseResult, parse_float

__all__ = ['RecordValidator', 'ParseResult', 'parse_float']
