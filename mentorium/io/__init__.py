# mentorium/io/__init__.py
"""Input/Output operations"""

from .loader import DataLoader
from .saver import ResultSaver
from .report import ReportGenerator

__all__ = ['DataLoader', 'ResultSaver', 'ReportGenerator']
