# mentorium/analysis/__init__.py
"""Analysis functionality"""

from .analyzer import RosterAnalyzer, StatsCalculator, MetricsCalculator

__all__ = ['RosterAnalyzer', 'StatsCalculator', 'MetricsCalculator']
