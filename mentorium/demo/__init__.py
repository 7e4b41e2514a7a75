# mentorium/demo/__init__.py
"""Demo roster generation"""

from .generator import generate_demo_students

__all__ = ['generate_demo_students']
