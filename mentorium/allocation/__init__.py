# mentorium/allocation/__init__.py
"""Allocation logic"""

from .allocator import AllocationEngine

__all__ = ['AllocationEngine']
