"""
Contracts — abstract base classes for the value formatter and selection sources.
"""
from .base import ChartSnapshot, SelectionSourcePlugin, ValueFormatter

__all__ = ['ChartSnapshot', 'SelectionSourcePlugin', 'ValueFormatter']
