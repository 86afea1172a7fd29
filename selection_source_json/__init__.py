from .plugin import JsonSelectionSourcePlugin

__all__ = ['JsonSelectionSourcePlugin']
