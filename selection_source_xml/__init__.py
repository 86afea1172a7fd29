from .plugin import XmlSelectionSourcePlugin

__all__ = ['XmlSelectionSourcePlugin']
