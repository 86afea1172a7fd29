# list_items_core/services/exceptions.py

class ListItemsError(Exception):
    """Base class for all list items errors."""
    pass

class SchemaInconsistencyError(ListItemsError):
    """Raised when the selection references an item or property type the schema lacks."""
    pass

class ExportDisabledError(ListItemsError):
    """Raised when an export is requested while no row is chosen."""
    pass

class SelectionSourceError(ListItemsError):
    """Raised when a selection source file is malformed."""
    pass
