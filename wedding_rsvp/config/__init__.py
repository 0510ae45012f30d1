from .settings import settings, get_settings
from .table_names import TableNames

__all__ = [
    "settings",
    "get_settings",
    "TableNames",
]
