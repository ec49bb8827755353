"""Theme services."""

from installer.services.theme.renderer import TemplateRenderer
from installer.services.theme.tablesort import TableSort, get_order, get_sort

__all__ = [
    "TemplateRenderer",
    "TableSort",
    "get_order",
    "get_sort",
]
