from .navigation_config import NavigationConfig
from .pagination_finder import PaginationFinder, PaginationLinks
from .tree_walker import child_element, find_first, follow_path, iter_elements, own_text

__all__ = [
    "NavigationConfig",
    "PaginationFinder",
    "PaginationLinks",
    "iter_elements",
    "find_first",
    "follow_path",
    "child_element",
    "own_text",
]
