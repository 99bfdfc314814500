# extractors/navigation/tree_walker.py
"""
Recursive-descent traversal of parsed feed documents.

BeautifulSoup exposes a parsed document as a tagged union: leaves are
``NavigableString`` (text) and elements are ``Tag`` (name, attrs, children).
Every "find a node of unknown position" lookup in the feed parsers goes
through the visitors defined here rather than ad-hoc attribute probing.
"""

from typing import Callable, Iterator, Optional, Union

from bs4 import Comment, NavigableString, Tag

Node = Union[Tag, NavigableString]


def is_leaf(node) -> bool:
    """True for text leaves, excluding comments."""
    return isinstance(node, NavigableString) and not isinstance(node, Comment)


def is_element(node) -> bool:
    return isinstance(node, Tag)


def iter_elements(node: Optional[Node]) -> Iterator[Tag]:
    """
    Yield every element below (and including) ``node`` depth-first, in
    document order.

    Args:
        node: Root of the subtree to visit

    Yields:
        Each Tag in pre-order
    """
    if not is_element(node):
        return

    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        children = [child for child in current.children if is_element(child)]
        stack.extend(reversed(children))


def find_first(node: Optional[Node], predicate: Callable[[Tag], bool]) -> Optional[Tag]:
    """
    Return the first element, depth-first, satisfying ``predicate``.
    """
    for element in iter_elements(node):
        if predicate(element):
            return element
    return None


def own_text(element: Optional[Node]) -> str:
    """
    Text carried directly by an element, ignoring nested elements.

    Args:
        element: Tag or text leaf

    Returns:
        Trimmed direct text, empty string for anything else
    """
    if is_leaf(element):
        return str(element).strip()
    if not is_element(element):
        return ""
    return "".join(str(child) for child in element.children if is_leaf(child)).strip()


def child_element(element: Optional[Tag], name: str) -> Optional[Tag]:
    """
    Direct child element with the given tag name.
    """
    if not is_element(element):
        return None
    return element.find(name, recursive=False)


def follow_path(root: Optional[Node], *names: str) -> Optional[Tag]:
    """
    Walk a fixed chain of direct children, e.g. ("html", "body", "table").

    Returns:
        The element at the end of the chain or None if any step is missing
    """
    current = root
    for name in names:
        current = child_element(current, name)
        if current is None:
            return None
    return current
