import logging
from typing import Iterable, Iterator, Optional

from ..core.course import Course, normalize_course_number
from .exceptions import DuplicateKeyError
from .index_node import IndexNode

logger = logging.getLogger(__name__)


class OrderedIndex:
    """
    Unbalanced binary search tree of courses keyed by course number.

    This class provides:
    - Insert with duplicate rejection
    - Exact, case-insensitive lookup
    - Lazy in-order (sorted) traversal

    Nodes live in an arena list and refer to their children by position,
    so insert, search and traversal are loops rather than recursion.
    Keys compare as plain strings. No rebalancing is done: inserting
    courses already in sorted order produces a tree of height n.

    The index is populated once and then read; inserting while a
    traversal is in flight makes that traversal fail on its next step.
    """

    def __init__(self):
        self._nodes: list[IndexNode] = []
        self._root: Optional[int] = None
        self._modification_count = 0

    @property
    def root_id(self) -> Optional[int]:
        """Arena position of the root node, or None for an empty index."""
        return self._root

    @property
    def modification_count(self) -> int:
        """Number of structural changes since creation."""
        return self._modification_count

    def get_node(self, node_id: int) -> IndexNode:
        return self._nodes[node_id]

    def insert(self, course: Course) -> None:
        """
        Insert a course, descending lower for smaller keys and upper otherwise.

        Raises:
            DuplicateKeyError: If a course with the same number is already stored.
                The index is left unchanged.
        """
        key = course.course_number
        new_id = len(self._nodes)

        if self._root is None:
            self._nodes.append(IndexNode(course))
            self._root = new_id
            self._modification_count += 1
            return

        current = self._nodes[self._root]
        while True:
            if key == current.key:
                raise DuplicateKeyError(key)

            if key < current.key:
                if current.lower is None:
                    current.lower = new_id
                    break
                current = self._nodes[current.lower]
            else:
                if current.upper is None:
                    current.upper = new_id
                    break
                current = self._nodes[current.upper]

        self._nodes.append(IndexNode(course))
        self._modification_count += 1

    def search(self, course_number: str) -> Optional[Course]:
        """
        Find a course by number, ignoring case.

        Returns:
            The stored course, or None if no course has that number
        """
        key = normalize_course_number(course_number)
        node_id = self._root

        while node_id is not None:
            node = self._nodes[node_id]
            if key == node.key:
                return node.course
            node_id = node.lower if key < node.key else node.upper

        return None

    def traverse_sorted(self) -> Iterator[Course]:
        """
        Yield every course in ascending course-number order.

        Each call starts a new traversal, so the result can be consumed
        any number of times on an unchanged index.
        """
        from ..query.iterator import InOrderScan

        scan = InOrderScan(self)
        scan.open()
        try:
            while scan.has_next():
                yield scan.next()
        finally:
            scan.close()

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0

        tallest = 0
        pending = [(self._root, 1)]
        while pending:
            node_id, depth = pending.pop()
            tallest = max(tallest, depth)
            node = self._nodes[node_id]
            for child in (node.lower, node.upper):
                if child is not None:
                    pending.append((child, depth + 1))

        return tallest

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        """Release every node and stored course."""
        self._nodes.clear()
        self._root = None
        self._modification_count += 1

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, course_number: object) -> bool:
        if not isinstance(course_number, str):
            return False
        return self.search(course_number) is not None

    def __iter__(self) -> Iterator[Course]:
        return self.traverse_sorted()

    def __repr__(self) -> str:
        return f"OrderedIndex(size={len(self)}, height={self.height()})"


def populate(index: OrderedIndex, courses: Iterable[Course]) -> int:
    """
    Insert validated courses into an index in the given order.

    Returns:
        Number of courses inserted
    """
    count = 0
    for course in courses:
        index.insert(course)
        count += 1

    logger.info("Successfully loaded %d courses into the index", count)
    return count
