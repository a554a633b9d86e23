from typing import TYPE_CHECKING, Optional

from .abstract_iterator import AbstractCourseIterator
from ...core.course import Course

if TYPE_CHECKING:
    from ...index.ordered_index import OrderedIndex


class InOrderScan(AbstractCourseIterator):
    """
    In-order scan over an OrderedIndex.

    Produces courses in ascending course-number order: lower subtree,
    then the node, then the upper subtree. An explicit stack of arena
    positions replaces recursion, so a degenerate (list-shaped) tree is
    scanned without deep call stacks.

    The scan is invalidated if the index changes after open() or
    rewind(); the next read raises RuntimeError.
    """

    def __init__(self, index: 'OrderedIndex'):
        super().__init__()
        self.index = index
        self._stack: list[int] = []
        self._expected_modifications = index.modification_count

    def open(self) -> None:
        super().open()
        self._reset()

    def close(self) -> None:
        self._stack = []
        super().close()

    def rewind(self) -> None:
        """Restart the scan from the smallest course number."""
        self._next_course = None
        self._reset()

    def read_next(self) -> Optional[Course]:
        if self.index.modification_count != self._expected_modifications:
            raise RuntimeError("Index was modified during traversal")

        if not self._stack:
            return None

        node = self.index.get_node(self._stack.pop())
        self._push_lower_spine(node.upper)
        return node.course

    def _reset(self) -> None:
        self._stack = []
        self._expected_modifications = self.index.modification_count
        self._push_lower_spine(self.index.root_id)

    def _push_lower_spine(self, node_id: Optional[int]) -> None:
        while node_id is not None:
            self._stack.append(node_id)
            node_id = self.index.get_node(node_id).lower
