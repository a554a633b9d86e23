from typing import Optional

from ..core.course import Course


class IndexNode:
    """
    A single node of the ordered index.

    Child links are positions in the owning index's node arena, not
    object references. ``lower`` holds keys smaller than this node's
    course number, ``upper`` holds larger ones.
    """
    __slots__ = ('course', 'lower', 'upper')

    def __init__(self, course: Course):
        self.course = course
        self.lower: Optional[int] = None
        self.upper: Optional[int] = None

    @property
    def key(self) -> str:
        return self.course.course_number

    def __repr__(self) -> str:
        return f"IndexNode({self.key}, lower={self.lower}, upper={self.upper})"
