from abc import abstractmethod
from typing import Optional

from .course_iterator import CourseIterator
from ...core.course import Course


class AbstractCourseIterator(CourseIterator):
    """
    Helper base class for implementing CourseIterators.

    Handles has_next()/next() with a read-ahead buffer. Subclasses only
    implement read_next(), returning None once they are exhausted.
    """

    def __init__(self):
        self._next_course: Optional[Course] = None
        self._is_open = False

    def has_next(self) -> bool:
        """
        Check if there are more courses available.

        Uses read-ahead: if no course is buffered, try to read one.
        """
        if not self._is_open:
            raise RuntimeError("Iterator not open")

        if self._next_course is None:
            self._next_course = self.read_next()
        return self._next_course is not None

    def next(self) -> Course:
        """Return the buffered course, or read a new one, and advance."""
        if not self._is_open:
            raise RuntimeError("Iterator not open")

        if self._next_course is None:
            self._next_course = self.read_next()

        if self._next_course is None:
            raise StopIteration("No more courses")

        result = self._next_course
        self._next_course = None
        return result

    def open(self) -> None:
        """Mark iterator as open. Subclasses should override and call super()."""
        self._is_open = True

    def close(self) -> None:
        """Mark iterator as closed and clear buffer. Subclasses should override and call super()."""
        self._is_open = False
        self._next_course = None

    @abstractmethod
    def read_next(self) -> Optional[Course]:
        """
        Read the next course from the data source.

        Returns:
            The next course, or None if iteration is finished
        """
        pass
