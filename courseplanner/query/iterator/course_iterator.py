from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.course import Course


class CourseIterator(ABC):
    """
    Iterator interface for producing courses one at a time.

    Key Design Principles:
    1. **Pull-based**: callers ask for the next course when they need it
    2. **Explicit lifecycle**: open() before use, close() to release state
    3. **Restartable**: rewind() starts again from the first course
    """

    @abstractmethod
    def open(self) -> None:
        """
        Opens the iterator.
        This must be called before any other methods.
        """
        pass

    @abstractmethod
    def has_next(self) -> bool:
        """
        Returns true if the iterator has more courses.

        This method should NOT advance the iterator position.

        Raises:
            RuntimeError: If the iterator has not been opened
        """
        pass

    @abstractmethod
    def next(self) -> 'Course':
        """
        Returns the next course and advances the iterator.

        Raises:
            StopIteration: If there are no more courses
            RuntimeError: If the iterator has not been opened
        """
        pass

    @abstractmethod
    def rewind(self) -> None:
        """
        Resets the iterator to the start.

        After rewind() the next call to next() returns the first
        course again.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Closes the iterator and releases its state.

        After close(), calling next() or has_next() raises RuntimeError.
        """
        pass
