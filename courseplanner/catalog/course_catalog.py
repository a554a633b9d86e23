import logging
import os
from typing import Iterable, Optional, Union

from cachetools import LRUCache

from ..core.course import Course, normalize_course_number
from ..index.ordered_index import OrderedIndex, populate
from .course_loader import CourseLoader
from .exceptions import CatalogNotLoadedError


class CourseCatalog:
    """
    Application state for the course planner.

    Holds the ordered index of the currently loaded courses and answers
    lookups and sorted listings from it. The core keeps no other state;
    the shell is handed a catalog instance.

    A load is all-or-nothing: the file is fully validated and a new index
    is built before the current one is replaced, so a failed load leaves
    the previously loaded courses in place.
    """

    def __init__(self, loader: CourseLoader = None, lookup_cache_size: int = 256):
        """
        Initialize an empty catalog.

        Args:
            loader: Loader used for course files
            lookup_cache_size: Number of lookups kept in the LRU cache
        """
        self.loader = loader or CourseLoader()
        self._index = OrderedIndex()
        self._loaded = False
        self._source: Optional[str] = None
        self._lookup_cache: LRUCache[str, Course] = LRUCache(maxsize=lookup_cache_size)
        self.logger = logging.getLogger(__name__)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def source(self) -> Optional[str]:
        """Name of the file behind the current catalog."""
        return self._source

    @property
    def index(self) -> OrderedIndex:
        return self._index

    def load(self, course_file: Union[str, os.PathLike]) -> int:
        """
        Load a course file, replacing the current catalog on success.

        Returns:
            Number of courses loaded

        Raises:
            LoadError: If the file cannot be read or fails validation
        """
        courses = self.loader.load_file(course_file)
        count = self._replace(courses)
        self._source = str(course_file)
        return count

    def load_lines(self, lines: Iterable[str]) -> int:
        """Load courses from in-memory lines, replacing the current catalog on success."""
        courses = self.loader.load_lines(lines)
        count = self._replace(courses)
        self._source = None
        return count

    def find(self, course_number: str) -> Optional[Course]:
        """Look up a course by number, ignoring case."""
        self._require_loaded()
        key = normalize_course_number(course_number)

        course = self._lookup_cache.get(key)
        if course is None:
            course = self._index.search(key)
            if course is not None:
                self._lookup_cache[key] = course

        return course

    def list_courses(self) -> list[Course]:
        """All courses in ascending course-number order."""
        self._require_loaded()
        return list(self._index.traverse_sorted())

    def __len__(self) -> int:
        return len(self._index)

    def _replace(self, courses: list[Course]) -> int:
        index = OrderedIndex()
        count = populate(index, courses)

        self._index.clear()
        self._index = index
        self._lookup_cache.clear()
        self._loaded = True

        self.logger.info("Catalog now holds %d courses", count)
        return count

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise CatalogNotLoadedError()
