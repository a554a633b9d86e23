"""
Tests for course_catalog.py module.
"""
import pytest

from courseplanner.catalog.course_catalog import CourseCatalog
from courseplanner.catalog.exceptions import (
    CatalogNotLoadedError,
    MalformedRecordError,
    SourceUnavailableError,
    UnknownPrerequisiteError,
)

EXAMPLE_LINES = [
    "CSCI101, Intro to CS",
    "CSCI201, Data Structures, CSCI101",
    "MATH101, Calculus I",
]


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
    return path


class TestCourseCatalog:
    """Test cases for CourseCatalog class."""

    def setup_method(self):
        self.catalog = CourseCatalog()

    def test_initial_state(self):
        assert self.catalog.loaded is False
        assert self.catalog.source is None
        assert len(self.catalog) == 0

    def test_queries_before_load_raise(self):
        with pytest.raises(CatalogNotLoadedError, match="Please load data first"):
            self.catalog.find("CSCI101")

        with pytest.raises(CatalogNotLoadedError):
            self.catalog.list_courses()

    def test_load_file(self, course_file):
        count = self.catalog.load(course_file)

        assert count == 3
        assert self.catalog.loaded is True
        assert self.catalog.source == str(course_file)
        assert len(self.catalog) == 3

    def test_list_courses_sorted(self):
        self.catalog.load_lines(["MATH101, Calculus I", "CSCI201, DS, CSCI101", "CSCI101, Intro"])

        numbers = [c.course_number for c in self.catalog.list_courses()]
        assert numbers == ["CSCI101", "CSCI201", "MATH101"]

    def test_find_case_insensitive(self):
        self.catalog.load_lines(EXAMPLE_LINES)

        assert self.catalog.find("csci101") is self.catalog.find("CSCI101")
        assert self.catalog.find("csci201").prerequisites == ("CSCI101",)

    def test_find_missing(self):
        self.catalog.load_lines(EXAMPLE_LINES)
        assert self.catalog.find("CSCI999") is None

    def test_find_uses_cache(self, monkeypatch):
        self.catalog.load_lines(EXAMPLE_LINES)
        first = self.catalog.find("CSCI201")

        def fail_search(_):
            raise AssertionError("index should not be searched")

        monkeypatch.setattr(self.catalog.index, "search", fail_search)

        assert self.catalog.find("csci201") is first

    def test_failed_load_keeps_previous_catalog(self, tmp_path):
        self.catalog.load_lines(EXAMPLE_LINES)
        before = self.catalog.list_courses()

        with pytest.raises(UnknownPrerequisiteError):
            self.catalog.load_lines(["CSCI201, Data Structures, CSCI999"])

        with pytest.raises(MalformedRecordError):
            self.catalog.load_lines(["CSCI101"])

        with pytest.raises(SourceUnavailableError):
            self.catalog.load(tmp_path / "missing.csv")

        assert self.catalog.list_courses() == before
        assert self.catalog.loaded is True

    def test_failed_first_load_stays_unloaded(self):
        with pytest.raises(MalformedRecordError):
            self.catalog.load_lines(["CSCI101"])

        assert self.catalog.loaded is False
        assert len(self.catalog) == 0

    def test_reload_replaces_catalog(self):
        self.catalog.load_lines(EXAMPLE_LINES)
        self.catalog.find("MATH101")

        count = self.catalog.load_lines(["PHYS101, Physics I"])

        assert count == 1
        assert [c.course_number for c in self.catalog.list_courses()] == ["PHYS101"]
        assert self.catalog.find("MATH101") is None

    def test_reload_same_file_does_not_duplicate(self, course_file):
        self.catalog.load(course_file)
        self.catalog.load(course_file)

        assert len(self.catalog.list_courses()) == 3

    def test_small_cache_size(self):
        catalog = CourseCatalog(lookup_cache_size=1)
        catalog.load_lines(EXAMPLE_LINES)

        assert catalog.find("CSCI101").course_number == "CSCI101"
        assert catalog.find("MATH101").course_number == "MATH101"
        assert catalog.find("CSCI101").course_number == "CSCI101"
