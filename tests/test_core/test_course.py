"""
Tests for course.py module.
"""
import dataclasses

import pytest

from courseplanner.core.course import Course, normalize_course_number


class TestNormalizeCourseNumber:
    """Test cases for course number normalization."""

    def test_uppercases(self):
        assert normalize_course_number("csci101") == "CSCI101"

    def test_strips_whitespace(self):
        assert normalize_course_number("  math201\t") == "MATH201"

    def test_already_normalized(self):
        assert normalize_course_number("CSCI101") == "CSCI101"


class TestCourse:
    """Test cases for Course class."""

    def test_create_normalizes_number_and_prerequisites(self):
        """Test that create() uppercases the number and prerequisites only."""
        course = Course.create("csci201", " Data Structures ", ["csci101", " math101"])

        assert course.course_number == "CSCI201"
        assert course.title == "Data Structures"
        assert course.prerequisites == ("CSCI101", "MATH101")

    def test_create_keeps_title_case(self):
        course = Course.create("cs1", "intro to CS")
        assert course.title == "intro to CS"

    def test_create_keeps_duplicate_prerequisites_in_order(self):
        course = Course.create("CS3", "Three", ["cs2", "cs1", "CS2"])
        assert course.prerequisites == ("CS2", "CS1", "CS2")

    def test_default_has_no_prerequisites(self):
        course = Course.create("CSCI100", "Intro")

        assert course.prerequisites == ()
        assert course.has_prerequisites is False

    def test_has_prerequisites(self):
        course = Course.create("CSCI200", "Data Structures", ["CSCI101"])
        assert course.has_prerequisites is True

    def test_is_immutable(self):
        """Test that courses cannot be modified after construction."""
        course = Course.create("CSCI100", "Intro")

        with pytest.raises(dataclasses.FrozenInstanceError):
            course.title = "Changed"

    def test_equality_and_hash(self):
        first = Course.create("csci100", "Intro", ["math1"])
        second = Course.create("CSCI100", "Intro", ["MATH1"])

        assert first == second
        assert hash(first) == hash(second)

    def test_str(self):
        course = Course.create("CSCI100", "Introduction to Computer Science")
        assert str(course) == "CSCI100, Introduction to Computer Science"

    def test_to_dict(self):
        course = Course.create("CSCI200", "Data Structures", ["CSCI101"])

        assert course.to_dict() == {
            "course_number": "CSCI200",
            "title": "Data Structures",
            "prerequisites": ["CSCI101"],
        }

    def test_from_dict_normalizes(self):
        course = Course.from_dict({
            "course_number": "csci200",
            "title": "Data Structures",
            "prerequisites": ["csci101"],
        })

        assert course == Course("CSCI200", "Data Structures", ("CSCI101",))

    def test_from_dict_without_prerequisites(self):
        course = Course.from_dict({"course_number": "MATH201", "title": "Discrete"})
        assert course.prerequisites == ()
