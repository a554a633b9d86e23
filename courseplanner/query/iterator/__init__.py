from .course_iterator import CourseIterator
from .abstract_iterator import AbstractCourseIterator
from .in_order_scan import InOrderScan

__all__ = ["CourseIterator", "AbstractCourseIterator", "InOrderScan"]
