from .renderer import Renderer, format_course_line, format_prerequisites
from .shell import CoursePlannerShell

__all__ = ["Renderer", "format_course_line", "format_prerequisites", "CoursePlannerShell"]
