"""
Course Planner Interactive Shell
================================
Numbered menu loop over a CourseCatalog.

Features:
  - 1: load a course file (all-or-nothing)
  - 2: print every course in course-number order
  - 3: print one course with its prerequisites
  - 9: exit
  - Ctrl+C: cancel the current command
  - Ctrl+D/EOF: exit
"""
import logging
from typing import Callable, Optional

from ..catalog.course_catalog import CourseCatalog
from ..catalog.exceptions import CatalogNotLoadedError, LoadError
from .renderer import Renderer


class CoursePlannerShell:
    """
    Interactive course planner menu.

    Usage:
        shell = CoursePlannerShell(CourseCatalog())
        shell.run()
    """

    CHOICE_PROMPT = "Enter choice: "
    FILENAME_PROMPT = "Enter filename: "
    COURSE_PROMPT = "What course do you want to know about? "
    EXIT_CHOICE = 9

    def __init__(self, catalog: CourseCatalog, renderer: Renderer = None,
                 input_func: Optional[Callable[[str], str]] = None):
        self.catalog = catalog
        self.renderer = renderer or Renderer()
        self._input = input_func or self.renderer.console.input
        self._commands: dict[int, Callable[[], None]] = {
            1: self.load_data,
            2: self.print_course_list,
            3: self.print_course,
        }
        self._running = False
        self.logger = logging.getLogger(__name__)

    def run(self) -> None:
        """Main menu loop."""
        self._running = True
        self.renderer.print_banner()

        while self._running:
            self.renderer.print_menu()
            try:
                choice = self._input(self.CHOICE_PROMPT)
                self.handle_choice(choice)
            except KeyboardInterrupt:
                self.renderer.console.print()
                continue
            except EOFError:
                self.renderer.console.print()
                self._running = False

        self.renderer.console.print("Good bye. Program has ended.")

    def handle_choice(self, raw_choice: str) -> None:
        """Dispatch one menu choice."""
        choice_text = raw_choice.strip()
        try:
            choice = int(choice_text)
        except ValueError:
            self.renderer.print_error("Invalid input. Please enter a number.")
            return

        self.logger.debug("Menu choice %d", choice)

        if choice == self.EXIT_CHOICE:
            self.renderer.console.print("See you next time!")
            self._running = False
            return

        command = self._commands.get(choice)
        if command is None:
            self.renderer.print_invalid_choice(choice_text)
            return

        command()

    def preload(self, course_file: str) -> bool:
        """Load a course file before the menu starts."""
        return self._load(course_file)

    def load_data(self) -> None:
        filename = self._input(self.FILENAME_PROMPT).strip()
        self._load(filename)

    def print_course_list(self) -> None:
        try:
            courses = self.catalog.list_courses()
        except CatalogNotLoadedError as e:
            self.renderer.print_error(f"Error: {e}")
            return

        self.renderer.console.print()
        self.renderer.print_course_list(courses)

    def print_course(self) -> None:
        if not self.catalog.loaded:
            self.renderer.print_error(f"Error: {CatalogNotLoadedError()}")
            return

        course_number = self._input(self.COURSE_PROMPT).strip()
        self.renderer.console.print()

        course = self.catalog.find(course_number)
        if course is None:
            self.renderer.print_course_not_found(course_number.upper())
            return

        self.renderer.print_course(course)

    def _load(self, course_file: str) -> bool:
        try:
            count = self.catalog.load(course_file)
        except LoadError as e:
            self.logger.warning("Load of %s failed: %s", course_file, e)
            self.renderer.print_load_failure(e)
            return False

        self.renderer.print_load_result(count)
        return True
