"""
Console output for the course planner shell.

All user-facing text is produced here; the catalog and index only
return values and raise structured errors.
"""
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule

from ..core.course import Course

MENU_OPTIONS = (
    ("1", "Load Data Structure"),
    ("2", "Print Course List"),
    ("3", "Print Course"),
    ("9", "Exit"),
)


def format_course_line(course: Course) -> str:
    """Render ``<number>, <title>``."""
    return f"{course.course_number}, {course.title}"


def format_prerequisites(course: Course) -> str:
    """Render ``Prerequisites: p1, p2`` or ``Prerequisites: None``."""
    if not course.has_prerequisites:
        return "Prerequisites: None"
    return "Prerequisites: " + ", ".join(course.prerequisites)


class Renderer:
    """Writes menus, course listings and messages to a rich console."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def print_banner(self) -> None:
        self.console.print(Panel(
            "[bold blue]Course Planner[/bold blue]\n"
            "[dim]Load a course file, list courses and look up prerequisites[/dim]",
            style="bright_blue",
            box=box.DOUBLE,
            padding=(1, 2)
        ))

    def print_menu(self) -> None:
        self.console.print()
        self.console.print(Rule("[bold]Course Planner Menu[/bold]"))
        for key, label in MENU_OPTIONS:
            self.console.print(f"  [cyan]{key}.[/cyan] {label}")
        self.console.print(Rule())

    def print_course_list(self, courses: list[Course]) -> None:
        self.console.print("Here is a sample schedule:")
        self.console.print()
        for course in courses:
            self.console.print(escape(format_course_line(course)), highlight=False)

    def print_course(self, course: Course) -> None:
        self.console.print(escape(format_course_line(course)), highlight=False)
        self.console.print(escape(format_prerequisites(course)), highlight=False)

    def print_course_not_found(self, course_number: str) -> None:
        self.console.print(f"Course {escape(course_number)} not found.", highlight=False)

    def print_load_result(self, count: int) -> None:
        self.print_info(f"Successfully loaded {count} courses")
        self.print_success("Data loaded successfully!")

    def print_load_failure(self, error: Exception) -> None:
        self.print_error(str(error))
        self.console.print(
            "Failed to load data. Please check you have entered the correct filename.")

    def print_invalid_choice(self, choice: str) -> None:
        self.print_warning(f"{choice} is not a valid option.")
        self.console.print("Please enter 1, 2, 3, or 9.")

    def print_success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def print_info(self, message: str) -> None:
        self.console.print(f"[bold cyan]ℹ[/bold cyan] {escape(message)}")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]⚠[/bold yellow] {escape(message)}")

    def print_error(self, message: str) -> None:
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
