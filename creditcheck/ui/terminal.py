"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the creditcheck package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import CategoryBreakdown, CreditSummary, Severity


class TerminalDisplay:
    """
    Pretty terminal output for credit summaries.

    Every method takes plain result objects from the engines and prints
    them. No method computes anything the engines did not already decide.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    SEVERITY_COLORS = {
        Severity.ERROR: RED,
        Severity.WARNING: YELLOW,
        Severity.INFO: CYAN,
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ ELIGIBLE {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ NOT YET {cls.RESET}"

    @classmethod
    def print_summary(cls, summary: CreditSummary):
        """Print totals and the per-category breakdown table."""
        cls.print_header("GRADUATION CREDIT CHECK")

        print(f"\n  {cls.BOLD}Graduation:{cls.RESET} {cls.status_badge(summary.can_graduate)}")
        print(f"  {cls.BOLD}Completed:{cls.RESET} {summary.total_completed} / {summary.total_required} credits")
        print(f"  {cls.BOLD}Planned:{cls.RESET}   {summary.total_planned} credits")

        print(f"\n  {cls.BOLD}{'CATEGORY':<28} {'DONE':>5} {'PLAN':>5} {'REQ':>5} {'LEFT':>5}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 52}{cls.RESET}")
        for row in summary.category_breakdown:
            color = cls._row_color(row)
            print(f"  {color}{row.category:<28}{cls.RESET} "
                  f"{row.completed:>5} {row.planned:>5} {row.required:>5} {row.remaining:>5}")

    @classmethod
    def _row_color(cls, row: CategoryBreakdown) -> str:
        if row.remaining == 0:
            return cls.GREEN
        if row.completed + row.planned >= row.required:
            return cls.YELLOW
        return cls.RED

    @classmethod
    def print_warnings(cls, warnings):
        """Print warnings in the order given, colored by severity."""
        if not warnings:
            return
        cls.print_subheader("Warnings")
        for w in warnings:
            color = cls.SEVERITY_COLORS.get(w.severity, cls.WHITE)
            print(f"  {color}[{w.severity.value.upper():<7}]{cls.RESET} {w.message}")

    @classmethod
    def print_missing_required(cls, courses):
        if not courses:
            return
        cls.print_subheader("Required courses not yet taken")
        for course in courses:
            print(f"  {cls.RED}•{cls.RESET} {course.id:<10} {course.name} "
                  f"{cls.DIM}({course.credits} cr, {course.category}){cls.RESET}")

    @classmethod
    def print_recommendations(cls, recommendations: list):
        """Print suggested courses for each short category."""
        if not recommendations:
            return
        cls.print_subheader("Suggested courses")
        for rec in recommendations:
            print(f"\n  {cls.BOLD}{rec.category}{cls.RESET} {cls.DIM}(needs {rec.remaining} more){cls.RESET}")
            if not rec.courses:
                print(f"    {cls.DIM}(no untaken courses in the catalog){cls.RESET}")
            for course in rec.courses:
                year = "any year" if course.year == 0 else f"year {course.year}"
                print(f"    → {course.id:<10} {course.name} "
                      f"{cls.DIM}[{course.credits} cr, {year}, {course.term.value}]{cls.RESET}")

    @classmethod
    def print_department_totals(cls, totals: dict):
        if not totals:
            return
        cls.print_subheader("Credits by department")
        for department, total in totals.items():
            print(f"  {department:<30} {cls.GREEN}{total.completed:>4}{cls.RESET} done  "
                  f"{cls.YELLOW}{total.planned:>4}{cls.RESET} planned")
