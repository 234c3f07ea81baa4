"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the scheduling package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import DAY_TOKENS
from ..engines import ScheduleScorer, parse_meeting_days
from ..models import Schedule, ScheduleResult


class TerminalDisplay:
    """
    Pretty terminal output for planning results.

    For API responses, skip this class and serialize ScheduleResult.to_dict()
    instead; the CLI does exactly that with --json.
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
    def status_badge(cls, ok: bool) -> str:
        if ok:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ OK {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ ISSUES {cls.RESET}"

    @classmethod
    def score_color(cls, score: float) -> str:
        if score >= 80:
            return cls.GREEN
        if score >= 50:
            return cls.YELLOW
        return cls.RED

    @classmethod
    def week_pattern(cls, meets: str) -> str:
        """One column per weekday; days the course does not meet show as a dot."""
        days = parse_meeting_days(meets)
        return " ".join(d.ljust(2) if d in days else "· " for d in DAY_TOKENS)

    @classmethod
    def print_errors(cls, errors):
        if not errors:
            return
        cls.print_subheader("Problems")
        for message in errors:
            print(f"  {cls.RED}✗{cls.RESET} {message}")

    @classmethod
    def print_schedule(cls, schedule: Schedule, number: int, scorer: ScheduleScorer = None):
        color = cls.score_color(schedule.score)
        balance = schedule.day_balance()
        print()
        print(
            f"  {cls.BOLD}Option {number}{cls.RESET}  "
            f"score {color}{schedule.score:.1f}{cls.RESET}  "
            f"{cls.DIM}(MWF {balance.mwf_count} / TTh {balance.tth_count}){cls.RESET}"
        )
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for course in schedule.courses:
            writ = f" {cls.CYAN}[WRIT]{cls.RESET}" if course.is_writ else ""
            title = course.title if len(course.title) <= 32 else course.title[:29] + "..."
            print(f"  {course.code:<11} {title:<32} {cls.week_pattern(course.meets)}  {course.meets}{writ}")

        if scorer is not None:
            penalties = {k: v for k, v in scorer.breakdown(schedule).items() if v}
            if penalties:
                details = ", ".join(f"{k.replace('_', ' ')} -{v:.0f}" for k, v in penalties.items())
                print(f"  {cls.DIM}Penalties: {details}{cls.RESET}")

    @classmethod
    def print_result(cls, result: ScheduleResult, term: str, profile=None, limit: int = 5):
        """Print the ranked schedules and any problems found on the way."""
        cls.print_header(f"SCHEDULE OPTIONS: TERM {term}")
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(result.ok)}")
        print(f"  {cls.BOLD}Schedules found:{cls.RESET} {len(result.schedules)}")

        cls.print_errors(result.errors)

        if not result.schedules:
            return

        scorer = ScheduleScorer(profile) if profile is not None else None
        cls.print_subheader(f"Top {min(limit, len(result.schedules))}")
        for number, schedule in enumerate(result.top(limit), 1):
            cls.print_schedule(schedule, number, scorer)

        if len(result.schedules) > limit:
            print(f"\n  {cls.DIM}... and {len(result.schedules) - limit} more{cls.RESET}")
