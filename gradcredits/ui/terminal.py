"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gradcredits package.
"""

from ..data import SyncStatus
from ..models import BUCKET_FIELDS, Category, Grade


# Bucket attribute name -> Category, for labelling CategoryProgress rows
_KEY_TO_CATEGORY = {key: category for category, key in BUCKET_FIELDS.items()}


def format_credits(value) -> str:
    """3 -> "3", 2.5 -> "2.5", 3.0 -> "3"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def category_title(category) -> str:
    """Bilingual title, e.g. "系訂必修 (Dept Required)"; raw text if unrecognized."""
    member = Category.coerce(category)
    if member is None:
        return str(category)
    return f"{member.value} ({member.label})"


class TerminalDisplay:
    """
    Pretty terminal output for progress summaries and course tables.

    Solid bar segments are credits already earned; shaded segments are
    credits from courses still in progress.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    BAR_WIDTH = 30

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
    def status_badge(cls, met: bool, met_projected: bool = False) -> str:
        """Return a colored status badge."""
        if met:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ MET {cls.RESET}"
        elif met_projected:
            return f"{cls.BG_YELLOW}{cls.WHITE} ⏳ ON TRACK {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ SHORT {cls.RESET}"

    @classmethod
    def progress_bar(cls, earned_percent: float, projected_percent: float) -> str:
        """Two-segment bar: earned share, then the in-progress share on top of it."""
        earned_cells = int(round(earned_percent / 100 * cls.BAR_WIDTH))
        projected_cells = int(round(projected_percent / 100 * cls.BAR_WIDTH)) - earned_cells
        projected_cells = max(projected_cells, 0)
        empty_cells = cls.BAR_WIDTH - earned_cells - projected_cells
        return (
            f"{cls.GREEN}{'█' * earned_cells}{cls.RESET}"
            f"{cls.BLUE}{'▒' * projected_cells}{cls.RESET}"
            f"{cls.DIM}{'·' * empty_cells}{cls.RESET}"
        )

    @classmethod
    def print_summary(cls, report, rows):
        """Print both GPAs and one progress bar per requirement bucket."""
        cls.print_header("修業進度摘要 SUMMARY")

        print(f"\n  {cls.BOLD}目前 GPA (Current):{cls.RESET}   {report.current_gpa_text}")
        print(f"  {cls.BOLD}預估 GPA (Projected):{cls.RESET} {cls.BLUE}{report.projected_gpa_text}{cls.RESET}")

        print(f"\n  {cls.BOLD}{'REQUIREMENT':<34} {'CREDITS':<14} {'PROGRESS':<32} STATUS{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 92}{cls.RESET}")

        for row in rows:
            if row.key == "total":
                label = "總學分 (Total)"
            else:
                label = category_title(_KEY_TO_CATEGORY[row.key])
            credits = format_credits(row.earned)
            if row.projected:
                credits += f" (+{format_credits(row.projected)})"
            credits += f" / {format_credits(row.target)}"
            bar = cls.progress_bar(row.earned_percent, row.projected_percent)
            print(f"  {label:<34} {credits:<14} {bar}  {cls.status_badge(row.met, row.met_projected)}")

        print(f"\n  {cls.DIM}█ earned   {cls.RESET}{cls.BLUE}▒ in progress{cls.RESET}"
              f"{cls.DIM}   PE (體育) is listed but never counts toward graduation.{cls.RESET}")

    @classmethod
    def print_course_table(cls, groups):
        """Print the course list, one section per category, oldest first."""
        cls.print_header("修課紀錄 COURSES")

        if not any(groups.values()):
            print(f"\n  {cls.DIM}尚無修課紀錄 (No courses yet){cls.RESET}")
            return

        for category, courses in groups.items():
            if not courses:
                continue
            cls.print_subheader(f"{category_title(category)} ({len(courses)})")
            print(f"  {cls.BOLD}{'SEMESTER':<10} {'NAME':<30} {'CR':>4}  {'GRADE':<6} {'ID'}{cls.RESET}")
            for course in courses:
                cls.print_course_row(course)

    @classmethod
    def print_course_row(cls, course):
        grade = course.grade.value if isinstance(course.grade, Grade) else str(course.grade)
        marker = f" {cls.YELLOW}⏳ in progress{cls.RESET}" if course.is_current else ""
        print(f"  {course.semester:<10} {course.name:<30} {format_credits(course.credits):>4}  "
              f"{grade:<6} {cls.DIM}{course.id[:8]}{cls.RESET}{marker}")

    @classmethod
    def print_sync_status(cls, status: SyncStatus):
        """Print the storage status indicator."""
        if status is SyncStatus.SAVING:
            text = f"{cls.YELLOW}雲端儲存中... (Saving...){cls.RESET}"
        elif status is SyncStatus.SYNCED:
            text = f"{cls.GREEN}✓ 資料已同步 (Synced){cls.RESET}"
        elif status is SyncStatus.ERROR:
            text = f"{cls.RED}✗ 儲存失敗 (Save Failed){cls.RESET}"
        else:
            text = f"{cls.DIM}雲端待命 (Idle){cls.RESET}"
        print(f"\n  {cls.BOLD}Storage:{cls.RESET} {text}")

    @classmethod
    def print_candidates(cls, candidates):
        """Print extracted transcript rows awaiting review."""
        cls.print_subheader(f"Review imported courses ({len(candidates)})")
        print(f"  {cls.BOLD}{'#':>3} {'SEMESTER':<10} {'NAME':<30} {'CR':>4}  {'GRADE':<6} CATEGORY{cls.RESET}")
        for i, c in enumerate(candidates, 1):
            current = f" {cls.YELLOW}⏳{cls.RESET}" if c.is_current else ""
            print(f"  {i:>3} {c.semester:<10} {c.name:<30} {format_credits(c.credits):>4}  "
                  f"{c.grade.value:<6} {category_title(c.category)}{current}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_notice(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")
