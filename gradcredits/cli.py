"""
Command-Line Interface for the credit tracker.

This module provides the interactive menu. It handles user input and
delegates everything else to CreditTracker.

Run from the project root:
    python3 -m gradcredits

Set GRADCREDITS_STORE=local to keep the course list in data/courses.json
instead of the Pantry basket.
"""

import logging

from .config import COMMON_COURSES, DEFAULT_CREDITS, DEFAULT_SEMESTER
from .data import TranscriptImporter, TranscriptImportError
from .models import Category, Course, Grade
from .tracker import CreditTracker
from .ui import TerminalDisplay, category_title

CATEGORY_CHOICES = [
    Category.DEPT_REQUIRED,
    Category.COMMON_REQUIRED,
    Category.DESIGNATED_ELECTIVE,
    Category.GENERAL_ELECTIVE,
    Category.GENERAL_EDUCATION,
    Category.PHYSICAL_EDUCATION,
    Category.OTHER,
]

GRADE_CHOICES = list(Grade)


def _ask(prompt: str, default: str = "") -> str:
    """input() that returns the default on an empty answer or closed stdin."""
    suffix = f" [{default}]" if default else ""
    try:
        answer = input(f"  {prompt}{suffix}: ").strip()
    except EOFError:
        return default
    return answer or default


def _ask_yes(prompt: str, default: bool = False) -> bool:
    hint = "Y/n" if default else "y/N"
    answer = _ask(f"{prompt} ({hint})").lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def _choose(prompt: str, options: list, labels: list, default_index: int = 0):
    """Numbered pick from a list; bad input falls back to the default."""
    for i, label in enumerate(labels, 1):
        print(f"    {i}. {label}")
    answer = _ask(prompt, str(default_index + 1))
    try:
        return options[int(answer) - 1]
    except (ValueError, IndexError):
        print(f"  → Using default: {labels[default_index]}")
        return options[default_index]


def _ask_credits(default) -> float:
    answer = _ask("Credits", str(default))
    try:
        value = float(answer)
    except ValueError:
        print(f"  → Using default: {default}")
        return default
    if value < 0:
        print(f"  → Credits cannot be negative. Using default: {default}")
        return default
    return int(value) if value.is_integer() else value


def _choose_category(default: Category = Category.DEPT_REQUIRED) -> Category:
    print(f"\n  {TerminalDisplay.BOLD}Category:{TerminalDisplay.RESET}")
    return _choose("Enter number", CATEGORY_CHOICES,
                   [category_title(c) for c in CATEGORY_CHOICES],
                   CATEGORY_CHOICES.index(default))


def _choose_grade(default: Grade = Grade.A_PLUS) -> Grade:
    print(f"\n  {TerminalDisplay.BOLD}Grade:{TerminalDisplay.RESET}")
    labels = [g.value if g.point is None else f"{g.value} ({g.point})" for g in GRADE_CHOICES]
    return _choose("Enter number", GRADE_CHOICES, labels, GRADE_CHOICES.index(default))


def _find_course(tracker: CreditTracker, prefix: str):
    """Course whose id starts with prefix, or None if zero or several match."""
    prefix = prefix.strip()
    if not prefix:
        return None
    matches = [c for c in tracker.courses if c.id.startswith(prefix)]
    if len(matches) != 1:
        return None
    return matches[0]


def _add_course(tracker: CreditTracker):
    TerminalDisplay.print_subheader("新增課程 Add Course")
    semester = _ask("Semester", DEFAULT_SEMESTER)

    print(f"  {TerminalDisplay.DIM}Common courses:{TerminalDisplay.RESET}")
    for i, name in enumerate(COMMON_COURSES, 1):
        print(f"    {i}. {name}")
    name = _ask("Course name or number")
    if name.isdigit() and 1 <= int(name) <= len(COMMON_COURSES):
        name = COMMON_COURSES[int(name) - 1]
    if not name:
        print(f"  {TerminalDisplay.YELLOW}No name given. Nothing added.{TerminalDisplay.RESET}")
        return

    credits = _ask_credits(DEFAULT_CREDITS)
    category = _choose_category()
    grade = _choose_grade()
    is_current = _ask_yes("In progress this semester?")

    tracker.add_course(Course.create(semester, name, credits, category, grade, is_current))
    TerminalDisplay.print_notice(f"Added: {semester} {name}")


def _edit_course(tracker: CreditTracker):
    tracker.show_courses()
    course = _find_course(tracker, _ask("ID of the course to edit"))
    if course is None:
        TerminalDisplay.print_error("No single course matches that ID.")
        return

    grade_default = course.grade if isinstance(course.grade, Grade) else Grade.PASS
    category_default = Category.coerce(course.category) or Category.OTHER
    tracker.edit_course(
        course.id,
        semester=_ask("Semester", course.semester),
        name=_ask("Course name", course.name),
        credits=_ask_credits(course.credits),
        category=_choose_category(category_default),
        grade=_choose_grade(grade_default),
        is_current=_ask_yes("In progress this semester?", course.is_current),
    )
    TerminalDisplay.print_notice("Course updated.")


def _delete_course(tracker: CreditTracker):
    tracker.show_courses()
    course = _find_course(tracker, _ask("ID of the course to delete"))
    if course is None:
        TerminalDisplay.print_error("No single course matches that ID.")
        return
    if _ask_yes(f"確定要刪除這門課程嗎？ Delete {course.semester} {course.name}?"):
        tracker.delete_course(course.id)
        TerminalDisplay.print_notice("Course deleted.")


def _read_pasted_text() -> str:
    print(f"  {TerminalDisplay.DIM}Paste transcript rows, then an empty line to finish.{TerminalDisplay.RESET}")
    lines = []
    while True:
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            break
        lines.append(line)
    return "\n".join(lines)


def _review_candidates(candidates: list) -> bool:
    """
    Let the student fix categories before committing.

    Commands:
        c <#> <category#>   set a row's category (use "all" for every row)
        t <#>               toggle in-progress
        d <#>               drop a row
        Enter               import
        x                   cancel
    """
    categories_help = "  ".join(f"{i}={c.label}" for i, c in enumerate(CATEGORY_CHOICES, 1))
    while candidates:
        TerminalDisplay.print_candidates(candidates)
        print(f"  {TerminalDisplay.DIM}c <#|all> <cat#>  t <#>  d <#>  Enter=import  x=cancel{TerminalDisplay.RESET}")
        print(f"  {TerminalDisplay.DIM}{categories_help}{TerminalDisplay.RESET}")
        command = _ask(">").split()
        if not command:
            return True
        if command[0] == "x":
            return False
        try:
            if command[0] == "c":
                category = CATEGORY_CHOICES[int(command[2]) - 1]
                rows = candidates if command[1] == "all" else [candidates[int(command[1]) - 1]]
                for row in rows:
                    row.category = category
            elif command[0] == "t":
                row = candidates[int(command[1]) - 1]
                row.is_current = not row.is_current
            elif command[0] == "d":
                del candidates[int(command[1]) - 1]
        except (ValueError, IndexError):
            print(f"  {TerminalDisplay.YELLOW}Could not read that command.{TerminalDisplay.RESET}")
    return False


def _import_transcript(tracker: CreditTracker):
    TerminalDisplay.print_subheader("成績單匯入 Import Transcript")
    print("    1. Paste transcript text")
    print("    2. Load extracted records from a JSON file")
    importer = TranscriptImporter()

    try:
        if _ask("Source", "1") == "2":
            candidates = importer.from_json_file(_ask("JSON file path"))
        else:
            candidates = importer.from_text(_read_pasted_text())
    except TranscriptImportError as e:
        TerminalDisplay.print_error(f"無法解析內容 (Failed to parse transcript): {e}")
        return

    if not _review_candidates(candidates):
        print(f"  {TerminalDisplay.YELLOW}Import cancelled.{TerminalDisplay.RESET}")
        return

    courses = importer.commit(candidates)
    tracker.add_courses(courses)
    TerminalDisplay.print_notice(f"Imported {len(courses)} courses.")


def main():
    """
    Command-line interface for the credit tracker.

    ═══════════════════════════════════════════════════════════════════════════
    MENU
    ═══════════════════════════════════════════════════════════════════════════

    1. SUMMARY   - credits per requirement and both GPAs
    2. COURSES   - the course list grouped by category
    3. ADD       - enter one course by hand
    4. EDIT      - change a course
    5. DELETE    - remove a course
    6. IMPORT    - bring in courses from a transcript
    q. QUIT      - saves anything pending, then exits

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    tracker = CreditTracker()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         GRADUATION CREDIT TRACKER                                ║")
    print("║         NTU Accounting, 111 entry cohort                         ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")
    print(f"  {TerminalDisplay.DIM}Loading course data...{TerminalDisplay.RESET}")

    if not tracker.load():
        TerminalDisplay.print_error("無法載入雲端資料，請檢查網路連線。(Could not load saved courses)")

    actions = {
        "1": tracker.show_summary,
        "2": tracker.show_courses,
        "3": lambda: _add_course(tracker),
        "4": lambda: _edit_course(tracker),
        "5": lambda: _delete_course(tracker),
        "6": lambda: _import_transcript(tracker),
    }

    tracker.show_summary()
    while True:
        print(f"\n{TerminalDisplay.BOLD}1 Summary  2 Courses  3 Add  4 Edit  5 Delete  6 Import  q Quit{TerminalDisplay.RESET}")
        try:
            choice = input(f"{TerminalDisplay.BOLD}Select: {TerminalDisplay.RESET}").strip().lower()
        except EOFError:
            choice = "q"
        if choice == "q":
            break
        action = actions.get(choice)
        if action is None:
            print(f"  {TerminalDisplay.YELLOW}Unknown option.{TerminalDisplay.RESET}")
            continue
        action()

    status = tracker.close()
    TerminalDisplay.print_sync_status(status)


if __name__ == "__main__":
    main()
