# cli/model_formatters.py

# anything that renders tutors for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.tutor import Tutor

# === tutor formatters ===


def format_tags(tutor: Tutor) -> str:
    return formatters.format_list_with_and(sorted(tag.value for tag in tutor.tags))


def format_tutor_oneline(tutor: Tutor) -> str:
    tags = f" [{format_tags(tutor)}]" if tutor.tags else ""

    return (
        f"{tutor.name.value:<20} | {tutor.module.value:<8} | Y{tutor.year.value} | "
        f"{tutor.student_id.value} | TN: {tutor.teaching_nomination.value}{tags}"
    )


def format_tutor_multiline(tutor: Tutor) -> str:
    comment = tutor.comment.value if not tutor.comment.is_empty else "[NO COMMENT]"
    tags = format_tags(tutor) or "[NO TAGS]"

    return dedent(
        f"""\
        Tutor {tutor.name.value}:
        ... Phone: {tutor.phone.value}
        ... Email: {tutor.email.value}
        ... Module: {tutor.module.value}
        ... Year: {tutor.year.value}
        ... Student ID: {tutor.student_id.value}
        ... Teaching Nominations: {tutor.teaching_nomination.value}
        ... Comment: {comment}
        ... Tags: {tags}"""
    )
