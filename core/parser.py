# core/parser.py

"""
Turns a line of user input into a ready-to-run `Command`.

The parser owns all input validation: every field value is checked with its value
object's `is_valid()` before the value object is built, so commands only ever
receive valid data. Any problem is reported by raising `ParseError` (or
`NoFieldsEdited` for an edit that changes nothing), carrying the message shown
to the user.

Arguments use prefixes such as `n/` and `t/`. A prefix only counts when it follows
whitespace, and a field's value runs until the next prefix. Text before the first
prefix is the preamble, which holds the index for indexed commands.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TypeVar

from core.commands.add import AddCommand
from core.commands.base import Command
from core.commands.comment import CommentCommand
from core.commands.delete import DeleteCommand
from core.commands.edit import EditCommand
from core.commands.find import FindByModuleCommand, FindCommand
from core.commands.general import ClearCommand, ExitCommand, HelpCommand, ListCommand
from core.commands.sort import SORT_KEYS, SortCommand
from core.edit_descriptor import EditTutorDescriptor
from core.errors import NoFieldsEdited, ParseError
from core.index import Index
from core.syntax import (
    PREFIX_ASCENDING,
    PREFIX_COMMENT,
    PREFIX_DESCENDING,
    PREFIX_EMAIL,
    PREFIX_MODULE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
    PREFIX_TEACHING_NOMINATION,
    PREFIX_YEAR,
)
from models.fields import (
    Comment,
    Email,
    Field,
    Module,
    Name,
    Phone,
    StudentId,
    Tag,
    TeachingNomination,
    Year,
)
from models.predicates import (
    ModuleContainsKeywordPredicate,
    NameContainsKeywordsPredicate,
)
from models.tutor import Tutor

logger = logging.getLogger(__name__)

FieldType = TypeVar("FieldType", bound=Field)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): {}"
)

_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

# order matters: `help` lists usages in this order
_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    CommentCommand,
    DeleteCommand,
    FindCommand,
    FindByModuleCommand,
    SortCommand,
    ListCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)

_TUTOR_FIELD_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_MODULE,
    PREFIX_YEAR,
    PREFIX_STUDENT_ID,
    PREFIX_TEACHING_NOMINATION,
)


# === tokenizer ===


class ArgumentMultimap:
    """
    Maps each prefix to every value given for it, in input order.

    The preamble (text before the first prefix) is stored under the empty prefix.
    """

    def __init__(self):
        self._values: dict[str, list[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: str) -> str | None:
        """Returns the last value given for `prefix`, or None if it is absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    @property
    def preamble(self) -> str:
        return self.get_value("") or ""

    def verify_no_duplicate_prefixes(self, *prefixes: str) -> None:
        """
        Raises:
            ParseError: If any of `prefixes` was given more than once.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]

        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS.format(" ".join(duplicated)))


def tokenize(arguments: str, *prefixes: str) -> ArgumentMultimap:
    """
    Splits an argument string into prefixed values.

    Args:
        arguments (str): The text after the command word, typically starting with a space.
        prefixes (str): The prefixes recognized for this command.

    Returns:
        An `ArgumentMultimap` holding the trimmed preamble and the trimmed value of every prefix occurrence.
    """
    padded = f" {arguments}"

    positions = sorted(
        (match.start() + 1, prefix)
        for prefix in prefixes
        for match in re.finditer(rf"\s{re.escape(prefix)}", padded)
    )

    multimap = ArgumentMultimap()
    first_start = positions[0][0] if positions else len(padded)
    multimap.put("", padded[:first_start].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(padded)
        multimap.put(prefix, padded[start + len(prefix) : end].strip())

    return multimap


# === field parsers ===


def parse_index(one_based_index: str) -> Index:
    """
    Raises:
        ParseError: If the trimmed input is not a positive integer.
    """
    trimmed = one_based_index.strip()

    if not re.fullmatch(r"[1-9]\d*", trimmed, flags=re.ASCII):
        raise ParseError(MESSAGE_INVALID_INDEX)

    return Index.from_one_based(int(trimmed))


def parse_field(field_type: type[FieldType], raw: str) -> FieldType:
    """
    Trims `raw` and builds a `field_type` value object from it.

    Raises:
        ParseError: With the type's constraint message, if the trimmed value is invalid.
    """
    trimmed = raw.strip()

    if not field_type.is_valid(trimmed):
        raise ParseError(field_type.MESSAGE_CONSTRAINTS)

    return field_type(trimmed)


def parse_tags(raw_tags: Iterable[str]) -> set[Tag]:
    return {parse_field(Tag, raw) for raw in raw_tags}


def _parse_tags_for_edit(raw_tags: list[str]) -> set[Tag] | None:
    """
    Returns None when no tag prefix was given, and an empty set for a single bare `t/`,
    which clears the tutor's tags.
    """
    if not raw_tags:
        return None

    if raw_tags == [""]:
        return set()

    return parse_tags(raw_tags)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


# === command parsers ===


def parse_add_command(arguments: str) -> AddCommand:
    multimap = tokenize(arguments, *_TUTOR_FIELD_PREFIXES, PREFIX_TAG)

    if multimap.preamble or not all(
        multimap.has(prefix) for prefix in _TUTOR_FIELD_PREFIXES
    ):
        raise _invalid_format(AddCommand.MESSAGE_USAGE)

    multimap.verify_no_duplicate_prefixes(*_TUTOR_FIELD_PREFIXES)

    tutor = Tutor(
        name=parse_field(Name, multimap.get_value(PREFIX_NAME)),
        phone=parse_field(Phone, multimap.get_value(PREFIX_PHONE)),
        email=parse_field(Email, multimap.get_value(PREFIX_EMAIL)),
        module=parse_field(Module, multimap.get_value(PREFIX_MODULE)),
        year=parse_field(Year, multimap.get_value(PREFIX_YEAR)),
        student_id=parse_field(StudentId, multimap.get_value(PREFIX_STUDENT_ID)),
        comment=Comment.empty(),
        teaching_nomination=parse_field(
            TeachingNomination, multimap.get_value(PREFIX_TEACHING_NOMINATION)
        ),
        tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )

    return AddCommand(tutor)


def parse_edit_command(arguments: str) -> EditCommand:
    multimap = tokenize(arguments, *_TUTOR_FIELD_PREFIXES, PREFIX_TAG)

    try:
        index = parse_index(multimap.preamble)
    except ParseError:
        raise _invalid_format(EditCommand.MESSAGE_USAGE)

    multimap.verify_no_duplicate_prefixes(*_TUTOR_FIELD_PREFIXES)

    descriptor = EditTutorDescriptor()
    field_slots = (
        (PREFIX_NAME, Name, "name"),
        (PREFIX_PHONE, Phone, "phone"),
        (PREFIX_EMAIL, Email, "email"),
        (PREFIX_MODULE, Module, "module"),
        (PREFIX_YEAR, Year, "year"),
        (PREFIX_STUDENT_ID, StudentId, "student_id"),
        (PREFIX_TEACHING_NOMINATION, TeachingNomination, "teaching_nomination"),
    )

    for prefix, field_type, slot in field_slots:
        raw = multimap.get_value(prefix)

        if raw is not None:
            setattr(descriptor, slot, parse_field(field_type, raw))

    descriptor.tags = _parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG))

    if not descriptor.is_any_field_edited():
        raise NoFieldsEdited()

    return EditCommand(index, descriptor)


def parse_comment_command(arguments: str) -> CommentCommand:
    multimap = tokenize(arguments, PREFIX_COMMENT)

    try:
        index = parse_index(multimap.preamble)
    except ParseError:
        raise _invalid_format(CommentCommand.MESSAGE_USAGE)

    if not multimap.has(PREFIX_COMMENT):
        raise _invalid_format(CommentCommand.MESSAGE_USAGE)

    multimap.verify_no_duplicate_prefixes(PREFIX_COMMENT)

    return CommentCommand(index, parse_field(Comment, multimap.get_value(PREFIX_COMMENT)))


def parse_delete_command(arguments: str) -> DeleteCommand:
    try:
        return DeleteCommand(parse_index(arguments))
    except ParseError:
        raise _invalid_format(DeleteCommand.MESSAGE_USAGE)


def parse_find_command(arguments: str) -> FindCommand:
    keywords = arguments.split()

    if not keywords:
        raise _invalid_format(FindCommand.MESSAGE_USAGE)

    return FindCommand(NameContainsKeywordsPredicate(keywords))


def parse_find_by_module_command(arguments: str) -> FindByModuleCommand:
    keywords = arguments.split()

    if not keywords:
        raise _invalid_format(FindByModuleCommand.MESSAGE_USAGE)

    return FindByModuleCommand(ModuleContainsKeywordPredicate(keywords))


def parse_sort_command(arguments: str) -> SortCommand:
    multimap = tokenize(arguments, PREFIX_ASCENDING, PREFIX_DESCENDING)

    ascending = multimap.get_all_values(PREFIX_ASCENDING)
    descending = multimap.get_all_values(PREFIX_DESCENDING)

    if multimap.preamble or len(ascending) + len(descending) != 1:
        raise _invalid_format(SortCommand.MESSAGE_USAGE)

    reverse = bool(descending)
    field = (descending or ascending)[0].lower()

    if field not in SORT_KEYS:
        raise ParseError(
            f"Tutors can only be sorted by one of: {', '.join(SORT_KEYS)}"
        )

    return SortCommand(field, reverse)


def command_usages() -> list[str]:
    return [command.MESSAGE_USAGE for command in _COMMANDS]


def parse_command(user_input: str) -> Command:
    """
    Parses a full line of user input into a `Command`.

    Raises:
        ParseError: If the input is blank, the command word is unknown, or the arguments are invalid.
        NoFieldsEdited: If an `edit` command changes no field.
    """
    matched = _COMMAND_FORMAT.fullmatch(user_input.strip())

    if matched is None:
        raise _invalid_format(HelpCommand.MESSAGE_USAGE)

    command_word = matched.group("command_word")
    arguments = matched.group("arguments")

    logger.debug("Parsing command word %r with arguments %r", command_word, arguments)

    match command_word:
        case AddCommand.COMMAND_WORD:
            return parse_add_command(arguments)
        case EditCommand.COMMAND_WORD:
            return parse_edit_command(arguments)
        case CommentCommand.COMMAND_WORD:
            return parse_comment_command(arguments)
        case DeleteCommand.COMMAND_WORD:
            return parse_delete_command(arguments)
        case FindCommand.COMMAND_WORD:
            return parse_find_command(arguments)
        case FindByModuleCommand.COMMAND_WORD:
            return parse_find_by_module_command(arguments)
        case SortCommand.COMMAND_WORD:
            return parse_sort_command(arguments)
        case ListCommand.COMMAND_WORD:
            return ListCommand()
        case ClearCommand.COMMAND_WORD:
            return ClearCommand()
        case HelpCommand.COMMAND_WORD:
            return HelpCommand(command_usages())
        case ExitCommand.COMMAND_WORD:
            return ExitCommand()
        case _:
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
