# tests/test_edit_descriptor.py

import pytest

from conftest import make_tutor
from core.edit_descriptor import EditTutorDescriptor, create_edited_tutor
from models.fields import (
    Email,
    Module,
    Name,
    Phone,
    StudentId,
    Tag,
    TeachingNomination,
    Year,
)


def test_new_descriptor_is_not_edited():
    descriptor = EditTutorDescriptor()

    assert not descriptor.is_any_field_edited()
    assert descriptor.name is None
    assert descriptor.tags is None


@pytest.mark.parametrize(
    "slot, value",
    [
        ("name", Name("Bob Choo")),
        ("phone", Phone("91234567")),
        ("email", Email("bob@example.com")),
        ("module", Module("CS2103T")),
        ("year", Year("2")),
        ("student_id", StudentId("A7654321B")),
        ("teaching_nomination", TeachingNomination("5")),
        ("tags", {Tag("husband")}),
        ("tags", set()),
    ],
)
def test_any_single_slot_marks_descriptor_edited(slot, value):
    descriptor = EditTutorDescriptor()
    setattr(descriptor, slot, value)

    assert descriptor.is_any_field_edited()


def test_assigning_none_clears_slot():
    descriptor = EditTutorDescriptor()
    descriptor.year = Year("2")
    descriptor.year = None

    assert descriptor.year is None
    assert not descriptor.is_any_field_edited()


def test_copy_has_independent_tags():
    original = EditTutorDescriptor()
    original.name = Name("Bob Choo")
    original.tags = {Tag("friends")}

    duplicate = original.copy()
    assert duplicate == original

    duplicate.tags = {Tag("owes"), Tag("friends")}

    assert original.tags == frozenset({Tag("friends")})
    assert duplicate != original


def test_tags_setter_copies_input():
    tags = {Tag("friends")}
    descriptor = EditTutorDescriptor()
    descriptor.tags = tags

    tags.add(Tag("owes"))

    assert descriptor.tags == frozenset({Tag("friends")})


def test_tags_read_back_is_read_only():
    descriptor = EditTutorDescriptor()
    descriptor.tags = {Tag("friends")}

    with pytest.raises(AttributeError):
        descriptor.tags.add(Tag("owes"))


def test_descriptor_equality():
    first = EditTutorDescriptor()
    second = EditTutorDescriptor()
    assert first == second

    first.phone = Phone("91234567")
    assert first != second

    second.phone = Phone("91234567")
    assert first == second

    # a cleared slot compares equal to a slot that was never set
    first.email = Email("bob@example.com")
    first.email = None
    assert first == second

    assert first != "descriptor"


# === overlay ===


def test_overlay_replaces_present_slots_only(sample_tutor):
    descriptor = EditTutorDescriptor()
    descriptor.phone = Phone("91234567")
    descriptor.tags = {Tag("senior")}

    edited = create_edited_tutor(sample_tutor, descriptor)

    assert edited.phone == Phone("91234567")
    assert edited.tags == frozenset({Tag("senior")})
    assert edited.name == sample_tutor.name
    assert edited.student_id == sample_tutor.student_id
    assert edited.comment == sample_tutor.comment

    # the target is untouched
    assert sample_tutor.phone == Phone("87438807")


def test_overlay_with_equal_values_is_a_no_op(sample_tutor):
    descriptor = EditTutorDescriptor()
    descriptor.name = sample_tutor.name
    descriptor.module = sample_tutor.module
    descriptor.tags = sample_tutor.tags

    assert create_edited_tutor(sample_tutor, descriptor) == sample_tutor


def test_overlay_with_empty_tag_set_clears_tags():
    tutor = make_tutor(tags=("friends", "owes"))
    descriptor = EditTutorDescriptor()
    descriptor.tags = set()

    assert create_edited_tutor(tutor, descriptor).tags == frozenset()
