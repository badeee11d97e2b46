# tests/test_tutor.py

import pytest

from conftest import make_tutor
from core.errors import ConstraintViolation
from models.fields import Comment, Name, Tag
from models.tutor import Tutor


def test_tutor_accessors(sample_tutor):
    assert sample_tutor.name == Name("Alex Yeoh")
    assert sample_tutor.module.value == "CS2100"
    assert sample_tutor.student_id.value == "A1234567X"
    assert sample_tutor.comment == Comment("Great at explaining pipelining")
    assert sample_tutor.tags == frozenset({Tag("friends")})


def test_tutor_requires_every_field(sample_tutor):
    with pytest.raises(TypeError):
        Tutor(
            name=sample_tutor.name,
            phone=None,
            email=sample_tutor.email,
            module=sample_tutor.module,
            year=sample_tutor.year,
            student_id=sample_tutor.student_id,
            comment=sample_tutor.comment,
            teaching_nomination=sample_tutor.teaching_nomination,
        )


def test_tutor_tags_are_copied_in():
    tags = {Tag("friends")}
    tutor = make_tutor(tags=())
    tutor = Tutor(
        name=tutor.name,
        phone=tutor.phone,
        email=tutor.email,
        module=tutor.module,
        year=tutor.year,
        student_id=tutor.student_id,
        comment=tutor.comment,
        teaching_nomination=tutor.teaching_nomination,
        tags=tags,
    )

    tags.add(Tag("owes"))

    assert tutor.tags == frozenset({Tag("friends")})
    assert isinstance(tutor.tags, frozenset)


def test_tutor_is_immutable(sample_tutor):
    with pytest.raises(AttributeError):
        sample_tutor.name = Name("Bernice Yu")

    with pytest.raises(AttributeError):
        sample_tutor._tags = frozenset()


# === comparisons ===


def test_is_same_tutor_uses_student_id(sample_tutor):
    renamed = make_tutor(name="Somebody Else", module="MA1521", comment="x")
    other_id = make_tutor(student_id="A7654321B")

    assert sample_tutor.is_same_tutor(sample_tutor)
    assert sample_tutor.is_same_tutor(renamed)
    assert not sample_tutor.is_same_tutor(other_id)
    assert not sample_tutor.is_same_tutor(None)


def test_equality_covers_every_field(sample_tutor):
    assert sample_tutor == make_tutor(comment="Great at explaining pipelining")
    assert hash(sample_tutor) == hash(
        make_tutor(comment="Great at explaining pipelining")
    )

    # same tutor, different state
    assert sample_tutor != make_tutor(comment="Different comment")
    assert sample_tutor != make_tutor(
        comment="Great at explaining pipelining", tags=("friends", "owes")
    )
    assert sample_tutor != make_tutor(
        comment="Great at explaining pipelining", phone="91234567"
    )
    assert sample_tutor != "Alex Yeoh"


def test_tag_order_does_not_matter():
    assert make_tutor(tags=("a", "b")) == make_tutor(tags=("b", "a"))


# === persistence and import ===


def test_tutor_to_dict(sample_tutor):
    data = sample_tutor.to_dict()

    assert data["name"] == "Alex Yeoh"
    assert data["student_id"] == "A1234567X"
    assert data["comment"] == "Great at explaining pipelining"
    assert data["tags"] == ["friends"]


def test_tutor_from_dict(sample_tutor):
    assert Tutor.from_dict(sample_tutor.to_dict()) == sample_tutor


def test_tutor_from_dict_revalidates(sample_tutor):
    data = sample_tutor.to_dict()
    data["student_id"] = "B1234567X"

    with pytest.raises(ConstraintViolation):
        Tutor.from_dict(data)


def test_tutor_from_dict_missing_key(sample_tutor):
    data = sample_tutor.to_dict()
    del data["email"]

    with pytest.raises(KeyError):
        Tutor.from_dict(data)


def test_tutor_to_str(sample_tutor):
    rendered = str(sample_tutor)

    assert rendered.startswith("Alex Yeoh; Phone: 87438807;")
    assert "Student ID: A1234567X" in rendered
    assert "Comment: Great at explaining pipelining" in rendered
    assert rendered.endswith("Tags: [friends]")


def test_tutor_to_str_without_comment_or_tags():
    rendered = str(make_tutor(tags=()))

    assert "Comment" not in rendered
    assert "Tags" not in rendered


@pytest.mark.parametrize("tags", ["abc", {"friends": True}, None])
def test_tutor_from_dict_rejects_non_list_tags(sample_tutor, tags):
    data = sample_tutor.to_dict()
    data["tags"] = tags

    with pytest.raises(TypeError):
        Tutor.from_dict(data)
