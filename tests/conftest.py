# tests/conftest.py

import pytest

from models.fields import (
    Comment,
    Email,
    Module,
    Name,
    Phone,
    StudentId,
    Tag,
    TeachingNomination,
    Year,
)
from models.tuthub import Tuthub
from models.tutor import Tutor


def make_tutor(
    name="Alex Yeoh",
    phone="87438807",
    email="alexyeoh@example.com",
    module="CS2100",
    year="3",
    student_id="A1234567X",
    comment="",
    teaching_nomination="1",
    tags=("friends",),
) -> Tutor:
    return Tutor(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        module=Module(module),
        year=Year(year),
        student_id=StudentId(student_id),
        comment=Comment(comment),
        teaching_nomination=TeachingNomination(teaching_nomination),
        tags=[Tag(tag) for tag in tags],
    )


@pytest.fixture
def sample_tutor():
    return make_tutor(comment="Great at explaining pipelining")


@pytest.fixture
def other_tutor():
    return make_tutor(
        name="Bernice Yu",
        phone="99272758",
        email="berniceyu@example.com",
        module="CS2105",
        year="2",
        student_id="A7654321B",
        teaching_nomination="4",
        tags=("colleagues", "friends"),
    )


@pytest.fixture
def third_tutor():
    return make_tutor(
        name="Charlotte Oliveiro",
        phone="93210283",
        email="charlotte@example.com",
        module="MA1521",
        year="1",
        student_id="A2468024C",
        teaching_nomination="0",
        tags=(),
    )


@pytest.fixture
def sample_tuthub(sample_tutor, other_tutor, third_tutor):
    return Tuthub([sample_tutor, other_tutor, third_tutor])


@pytest.fixture
def two_tutor_tuthub():
    first = make_tutor(name="X", module="CS1010", student_id="A1111111A")
    second = make_tutor(name="Y", module="CS2030", student_id="A2222222B")
    return Tuthub([first, second])
