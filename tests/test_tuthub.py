# tests/test_tuthub.py

import json

import pytest

from conftest import make_tutor
from core.errors import DuplicateRecord
from core.response import ErrorCode
from models.predicates import ModuleContainsKeywordPredicate
from models.tuthub import Tuthub


def test_tuthub_init(sample_tuthub, sample_tutor):
    assert len(sample_tuthub) == 3
    assert sample_tuthub.tutors[0] == sample_tutor
    assert sample_tuthub.filtered_tutors == sample_tuthub.tutors
    assert not sample_tuthub.has_unsaved_changes


def test_tuthub_init_rejects_duplicates():
    with pytest.raises(DuplicateRecord):
        Tuthub([make_tutor(), make_tutor(name="Alex Clone")])


def test_tutors_returns_copy(sample_tuthub):
    sample_tuthub.tutors.clear()
    sample_tuthub.filtered_tutors.clear()

    assert len(sample_tuthub) == 3


# === data manipulators ===


def test_add_tutor(sample_tuthub):
    new_tutor = make_tutor(student_id="A3141592D")

    response = sample_tuthub.add_tutor(new_tutor)

    assert response.success
    assert response.data["record"] == new_tutor
    assert sample_tuthub.has_tutor(new_tutor)
    assert sample_tuthub.has_unsaved_changes


def test_add_tutor_duplicate(sample_tuthub):
    response = sample_tuthub.add_tutor(make_tutor(name="Other Name"))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_RECORD
    assert len(sample_tuthub) == 3
    assert not sample_tuthub.has_unsaved_changes


def test_remove_tutor(sample_tuthub, other_tutor):
    response = sample_tuthub.remove_tutor(other_tutor)

    assert response.success
    assert not sample_tuthub.has_tutor(other_tutor)


def test_remove_missing_tutor(sample_tuthub):
    response = sample_tuthub.remove_tutor(make_tutor(student_id="A3141592D"))

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


def test_set_tutor_replaces_in_place(sample_tuthub, other_tutor):
    edited = make_tutor(
        name="Bernice Tan",
        student_id=other_tutor.student_id.value,
        module="CS2105",
    )

    response = sample_tuthub.set_tutor(other_tutor, edited)

    assert response.success
    assert sample_tuthub.tutors[1] == edited
    assert sample_tuthub.has_unsaved_changes


def test_set_tutor_rejects_collision(sample_tuthub, sample_tutor, other_tutor):
    before = sample_tuthub.tutors
    collides = make_tutor(student_id=other_tutor.student_id.value)

    response = sample_tuthub.set_tutor(sample_tutor, collides)

    assert response.error is ErrorCode.DUPLICATE_RECORD
    assert sample_tuthub.tutors == before
    assert not sample_tuthub.has_unsaved_changes


def test_set_tutor_missing_target(sample_tuthub):
    missing = make_tutor(student_id="A3141592D")

    response = sample_tuthub.set_tutor(missing, missing)

    assert response.error is ErrorCode.NOT_FOUND


def test_clear(sample_tuthub):
    sample_tuthub.clear()

    assert len(sample_tuthub) == 0
    assert sample_tuthub.has_unsaved_changes


# === displayed view ===


def test_filter_and_sort(sample_tuthub, sample_tutor, other_tutor, third_tutor):
    sample_tuthub.update_sort(lambda tutor: tutor.year.as_int)
    assert sample_tuthub.filtered_tutors == [third_tutor, other_tutor, sample_tutor]

    sample_tuthub.update_filter(ModuleContainsKeywordPredicate(["cs"]))
    assert sample_tuthub.filtered_tutors == [other_tutor, sample_tutor]

    sample_tuthub.update_sort(lambda tutor: tutor.year.as_int, reverse=True)
    assert sample_tuthub.filtered_tutors == [sample_tutor, other_tutor]

    sample_tuthub.update_filter(None)
    sample_tuthub.update_sort(None)
    assert sample_tuthub.filtered_tutors == sample_tuthub.tutors


def test_sort_is_stable():
    tutors = [
        make_tutor(name="B", student_id="A1000000A", year="2"),
        make_tutor(name="A", student_id="A2000000A", year="2"),
        make_tutor(name="C", student_id="A3000000A", year="1"),
    ]
    tuthub = Tuthub(tutors)

    tuthub.update_sort(lambda tutor: tutor.year.as_int)

    assert [t.name.value for t in tuthub.filtered_tutors] == ["C", "B", "A"]


# === persistence ===


def test_save_and_load(tmp_path, sample_tuthub):
    data_path = tmp_path / "nested" / "tuthub.json"
    sample_tuthub.add_tutor(make_tutor(student_id="A3141592D"))

    save_response = sample_tuthub.save(str(data_path))

    assert save_response.success
    assert not sample_tuthub.has_unsaved_changes

    load_response = Tuthub.load(str(data_path))

    assert load_response.success
    loaded = load_response.data["tuthub"]
    assert loaded.tutors == sample_tuthub.tutors
    assert not loaded.has_unsaved_changes


def test_saved_file_layout(tmp_path, sample_tutor):
    data_path = tmp_path / "tuthub.json"
    Tuthub([sample_tutor]).save(str(data_path))

    payload = json.loads(data_path.read_text())

    assert list(payload) == ["tutors"]
    assert payload["tutors"][0]["student_id"] == "A1234567X"
    assert payload["tutors"][0]["comment"] == "Great at explaining pipelining"


def test_load_missing_file(tmp_path):
    response = Tuthub.load(str(tmp_path / "absent.json"))

    assert response.success
    assert len(response.data["tuthub"]) == 0


def test_load_malformed_json(tmp_path):
    data_path = tmp_path / "tuthub.json"
    data_path.write_text("{not json")

    response = Tuthub.load(str(data_path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


@pytest.mark.parametrize("payload", [[], {"people": []}, {"tutors": {}}])
def test_load_wrong_shape(tmp_path, payload):
    data_path = tmp_path / "tuthub.json"
    data_path.write_text(json.dumps(payload))

    response = Tuthub.load(str(data_path))

    assert response.error is ErrorCode.INVALID_INPUT


def test_load_invalid_record(tmp_path, sample_tutor):
    record = sample_tutor.to_dict()
    record["year"] = "9"
    data_path = tmp_path / "tuthub.json"
    data_path.write_text(json.dumps({"tutors": [record]}))

    response = Tuthub.load(str(data_path))

    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_load_duplicate_records(tmp_path, sample_tutor):
    record = sample_tutor.to_dict()
    data_path = tmp_path / "tuthub.json"
    data_path.write_text(json.dumps({"tutors": [record, record]}))

    response = Tuthub.load(str(data_path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_load_unreadable_path(tmp_path):
    response = Tuthub.load(str(tmp_path))

    assert response.error is ErrorCode.INTERNAL_ERROR


def test_save_failure_keeps_unsaved_changes(tmp_path, sample_tuthub):
    sample_tuthub.clear()

    response = sample_tuthub.save(str(tmp_path))

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert sample_tuthub.has_unsaved_changes


def test_load_rejects_string_tags(tmp_path, sample_tutor):
    record = sample_tutor.to_dict()
    record["tags"] = "abc"
    data_path = tmp_path / "tuthub.json"
    data_path.write_text(json.dumps({"tutors": [record]}))

    response = Tuthub.load(str(data_path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
