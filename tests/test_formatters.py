# tests/test_formatters.py

import core.formatters as formatters
import cli.model_formatters as model_formatters
from conftest import make_tutor


def test_format_list_with_and():
    assert formatters.format_list_with_and([]) == ""
    assert formatters.format_list_with_and(["a"]) == "a"
    assert formatters.format_list_with_and(["a", "b"]) == "a and b"
    assert formatters.format_list_with_and(["a", "b", "c"]) == "a, b, and c"


def test_format_count():
    assert formatters.format_count(1, "tutor") == "1 tutor"
    assert formatters.format_count(0, "tutor") == "0 tutors"
    assert formatters.format_count(2, "entry", "entries") == "2 entries"


def test_format_tutor_oneline(other_tutor):
    line = model_formatters.format_tutor_oneline(other_tutor)

    assert line.startswith("Bernice Yu")
    assert "CS2105" in line
    assert "A7654321B" in line
    assert line.endswith("[colleagues and friends]")


def test_format_tutor_multiline(sample_tutor):
    text = model_formatters.format_tutor_multiline(sample_tutor)

    assert text.splitlines()[0] == "Tutor Alex Yeoh:"
    assert "... Comment: Great at explaining pipelining" in text
    assert "... Tags: friends" in text


def test_format_tutor_multiline_placeholders():
    text = model_formatters.format_tutor_multiline(make_tutor(tags=()))

    assert "[NO COMMENT]" in text
    assert "[NO TAGS]" in text
