"""Unit tests for append chaining and the punctuation guard."""

from __future__ import annotations

import inspect
from pathlib import Path
import warnings

import pytest

from datatext import (
    DataTextConfig,
    MissingTextWarning,
    PunctuationConflictWarning,
    Text,
    TextOperationError,
    UsageError,
)


def test_append_concatenates_and_returns_chainable_result() -> None:
    """Appending plain text should extend the content."""

    text = Text("Hello")

    result = text.append(", World")

    assert result.ok
    assert result.unwrap() is text
    assert text.as_string() == "Hello, World"


def test_appends_can_be_chained() -> None:
    """Successive appends should chain through the result."""

    text = Text()

    text.set("Hello ").append("World").append("!\n")

    assert text.as_string() == "Hello World!\n"


def test_append_to_unset_text_treats_content_as_empty() -> None:
    """Appending to a text that was never set should start from empty."""

    assert Text().append(".").as_string() == "."


def test_append_empty_string_always_succeeds() -> None:
    """Empty appends should succeed even after trailing punctuation."""

    text = Text("Hello,")

    assert text.append("").ok
    assert text.as_string() == "Hello,"
    assert Text().append("").as_string() == ""


@pytest.mark.parametrize(
    ("current", "attempted"),
    [
        ("Hello,", "."),
        ("Hello.", ","),
        ("Hello;", ";"),
        ("End. ", " ; more"),
        ("Mr.", ", Smith"),
    ],
)
def test_consecutive_punctuation_is_rejected(current: str, attempted: str) -> None:
    """Appending leading punctuation after trailing punctuation should fail."""

    text = Text(current)

    with pytest.warns(PunctuationConflictWarning):
        result = text.append(attempted)

    assert not result.ok
    assert result.text is text
    assert text.as_string() == current


@pytest.mark.parametrize(
    ("current", "attempted", "expected"),
    [
        ("Hello,", " World.", "Hello, World."),
        ("a. b", ", c", "a. b, c"),
        ("Hello!", ".", "Hello!."),
        ("Hello", "...", "Hello..."),
    ],
)
def test_non_adjacent_punctuation_is_allowed(
    current: str, attempted: str, expected: str
) -> None:
    """Only `. , ;` on both sides of the boundary should trip the guard."""

    assert Text(current).append(attempted).as_string() == expected


def test_conflict_warning_describes_both_sides_and_location() -> None:
    """The warning should name current content, attempted text and provenance."""

    text = Text("Hello,")

    with pytest.warns(PunctuationConflictWarning) as record:
        text.append(".")

    warning = record[0].message
    assert warning.current == "Hello,"
    assert warning.attempted == "."
    assert warning.location == text.location
    assert "'Hello,'" in str(warning)
    assert "'.'" in str(warning)
    assert Path(record[0].filename).name == Path(__file__).name


def test_guard_can_be_disabled_by_config() -> None:
    """With the guard off, punctuation should be appended as-is."""

    text = Text("Hello,", config=DataTextConfig(punctuation_guard=False))

    assert text.append(".").as_string() == "Hello,."


def test_failed_chain_short_circuits() -> None:
    """Calls after a failure should not run."""

    text = Text("Hi,")

    with pytest.warns(PunctuationConflictWarning) as record:
        result = text.append(";").append(" there").appendconjunction("a", "b")

    assert len(record) == 1
    assert not result.ok
    assert text.as_string() == "Hi,"


def test_unwrap_of_failed_result_raises() -> None:
    """Unwrapping a failed result should surface the warning as an error."""

    with pytest.warns(PunctuationConflictWarning):
        result = Text("a.").append(".")

    with pytest.raises(TextOperationError, match="consecutive punctuation") as excinfo:
        result.unwrap()

    assert excinfo.value.failure is result.failure


@pytest.mark.parametrize("value", [None, [], ()])
def test_append_without_text_warns(value: object) -> None:
    """Missing values and empty sequences should be rejected."""

    text = Text()

    with pytest.warns(MissingTextWarning):
        result = text.append(value)

    assert not result.ok
    assert text.as_string() is None


def test_append_without_arguments_is_a_usage_error() -> None:
    """Calling append with nothing at all is a programming error."""

    with pytest.raises(UsageError):
        Text().append()


def test_append_list_concatenates_each_element() -> None:
    """List elements should be appended in order."""

    assert Text("a").append(["b", "c", Text("d")]).as_string() == "abcd"


def test_append_list_is_all_or_nothing() -> None:
    """A conflict part-way through a list should undo the earlier elements."""

    text = Text("x")

    with pytest.warns(PunctuationConflictWarning):
        result = text.append(["a,", ".", "b"])

    assert not result.ok
    assert text.as_string() == "x"


def test_append_resolves_text_values_and_scalars() -> None:
    """Text values and plain scalars should be appended as strings."""

    assert Text("a").append(Text("b")).as_string() == "ab"
    assert Text("n=").append(3).as_string() == "n=3"
    assert Text("a").append(text="b").as_string() == "ab"
    assert Text("a").append({"text": "b"}).as_string() == "ab"


def test_append_records_caller_location() -> None:
    """Provenance should point at the calling line outside the package."""

    text = Text()
    text.append("x")
    expected_line = inspect.currentframe().f_lineno - 1

    assert text.location is not None
    assert Path(text.location.origin).name == Path(__file__).name
    assert text.location.line == expected_line


def test_failed_append_keeps_previous_location() -> None:
    """A rejected append should not move the recorded provenance."""

    text = Text("a,")
    location = text.location

    with pytest.warns(PunctuationConflictWarning):
        text.append(",")

    assert text.location == location


def test_append_list_is_restored_when_warnings_raise() -> None:
    """Escalated warnings should still leave the text as it was before the call."""

    text = Text("x")
    location = text.location

    with warnings.catch_warnings():
        warnings.simplefilter("error", PunctuationConflictWarning)
        with pytest.raises(PunctuationConflictWarning):
            text.append(["a,", "."])

    assert text.as_string() == "x"
    assert text.location == location


def test_set_list_is_restored_when_warnings_raise() -> None:
    """A raising warning filter should not leave a half-built content behind."""

    text = Text("keep")

    with warnings.catch_warnings():
        warnings.simplefilter("error", PunctuationConflictWarning)
        with pytest.raises(PunctuationConflictWarning):
            text.set(["a,", "; b"])

    assert text.as_string() == "keep"


def test_nested_list_is_restored_when_warnings_raise() -> None:
    """Restoration should cover elements appended by an outer list too."""

    text = Text("x")

    with warnings.catch_warnings():
        warnings.simplefilter("error", PunctuationConflictWarning)
        with pytest.raises(PunctuationConflictWarning):
            text.append(["a", ["b,", ";"]])

    assert text.as_string() == "x"
