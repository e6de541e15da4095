"""Tests for joke and login field validation."""

import pytest

from joke_board.domain.submissions import JokeFields
from joke_board.services.validation import (
    validate_joke_content,
    validate_joke_fields,
    validate_joke_name,
    validate_login_fields,
)


@pytest.mark.parametrize("name", ["", "A"])
def test_short_names_are_rejected(name: str) -> None:
    assert validate_joke_name(name) is not None


@pytest.mark.parametrize("name", ["Al", "Alonzo", "x" * 200])
def test_names_of_two_or_more_characters_pass(name: str) -> None:
    assert validate_joke_name(name) is None


@pytest.mark.parametrize("content", ["", "short", "123456789"])
def test_short_content_is_rejected(content: str) -> None:
    assert validate_joke_content(content) is not None


@pytest.mark.parametrize("content", ["1234567890", "A sufficiently long joke body"])
def test_content_of_ten_or_more_characters_passes(content: str) -> None:
    assert validate_joke_content(content) is None


def test_field_errors_report_every_failure_together() -> None:
    errors = validate_joke_fields(JokeFields(name="A", content="short"))

    assert errors.has_errors
    assert errors.name is not None
    assert errors.content is not None


def test_field_errors_only_flag_the_failing_field() -> None:
    errors = validate_joke_fields(JokeFields(name="Al", content="short"))

    assert errors.has_errors
    assert errors.name is None
    assert errors.content is not None


def test_valid_fields_have_no_errors() -> None:
    errors = validate_joke_fields(
        JokeFields(name="Alonzo", content="A sufficiently long joke body")
    )

    assert not errors.has_errors


def test_login_fields_validation() -> None:
    assert not validate_login_fields("kody", "twixrox").has_errors
    errors = validate_login_fields("ko", "pw")
    assert errors.username is not None
    assert errors.password is not None
