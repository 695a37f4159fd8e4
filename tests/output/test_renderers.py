"""Tests for the Rich outcome renderers."""

from vouch.constraints import between, exact_length, min_length, not_blank
from vouch.domain.catalog import DEFAULT_CATALOG, MessageCatalog
from vouch.domain.messages import Text
from vouch.domain.outcome import Failure, Success
from vouch.output.renderers import render_catalog, render_messages, render_outcome


def _user_failure() -> Failure:
    name = min_length(3).named("name").validate("ab")
    age = between(0, 150).named("age").validate(200)
    return Failure([*name.messages, *age.messages])


class TestRenderOutcome:
    def test_success(self) -> None:
        assert render_outcome(Success(3)) == "OK"

    def test_success_verbose_shows_value(self) -> None:
        assert "value: 3" in render_outcome(Success(3), verbose=True)

    def test_failure_lines(self) -> None:
        lines = render_outcome(_user_failure()).splitlines()
        assert lines[0] == "FAILED  2 violations"
        assert lines[1] == "  name: must be at least 3 characters  vouch.string.min_length"
        assert lines[2] == "  age: must be between 0 and 150  vouch.number.between"

    def test_singular(self) -> None:
        output = render_outcome(not_blank().validate(" "))
        assert output.splitlines()[0] == "FAILED  1 violation"

    def test_root_location_when_no_path(self) -> None:
        failure = Failure([Text(content="bad", root="Order")])
        assert "  Order: bad" in render_outcome(failure)

    def test_verbose_shows_input_and_cause(self) -> None:
        failure = Failure([Text(content="boom", cause=RuntimeError("boom"), input=7)])
        output = render_outcome(failure, verbose=True)
        assert "input=7" in output
        assert "cause: RuntimeError('boom')" in output

    def test_catalog_override(self) -> None:
        catalog = DEFAULT_CATALOG.merged({"vouch.string.not_blank": "darf nicht leer sein"})
        output = render_outcome(not_blank().validate(""), catalog=catalog)
        assert "darf nicht leer sein" in output

    def test_composite_branches(self) -> None:
        output = render_outcome((min_length(5) | exact_length(1)).validate("abc"))
        assert "vouch.or" in output
        assert "any of" in output
        assert "branch 1" in output
        assert "branch 2" in output
        assert "must be exactly 1 characters" in output


class TestRenderMessages:
    def test_no_status_line(self) -> None:
        output = render_messages(_user_failure().messages)
        assert "FAILED" not in output
        assert len(output.splitlines()) == 2


class TestRenderCatalog:
    def test_prefix_filter(self) -> None:
        output = render_catalog(DEFAULT_CATALOG, prefix="vouch.number")
        assert "vouch.number.between" in output
        assert "vouch.string.min_length" not in output

    def test_custom_catalog(self) -> None:
        output = render_catalog(MessageCatalog({"app.code": "bad code"}))
        assert "app.code" in output
        assert "bad code" in output
