"""Unit tests for status transitions and version invariants."""

from types import SimpleNamespace

import pytest

from landing_factory.domain.exceptions import InvariantViolation
from landing_factory.domain.invariants.build import assert_next_build_number
from landing_factory.domain.invariants.page import assert_page_versions
from landing_factory.domain.lifecycle.autopost import assert_run_transition
from landing_factory.domain.lifecycle.build import assert_build_transition
from landing_factory.domain.lifecycle.page import assert_page_transition
from landing_factory.utils.versioning import select_authoritative_version


def _version(number, published=False):
    return SimpleNamespace(version_number=number, is_published=published)


@pytest.mark.unit
class TestTransitions:
    """Allowed and rejected status changes."""

    def test_build_terminal_states(self) -> None:
        """Published and failed builds never change again."""
        assert_build_transition(from_status="queued", to_status="ready")
        assert_build_transition(from_status="ready", to_status="published")

        with pytest.raises(ValueError):
            assert_build_transition(from_status="published", to_status="failed")
        with pytest.raises(ValueError):
            assert_build_transition(from_status="failed", to_status="published")

    def test_run_finishes_once(self) -> None:
        """A run leaves ``running`` exactly once."""
        assert_run_transition(from_status="running", to_status="success")

        with pytest.raises(ValueError):
            assert_run_transition(from_status="success", to_status="failed")

    def test_page_republish_allowed(self) -> None:
        """Republishing a page is a no-op transition."""
        assert_page_transition(from_status="draft", to_status="published")
        assert_page_transition(from_status="published", to_status="published")

        with pytest.raises(ValueError):
            assert_page_transition(from_status="published", to_status="draft")


@pytest.mark.unit
class TestVersionInvariants:
    """Version numbering and publication."""

    def test_consecutive_versions_pass(self) -> None:
        """1..n with a single published version is valid."""
        page = SimpleNamespace(versions=[_version(1), _version(2, True), _version(3)])

        assert_page_versions(page)

    def test_gap_in_versions(self) -> None:
        """Version numbers must not skip."""
        with pytest.raises(InvariantViolation):
            assert_page_versions(SimpleNamespace(versions=[_version(1), _version(3)]))

    def test_two_published_versions(self) -> None:
        """At most one published version per page."""
        with pytest.raises(InvariantViolation):
            assert_page_versions(SimpleNamespace(versions=[_version(1, True), _version(2, True)]))

    def test_build_number_sequence(self) -> None:
        """Builds are numbered previous + 1, starting at 1."""
        assert_next_build_number(0, 1)
        assert_next_build_number(3, 4)

        with pytest.raises(InvariantViolation):
            assert_next_build_number(3, 3)

    def test_authoritative_version(self) -> None:
        """Published version first, else the newest, else nothing."""
        published = _version(1, True)

        assert select_authoritative_version([published, _version(2)]) is published
        assert select_authoritative_version([_version(1), _version(2)]).version_number == 2
        assert select_authoritative_version([]) is None
