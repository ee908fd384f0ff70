"""Tests for head section formatting"""
import pytest

from git_status_pane.constants import ID_BRANCH_STATUS, StyleTag
from git_status_pane.exceptions import InvariantViolation
from git_status_pane.formatters import (
    branch_status_rows,
    format_tracking_description,
    head_state_rows,
)
from git_status_pane.models.git_state import BranchStatus
from git_status_pane.models.head_state import (
    BranchSummary,
    Merging,
    NoBranch,
    OnBranch,
    Rebasing,
    Tracking,
    branch_state_from_status,
)


class TestBranchStateClassification:
    """Test the four local/remote combinations."""

    def test_no_branch(self):
        assert branch_state_from_status(BranchStatus()) == NoBranch()

    def test_local_only(self):
        assert branch_state_from_status(BranchStatus(local="main")) == OnBranch("main")

    def test_tracking(self):
        status = BranchStatus(local="main", remote="origin/main", ahead=1, behind=2)
        assert branch_state_from_status(status) == Tracking("main", "origin/main", 1, 2)

    def test_remote_without_local_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            branch_state_from_status(BranchStatus(remote="origin/main"))


class TestBranchStatusRows:
    """Test rows produced for the branch summary."""

    def test_no_branch_is_single_unselectable_row(self):
        rows = branch_status_rows(BranchStatus())

        assert len(rows) == 1
        assert rows[0].display.plain == "No branch"
        assert rows[0].is_selectable is False
        assert rows[0].depth == 0

    def test_on_branch_without_remote(self):
        rows = branch_status_rows(BranchStatus(local="feature/x"))

        assert len(rows) == 1
        assert rows[0].display.plain == "On branch feature/x"
        assert rows[0].is_section_header is True
        assert rows[0].identity == ID_BRANCH_STATUS

    def test_on_branch_with_remote_adds_description(self):
        rows = branch_status_rows(BranchStatus(local="main", remote="origin/main"))

        assert [row.display.plain for row in rows] == [
            "On branch main",
            "Your branch is up to date with 'origin/main'.",
        ]
        description = rows[1]
        assert description.depth == 1
        assert description.is_selectable is False
        assert description.is_section_header is False

    def test_header_is_bold_section_style(self):
        rows = branch_status_rows(BranchStatus(local="main"))
        span = rows[0].display.spans[0]

        assert span.style == StyleTag.SECTION
        assert span.bold is True

    def test_remote_without_local_raises(self):
        with pytest.raises(InvariantViolation):
            branch_status_rows(BranchStatus(remote="origin/main", ahead=1))


class TestTrackingDescription:
    """Test the ahead/behind wording."""

    def test_up_to_date(self):
        assert (
            format_tracking_description("origin/main", 0, 0)
            == "Your branch is up to date with 'origin/main'."
        )

    def test_ahead_keeps_singular_commit(self):
        assert (
            format_tracking_description("origin/main", 3, 0)
            == "Your branch is ahead of 'origin/main' by 3 commit."
        )

    def test_behind(self):
        assert (
            format_tracking_description("origin/main", 0, 1)
            == "Your branch is behind 'origin/main' by 1 commit."
        )

    def test_diverged_is_two_lines(self):
        text = format_tracking_description("origin/main", 2, 5)

        assert text == (
            "Your branch and 'origin/main' have diverged,\n"
            "and have 2 and 5 different commits each, respectively."
        )
        assert len(text.split("\n")) == 2


class TestHeadStateRows:
    """Test dispatch over the head state."""

    def test_rebasing(self):
        rows = head_state_rows(Rebasing("feature", "main"))

        assert len(rows) == 1
        assert rows[0].display.plain == "Rebasing feature onto main"
        assert rows[0].display.spans[0].bold is True
        assert rows[0].is_section_header is False
        assert rows[0].is_selectable is False
        assert rows[0].action_target is None

    def test_merging(self):
        rows = head_state_rows(Merging("feature"))

        assert len(rows) == 1
        assert rows[0].display.plain == "Merging feature"
        assert rows[0].is_section_header is False
        assert rows[0].is_selectable is False

    def test_branch_summary(self):
        rows = head_state_rows(BranchSummary(Tracking("main", "origin/main", 0, 4)))

        assert rows[1].display.plain == "Your branch is behind 'origin/main' by 4 commit."

    def test_unknown_state(self):
        with pytest.raises(TypeError):
            head_state_rows(object())
