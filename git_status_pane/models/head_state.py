"""Head state: what the first rows of the status pane describe.

Exactly one of ``Rebasing``, ``Merging`` or ``BranchSummary`` applies to a build.
``BranchSummary`` wraps one of ``NoBranch``, ``OnBranch`` or ``Tracking``; a
remote tracking branch without a local branch has no variant.
"""
from dataclasses import dataclass
from typing import Union

from git_status_pane.exceptions import InvariantViolation
from git_status_pane.models.git_state import BranchStatus


@dataclass(frozen=True)
class NoBranch:
    """Detached HEAD."""


@dataclass(frozen=True)
class OnBranch:
    """A local branch without upstream."""
    local: str


@dataclass(frozen=True)
class Tracking:
    """A local branch with an upstream."""
    local: str
    remote: str
    ahead: int = 0
    behind: int = 0


BranchState = Union[NoBranch, OnBranch, Tracking]


@dataclass(frozen=True)
class Rebasing:
    head_name: str
    onto: str


@dataclass(frozen=True)
class Merging:
    head: str


@dataclass(frozen=True)
class BranchSummary:
    branch: BranchState


HeadState = Union[Rebasing, Merging, BranchSummary]


def branch_state_from_status(status: BranchStatus) -> BranchState:
    """Classify a branch status.

    Raises:
        InvariantViolation: if a remote is reported without a local branch
    """
    if status.local is None:
        if status.remote is not None:
            raise InvariantViolation(
                f"remote '{status.remote}' reported without a local branch"
            )
        return NoBranch()
    if status.remote is None:
        return OnBranch(status.local)
    return Tracking(status.local, status.remote, status.ahead, status.behind)
