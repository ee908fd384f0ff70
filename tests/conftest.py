"""Pytest fixtures for git-status-pane tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from git_status_pane.models.git_state import BranchStatus, Delta, Diff, Hunk, Status
from git_status_pane.services.git_service import GitService


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'recent_commits': 5,
        'interactive': False,
        'refresh_interval': None,
    }


def commit_file(repo, name, content, message):
    """Write a file in the work tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_upstream(git_repo, temp_dir):
    """Repository whose main branch tracks origin/main in a bare repository."""
    remote_path = temp_dir / "remote.git"
    git.Repo.init(remote_path, bare=True)
    git_repo.create_remote('origin', str(remote_path))
    git_repo.git.push('-u', 'origin', 'main')
    yield git_repo


@pytest.fixture
def git_repo_with_conflict(git_repo):
    """Repository stopped in the middle of a conflicting merge of 'feature' into main."""
    repo = git_repo
    repo.git.checkout('-b', 'feature')
    commit_file(repo, "README.md", "# Feature version\n", "Change README on feature")

    repo.git.checkout('main')
    commit_file(repo, "README.md", "# Main version\n", "Change README on main")

    with pytest.raises(git.exc.GitCommandError):
        repo.git.merge('feature')

    yield repo


def make_diff(*paths):
    """Diff with one single-hunk delta per path."""
    deltas = []
    for path in paths:
        deltas.append(
            Delta(
                old_file=path,
                new_file=path,
                hunks=[Hunk(path, "@@ -1 +1 @@", f"-old {path}\n+new {path}")],
            )
        )
    return Diff(deltas=deltas)


@pytest.fixture
def mock_git_service(mock_config):
    """Create a mock GitService describing a clean repository on main."""
    service = Mock(spec=GitService)
    service.config = mock_config

    service.status = Mock(return_value=Status(branch_status=BranchStatus(local="main")))
    service.rebase_status = Mock(return_value=None)
    service.merge_status = Mock(return_value=None)
    service.diff_unstaged = Mock(return_value=Diff())
    service.diff_staged = Mock(return_value=Diff())
    service.log_recent = Mock(return_value="")

    return service
