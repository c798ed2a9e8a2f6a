"""
Tests for the concurrent clone dispatcher.

Feature: reapclone
"""

import asyncio
import sys
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from reapclone.exceptions import ConfigurationError
from reapclone.git import DEFAULT_CONCURRENCY, CloneDispatcher, clone_repository
from reapclone.testing import RecordingCloner, create_mock_repository
from reapclone.types.repos import Repository

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="needs a shell script")


@given(
    concurrency_limit=st.integers(min_value=1, max_value=6),
    repo_count=st.integers(min_value=0, max_value=12),
)
@settings(max_examples=25, deadline=None)
def test_in_flight_clones_never_exceed_limit(concurrency_limit: int, repo_count: int) -> None:
    """
    For any limit L and N repositories, at most L clones run at once and the
    report holds exactly N outcomes.
    """
    cloner = RecordingCloner(delay=0.002)
    repos = [create_mock_repository(f"repo-{i}") for i in range(repo_count)]
    dispatcher = CloneDispatcher(concurrency_limit=concurrency_limit, clone_fn=cloner)

    with tempfile.TemporaryDirectory() as tmp:
        report = dispatcher.clone_all(repos, tmp)

    assert cloner.max_in_flight <= concurrency_limit
    assert report.total == repo_count
    assert len(cloner.calls) == repo_count


def test_limit_of_two_with_five_repositories(tmp_path: Path) -> None:
    cloner = RecordingCloner(delay=0.02)
    repos = [create_mock_repository(f"repo-{i}") for i in range(5)]

    report = CloneDispatcher(concurrency_limit=2, clone_fn=cloner).clone_all(repos, tmp_path)

    assert cloner.max_in_flight == 2
    assert report.total == 5
    assert {o.clone_url for o in report.outcomes} == {r.clone_url for r in repos}


def test_failures_are_reported_not_raised(tmp_path: Path) -> None:
    repos = [create_mock_repository(f"repo-{i}") for i in range(4)]
    cloner = RecordingCloner(fail={repos[1].clone_url, repos[3].clone_url})

    report = CloneDispatcher(clone_fn=cloner).clone_all(repos, tmp_path)

    assert report.total == 4
    assert [o.clone_url for o in report.failed] == [repos[1].clone_url, repos[3].clone_url]
    assert len(report.succeeded) == 2


def test_raising_clone_unit_is_recorded_as_failure(tmp_path: Path) -> None:
    repos = [create_mock_repository(f"repo-{i}") for i in range(5)]
    recorder = RecordingCloner()

    async def flaky_clone(repository: Repository, destination: Path) -> bool:
        if repository is repos[2]:
            raise RuntimeError("boom")
        return await recorder(repository, destination)

    report = CloneDispatcher(concurrency_limit=2, clone_fn=flaky_clone).clone_all(
        repos, tmp_path
    )

    assert report.total == 5
    assert [o.clone_url for o in report.failed] == [repos[2].clone_url]
    assert len(recorder.calls) == 4


def test_destination_is_created(tmp_path: Path) -> None:
    destination = tmp_path / "nested" / "mirror"
    cloner = RecordingCloner()

    CloneDispatcher(clone_fn=cloner).clone_all([create_mock_repository()], destination)

    assert destination.is_dir()
    assert cloner.calls == [(create_mock_repository().clone_url, destination)]


def test_empty_repository_set(tmp_path: Path) -> None:
    report = CloneDispatcher(clone_fn=RecordingCloner()).clone_all([], tmp_path)
    assert report.total == 0
    assert report.outcomes == []


@pytest.mark.parametrize("limit", [0, -3])
def test_invalid_concurrency_limit(limit: int) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        CloneDispatcher(concurrency_limit=limit)
    assert exc_info.value.code == "INVALID_CONCURRENCY"


def test_default_concurrency() -> None:
    assert CloneDispatcher().concurrency_limit == DEFAULT_CONCURRENCY == 20


def test_aclone_all_serialises_with_limit_one(tmp_path: Path) -> None:
    cloner = RecordingCloner()
    repos = [create_mock_repository(f"repo-{i}") for i in range(3)]

    async def scenario():
        return await CloneDispatcher(concurrency_limit=1, clone_fn=cloner).aclone_all(
            repos, tmp_path
        )

    report = asyncio.run(scenario())

    assert report.total == 3
    assert cloner.max_in_flight == 1


# ============================================================================
# clone_repository against a fake git executable
# ============================================================================


def _fake_git(tmp_path: Path) -> Path:
    """A git stand-in: clones create a directory, URLs containing 'broken' fail."""
    script = tmp_path / "fake-git"
    script.write_text(
        "#!/bin/sh\n"
        '[ "$1" = clone ] || exit 3\n'
        'case "$2" in *broken*) echo "fatal: repository not found" >&2; exit 128;; esac\n'
        'echo "Cloning into $2"\n'
        'mkdir "$(basename "$2" .git)"\n'
    )
    script.chmod(0o755)
    return script


@posix_only
def test_clone_repository_runs_git_in_destination(tmp_path: Path) -> None:
    git = _fake_git(tmp_path)
    destination = tmp_path / "out"
    destination.mkdir()
    repo = Repository(clone_url="git@github.com:octo-org/widgets.git", name="widgets", archived=False)

    succeeded = asyncio.run(clone_repository(repo, destination, git_executable=str(git)))

    assert succeeded is True
    assert (destination / "widgets").is_dir()


@posix_only
def test_clone_repository_nonzero_exit_is_failure(tmp_path: Path) -> None:
    git = _fake_git(tmp_path)
    repo = Repository(clone_url="git@github.com:octo-org/broken.git", name="broken", archived=False)

    succeeded = asyncio.run(clone_repository(repo, tmp_path, git_executable=str(git)))

    assert succeeded is False


def test_missing_git_executable_is_failure(tmp_path: Path) -> None:
    repo = create_mock_repository()

    succeeded = asyncio.run(
        clone_repository(repo, tmp_path, git_executable=str(tmp_path / "no-such-git"))
    )

    assert succeeded is False


@posix_only
def test_dispatcher_with_real_subprocesses(tmp_path: Path) -> None:
    git = _fake_git(tmp_path)
    destination = tmp_path / "mirror"
    repos = [
        Repository(clone_url=f"git@github.com:octo-org/{name}.git", name=name, archived=False)
        for name in ("alpha", "broken", "gamma")
    ]

    report = CloneDispatcher(concurrency_limit=2, git_executable=str(git)).clone_all(
        repos, destination
    )

    assert report.total == 3
    assert [o.clone_url for o in report.failed] == ["git@github.com:octo-org/broken.git"]
    assert (destination / "alpha").is_dir()
    assert (destination / "gamma").is_dir()
