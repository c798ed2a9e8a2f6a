"""
Git clone utilities for reapclone.

Clones many repositories at once by spawning ``git clone`` child processes,
with a semaphore capping how many run at the same time.
"""

import asyncio
import functools
from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path
from subprocess import DEVNULL

from reapclone.exceptions import ConfigurationError
from reapclone.logging import get_logger, log_clone_outcome
from reapclone.types.clone import CloneOutcome, CloneReport
from reapclone.types.repos import Repository

DEFAULT_CONCURRENCY = 20

CloneFn = Callable[[Repository, Path], Awaitable[bool]]

logger = get_logger("git")


async def clone_repository(
    repository: Repository,
    destination: Path,
    git_executable: str = "git",
) -> bool:
    """
    Clone one repository into ``destination`` using its SSH URL.

    Runs ``git clone <url>`` with ``destination`` as the working directory
    and all standard streams discarded.

    Args:
        repository: Repository to clone
        destination: Existing directory to clone into
        git_executable: git binary to invoke

    Returns:
        True if git exited with status 0. A git that cannot be started
        counts as a failed clone.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            git_executable,
            "clone",
            repository.clone_url,
            cwd=str(destination),
            stdin=DEVNULL,
            stdout=DEVNULL,
            stderr=DEVNULL,
        )
    except OSError as e:
        logger.error("could not start %s: %s", git_executable, e)
        log_clone_outcome(repository.clone_url, False)
        return False

    returncode = await process.wait()
    succeeded = returncode == 0
    log_clone_outcome(repository.clone_url, succeeded, returncode)
    return succeeded


class CloneDispatcher:
    """
    Clone a set of repositories concurrently, at most ``concurrency_limit`` at a time.

    Individual failures are recorded in the returned CloneReport; they never
    abort the batch.

    Example:
        ```python
        from reapclone.git import CloneDispatcher

        report = CloneDispatcher(concurrency_limit=8).clone_all(repos, "./mirror")
        for outcome in report.failed:
            print("failed:", outcome.clone_url)
        ```
    """

    def __init__(
        self,
        concurrency_limit: int = DEFAULT_CONCURRENCY,
        git_executable: str = "git",
        clone_fn: CloneFn | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            concurrency_limit: Maximum number of clones in flight (default: 20)
            git_executable: git binary to invoke
            clone_fn: Replacement for clone_repository (used by tests)

        Raises:
            ConfigurationError: If concurrency_limit is below 1
        """
        if concurrency_limit < 1:
            raise ConfigurationError(
                "INVALID_CONCURRENCY",
                f"concurrency limit must be at least 1, got {concurrency_limit}",
            )
        self.concurrency_limit = concurrency_limit
        self.git_executable = git_executable
        self._clone_fn: CloneFn = clone_fn or functools.partial(
            clone_repository, git_executable=git_executable
        )

    async def aclone_all(
        self,
        repositories: Iterable[Repository],
        destination: str | Path,
    ) -> CloneReport:
        """
        Clone every repository and wait for all of them to finish.

        Args:
            repositories: Repositories to clone
            destination: Directory to clone into; created if missing

        Returns:
            CloneReport with one outcome per repository
        """
        destination = Path(destination)
        destination.mkdir(parents=True, exist_ok=True)
        semaphore = asyncio.Semaphore(self.concurrency_limit)

        async def clone_one(repository: Repository) -> CloneOutcome:
            # The permit is held until the child process has exited.
            async with semaphore:
                try:
                    succeeded = await self._clone_fn(repository, destination)
                except Exception:
                    logger.exception("clone of %s raised", repository.clone_url)
                    succeeded = False
            return CloneOutcome(clone_url=repository.clone_url, succeeded=succeeded)

        outcomes = await asyncio.gather(*(clone_one(repo) for repo in repositories))
        report = CloneReport(outcomes=list(outcomes))
        logger.info(
            "cloned %d/%d repositories into %s",
            len(report.succeeded),
            report.total,
            destination,
        )
        return report

    def clone_all(
        self,
        repositories: Iterable[Repository],
        destination: str | Path,
    ) -> CloneReport:
        """Blocking form of aclone_all. Must not be called from a running event loop."""
        return asyncio.run(self.aclone_all(repositories, destination))
