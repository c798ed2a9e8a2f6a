"""
Command-line entry point.

    reapclone --organisation octo-org --directory ./octo-org
    GITHUB_TOKEN=ghp_... reapclone --user octocat --skip-archived
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from reapclone.client import GitHubClient
from reapclone.exceptions import ConfigurationError, ReapCloneError
from reapclone.git import DEFAULT_CONCURRENCY, CloneDispatcher
from reapclone.logging import configure_logging, get_logger
from reapclone.types.clone import CloneReport
from reapclone.types.repos import AccountType
from reapclone.version import __version__

logger = get_logger()

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reapclone",
        description="Clone every GitHub repository of a user or organisation.",
    )
    owner = parser.add_argument_group("owner")
    owner.add_argument("-u", "--user", help="user whose repositories to clone")
    owner.add_argument(
        "-o", "--organisation", help="organisation whose repositories to clone"
    )
    parser.add_argument(
        "--detect",
        action="store_true",
        help="ignore whether -u or -o was used and probe the account type",
    )
    parser.add_argument("--host", help="GitHub Enterprise host (default: github.com)")
    parser.add_argument("--port", type=int, help="port for the enterprise host")
    parser.add_argument(
        "--github-token",
        help="personal access token (default: $GITHUB_TOKEN). Without one only "
        "public repositories are found",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory to clone into (default: .)"
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        type=int,
        default=DEFAULT_CONCURRENCY,
        help=f"maximum simultaneous clones (default: {DEFAULT_CONCURRENCY})",
    )
    parser.add_argument(
        "--max-pages", type=int, help="stop listing repositories after this many pages"
    )
    parser.add_argument(
        "--skip-archived", action="store_true", help="do not clone archived repositories"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_owner(args: argparse.Namespace) -> tuple[str, AccountType]:
    """
    Work out which owner was requested and what the flags say it is.

    Raises:
        ConfigurationError: If both or neither of --user/--organisation are set
    """
    if args.user and args.organisation:
        raise ConfigurationError(
            "BOTH_OWNER_KINDS_SET", "cannot set both organisation and user flags"
        )
    if args.user:
        return args.user, AccountType.USER
    if args.organisation:
        return args.organisation, AccountType.ORGANISATION
    raise ConfigurationError(
        "NO_OWNER_SET", "please specify a user or organisation to clone"
    )


def print_report(report: CloneReport, out: TextIO, err: TextIO) -> None:
    """Print one line per repository, then a summary."""
    for outcome in report.outcomes:
        if outcome.succeeded:
            status = _colour("SUCCESS", _GREEN, out)
            print(f"{outcome.clone_url}|{status}", file=out)
        else:
            status = _colour("FAIL", _RED, err)
            print(f"{outcome.clone_url}|{status}", file=err)
    print(f"{len(report.succeeded)}/{report.total} repositories cloned", file=out)


def prepare_destination(directory: str) -> Path:
    """
    Create the clone directory if needed.

    Raises:
        ConfigurationError: If the path exists and is not a directory, or cannot be created
    """
    destination = Path(directory)
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(
            "INVALID_DIRECTORY", f"cannot use {directory!r} as clone directory: {e}"
        ) from e
    return destination


def _colour(text: str, code: str, stream: TextIO) -> str:
    if stream.isatty():
        return f"{code}{text}{_RESET}"
    return text


def run(
    args: argparse.Namespace,
    client: GitHubClient | None = None,
    dispatcher: CloneDispatcher | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> CloneReport:
    """
    List the owner's repositories and clone them.

    Raises:
        ReapCloneError: On invalid configuration or a failed listing
    """
    out = out or sys.stdout
    err = err or sys.stderr

    owner, account_type = parse_owner(args)
    if args.max_pages is not None and args.max_pages < 1:
        raise ConfigurationError(
            "INVALID_MAX_PAGES", f"--max-pages must be at least 1, got {args.max_pages}"
        )
    dispatcher = dispatcher or CloneDispatcher(concurrency_limit=args.concurrency)
    destination = prepare_destination(args.directory)

    if client is None:
        client = GitHubClient(
            token=args.github_token or os.environ.get("GITHUB_TOKEN") or None,
            host=args.host,
            port=args.port,
        )

    with client:
        if args.detect:
            account_type = client.repos.resolve_account_type(owner)
        repositories = client.repos.list_all(owner, account_type, max_pages=args.max_pages)

    if args.skip_archived:
        repositories = [repo for repo in repositories if not repo.archived]

    logger.info("found %d repositories for %s", len(repositories), owner)
    report = dispatcher.clone_all(repositories, destination)
    print_report(report, out, err)
    return report


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        run(args)
    except ReapCloneError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
