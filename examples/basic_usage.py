#!/usr/bin/env python3
"""
Basic reapclone usage example.

Lists an owner's repositories against an in-memory GitHub API and clones
them with a recording cloner, so nothing touches the network or disk.
Run with: python examples/basic_usage.py
"""

import tempfile

from reapclone import AccountType, CloneDispatcher, ConfigurationError, ReapCloneError
from reapclone.endpoints import Endpoint, PathParameters, build_url
from reapclone.testing import FakeGitHubAPI, RecordingCloner, repository_payload

print("=== reapclone Basic Usage Example ===\n")

# 1. Exception hierarchy
print("1. Testing exception classes...")
try:
    raise ConfigurationError("NO_OWNER_SET", "please specify a user or organisation to clone")
except ReapCloneError as e:
    print(f"   Caught ReapCloneError: {e}")
    print(f"   Code: {e.code}, Message: {e.message}")

print("\n   OK: Exception classes working\n")

# 2. Routing
print("2. Building request URLs...")
url = build_url(
    Endpoint.LIST_REPOSITORIES,
    PathParameters(
        base_url="https://api.github.com",
        owner="octo-org",
        account_type=AccountType.ORGANISATION,
    ),
)
print(f"   {url}")
assert url == "https://api.github.com/orgs/octo-org/repos"

print("\n   OK: Routing working\n")

# 3. Listing and resolving against a fake API
print("3. Resolving and listing repositories...")
api = FakeGitHubAPI()
api.add_pages(
    "/users/octo-org/repos",
    [[repository_payload("one")], [repository_payload("two", archived=True)]],
)

with api.client() as client:
    account_type = client.repos.resolve_account_type("octo-org")
    repositories = client.repos.list_all("octo-org", account_type)

print(f"   Account type: {account_type.name}")
for repo in repositories:
    print(f"   {repo.name}: {repo.clone_url} (archived={repo.archived})")
print(f"   Requests made: {[r.path + '?page=' + str(r.page) for r in api.requests]}")

print("\n   OK: Listing working\n")

# 4. Bounded concurrent cloning
print("4. Cloning with a concurrency limit of 1...")
cloner = RecordingCloner(fail={repositories[1].clone_url})
with tempfile.TemporaryDirectory() as tmp:
    report = CloneDispatcher(concurrency_limit=1, clone_fn=cloner).clone_all(repositories, tmp)

for outcome in report.outcomes:
    print(f"   {outcome.clone_url}|{'SUCCESS' if outcome.succeeded else 'FAIL'}")
print(f"   {len(report.succeeded)}/{report.total} repositories cloned")
assert cloner.max_in_flight == 1

print("\n   OK: Cloning working\n")

print("=== All examples completed ===")
