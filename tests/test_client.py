"""
Tests for the GitHubClient facade and its configuration.

Feature: reapclone
"""

import asyncio

import pytest

from reapclone import __version__
from reapclone.async_client import AsyncGitHubClient
from reapclone.client import GitHubClient, port_from_env
from reapclone.exceptions import ConfigurationError, ReapCloneError
from reapclone.testing import FakeGitHubAPI
from reapclone.types.repos import AccountType
from reapclone.version import USER_AGENT


def test_user_agent_identifies_tool() -> None:
    assert USER_AGENT == f"reapclone/{__version__}"


def test_default_base_url() -> None:
    with GitHubClient() as client:
        assert client.base_url == "https://api.github.com"
        assert client.transport.base_url == client.base_url


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_HOST", "ghe.example.com")
    monkeypatch.setenv("GITHUB_PORT", "8443")

    with GitHubClient.from_env() as client:
        assert client.base_url == "https://ghe.example.com:8443/api/v3"
        assert client.transport._client.headers["authorization"] == "token env-token"


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_TOKEN", "GITHUB_HOST", "GITHUB_PORT"):
        monkeypatch.delenv(name, raising=False)

    with GitHubClient.from_env() as client:
        assert client.base_url == "https://api.github.com"
        assert "authorization" not in client.transport._client.headers


def test_async_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_HOST", "ghe.example.com")
    monkeypatch.delenv("GITHUB_PORT", raising=False)

    async def scenario() -> str:
        async with AsyncGitHubClient.from_env() as client:
            return client.base_url

    assert asyncio.run(scenario()) == "https://ghe.example.com/api/v3"


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_invalid_port(value: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        port_from_env(value)
    assert exc_info.value.code == "INVALID_PORT"
    assert isinstance(exc_info.value, ReapCloneError)


@pytest.mark.parametrize(("value", "expected"), [(None, None), ("", None), ("443", 443)])
def test_port_from_env(value: str | None, expected: int | None) -> None:
    assert port_from_env(value) == expected


def test_resource_clients_share_transport() -> None:
    api = FakeGitHubAPI()
    api.add_pages("/users/octocat/repos", [])

    with api.client() as client:
        assert client.repos.transport is client.transport
        assert client.commits.transport is client.transport
        assert client.branches.transport is client.transport
        assert client.repos.list_all("octocat", AccountType.USER) == []
