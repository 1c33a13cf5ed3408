"""Test configuration and fixtures for the Lending Registry.

Every test gets its own registry: nothing is shared between tests, and the
cached configuration is reset around configuration fixtures.
"""

import os
from collections.abc import Generator

import pytest

from lending_registry.config import ServerConfig, reset_config
from lending_registry.models.item import LoanableItem
from lending_registry.models.member import Member
from lending_registry.registry import Registry

# === Model Fixtures ===


@pytest.fixture
def light_novel() -> LoanableItem:
    return LoanableItem.light_novel("Secrets of the Silent Witch", "L001", author="Matsuri Isora")


@pytest.fixture
def periodical() -> LoanableItem:
    return LoanableItem.periodical("Bocchi the Rock", "M001", issue_date="2023-09")


@pytest.fixture
def fiction() -> LoanableItem:
    return LoanableItem.fiction("The Last Wish", "F001", duration_days=7)


@pytest.fixture
def member() -> Member:
    return Member(id="MEM001", name="SomChai")


@pytest.fixture
def other_member() -> Member:
    return Member(id="MEM002", name="Malee")


# === Registry Fixtures ===


@pytest.fixture
def registry(light_novel, periodical, fiction, member, other_member) -> Registry:
    """Provide a registry with three items and two members."""
    registry = Registry()
    for item in (light_novel, periodical, fiction):
        registry.add_item(item)
    registry.add_member(member)
    registry.add_member(other_member)
    return registry


@pytest.fixture
def catalog(registry) -> dict[str, LoanableItem]:
    return registry.items


# === Configuration Fixtures ===


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove LENDING_REGISTRY_ variables so defaults apply."""
    for key in list(os.environ):
        if key.startswith("LENDING_REGISTRY_"):
            monkeypatch.delenv(key)


@pytest.fixture
def test_config(clean_env) -> Generator[ServerConfig, None, None]:
    """Provide an isolated server configuration."""
    reset_config()

    config = ServerConfig(
        server_name="test-lending-registry",
        server_version="0.0.1-test",
        debug=True,
        log_level="DEBUG",
        seed_sample_data=False,
    )

    yield config

    reset_config()
