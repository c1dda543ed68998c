"""Shared fixtures for export tests."""

from __future__ import annotations

import pytest

from tests.fakes import FakeCollection, FakeItem, FakeService


@pytest.fixture
def personal_service() -> FakeService:
    """'Personal' holds one real login and one item with an empty password."""
    return FakeService(
        [
            FakeCollection("Login", [FakeItem("wifi", b"hunter2")]),
            FakeCollection(
                "Personal",
                [FakeItem("github", b"abc123"), FakeItem("stale", b"")],
            ),
        ]
    )


@pytest.fixture
def personal_items(personal_service: FakeService) -> list[FakeItem]:
    return personal_service.collections[1].items
