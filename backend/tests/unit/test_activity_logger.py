"""Unit tests for the ActivityLogger and the activity feed reader."""

import pytest

from portfolio.application.services import ActivityIcon, ActivityLogger, ActivityService
from portfolio.domain.entities import PortfolioDocument


def test_record_prepends_just_now_entry():
    document = PortfolioDocument(activity=[{"id": 4, "icon": "x", "title": "Old", "description": "", "time": "1 day ago"}])

    entry = ActivityLogger().record(
        document,
        icon=ActivityIcon.PROJECT,
        title="New Project Added",
        description="Site was added to the portfolio",
    )

    assert entry.id == 5
    assert entry.time == "Just now"
    assert document.activity[0] == {
        "id": 5,
        "icon": "fa-project-diagram",
        "title": "New Project Added",
        "description": "Site was added to the portfolio",
        "time": "Just now",
    }
    assert document.activity[1]["title"] == "Old"


def test_record_on_empty_feed_starts_at_one():
    document = PortfolioDocument()
    entry = ActivityLogger().record(document, icon="i", title="t", description="d")
    assert entry.id == 1
    assert len(document.activity) == 1


@pytest.mark.asyncio
async def test_recent_returns_at_most_limit_newest_first(make_store):
    document = PortfolioDocument()
    logger = ActivityLogger()
    for n in range(8):
        logger.record(document, icon="i", title=f"event {n}", description="")
    service = ActivityService(make_store(activity=document.activity), limit=5)

    recent = await service.recent()

    assert len(recent) == 5
    assert recent[0]["title"] == "event 7"
    assert [e["id"] for e in recent] == [8, 7, 6, 5, 4]


@pytest.mark.asyncio
async def test_recent_with_short_feed_returns_everything(seeded_store):
    recent = await ActivityService(seeded_store).recent()
    assert [e["time"] for e in recent] == ["2 hours ago", "1 day ago", "2 days ago"]
