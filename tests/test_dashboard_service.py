"""Tests for DashboardService."""

from datetime import timedelta

import pytest

from careerpilot.services.dashboard_service import (
    DashboardService,
    build_stat_cards,
    percent_change,
)
from careerpilot.services.stores import ApplicationStore, JobStore


@pytest.fixture
def dashboard_service(db_session, clock):
    return DashboardService(ApplicationStore(db_session), JobStore(db_session), clock=clock)


class TestPercentChange:
    @pytest.mark.parametrize(
        "current,previous,expected",
        [(0, 0, 0), (5, 0, 100), (3, 2, 50), (1, 3, -67), (2, 2, 0)],
    )
    def test_percent_change(self, current, previous, expected):
        assert percent_change(current, previous) == expected


class TestStatCards:
    def test_cards(self):
        class R:
            def __init__(self, status):
                self.status = status

        current = [R("saved"), R("applied"), R("interviewing"), R("offer")]
        previous = [R("applied"), R("applied")]

        cards = {card.title: card for card in build_stat_cards(current, previous)}

        assert cards["Total Applications"].value == 4
        assert cards["Total Applications"].change == 100
        assert cards["Interviews"].value == 1
        assert cards["Interviews"].change == 100
        assert cards["Offers"].value == 1
        assert cards["Pending"].value == 2
        assert cards["Pending"].change == 0


class TestDashboard:
    """Tests for DashboardService.get_dashboard."""

    @pytest.mark.asyncio
    async def test_recent_and_upcoming(
        self, dashboard_service, tracker_service, make_job, alice, clock
    ):
        start = clock()
        records = []
        for n in range(6):
            job = await make_job(company=f"Company {n}", title=f"Role {n}")
            records.append(await tracker_service.create(alice.id, job.id))
            clock.advance(minutes=1)

        soon = start + timedelta(days=3)
        later = start + timedelta(days=20)
        await tracker_service.update_status(alice.id, records[0].id, "interviewing")
        await tracker_service.update_details(
            alice.id, records[0].id, {"interview_date": soon, "interview_type": "Phone"}
        )
        await tracker_service.update_status(alice.id, records[1].id, "interviewing")
        await tracker_service.update_details(
            alice.id, records[1].id, {"interview_date": later}
        )

        data = await dashboard_service.get_dashboard(alice.id)

        assert [a.company for a in data.recent_applications] == [
            "Company 5",
            "Company 4",
            "Company 3",
            "Company 2",
            "Company 1",
        ]
        assert data.recent_applications[0].logo == "C"
        assert len(data.upcoming_interviews) == 1
        interview = data.upcoming_interviews[0]
        assert interview.company == "Company 0"
        assert interview.type == "Phone"
        assert interview.time == "TBD"

        cards = {card.title: card for card in data.stats}
        assert cards["Total Applications"].value == 6
        assert cards["Interviews"].value == 2
        assert cards["Pending"].value == 4

    @pytest.mark.asyncio
    async def test_previous_period_comparison(
        self, dashboard_service, tracker_service, make_job, alice, clock
    ):
        for n in range(2):
            job = await make_job(company=f"Old {n}")
            await tracker_service.create(alice.id, job.id)
        clock.advance(days=40)
        job = await make_job(company="New")
        await tracker_service.create(alice.id, job.id)

        data = await dashboard_service.get_dashboard(alice.id)
        cards = {card.title: card for card in data.stats}

        assert cards["Total Applications"].value == 1
        assert cards["Total Applications"].change == -50

    @pytest.mark.asyncio
    async def test_quick_stats(
        self, dashboard_service, tracker_service, make_job, alice, bob, clock
    ):
        job = await make_job()
        other = await make_job(poster=bob)
        await tracker_service.create(alice.id, job.id, "interviewing")
        await tracker_service.create(alice.id, other.id)

        stats = await dashboard_service.get_quick_stats(alice.id)

        assert stats.applications == 2
        assert stats.interviews == 1
        assert stats.jobs == 1
