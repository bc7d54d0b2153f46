import pytest
from datetime import datetime, timezone

from yultimate.schemas.dashboard_schemas import (
    AdminDashboard,
    CoachDashboard,
    OrganizerDashboard,
    ParticipantDashboard,
)
from yultimate.services.dashboard_service import (
    build_dashboard,
    coach_attendance_percentage,
    community_stats,
    gender_breakdown,
)
from yultimate.services.state import AppState

# Between the seeded events: 1 (Jul 20) and 3 (Jul 25) are past, 2 (Aug 5) and 4 (Sep 10) upcoming
NOW = datetime(2024, 8, 1, tzinfo=timezone.utc)

@pytest.fixture
def state():
    return AppState.seeded()


class TestDashboardService:

    def test_admin_dashboard(self, state: AppState):
        dashboard = build_dashboard(state, state.find_user("U001"), NOW)
        assert isinstance(dashboard, AdminDashboard)
        assert dashboard.counts.users == 8
        assert dashboard.counts.children == 3
        assert dashboard.counts.events == 4
        assert dashboard.counts.sessions == 4
        assert len(dashboard.alerts) == 2

    def test_organizer_dashboard(self, state: AppState):
        dashboard = build_dashboard(state, state.find_user("U002"), NOW)
        assert isinstance(dashboard, OrganizerDashboard)
        assert [o.id for o in dashboard.organizations] == [1]
        assert [e.id for e in dashboard.events] == [1, 2]
        assert dashboard.total_participants == 5

    def test_organizer_in_two_organizations(self, state: AppState):
        dashboard = build_dashboard(state, state.find_user("U006"), NOW)
        assert [e.id for e in dashboard.events] == [1, 2, 3, 4]
        assert dashboard.total_participants == 10

    def test_participant_upcoming_and_past_partition(self, state: AppState):
        user = state.find_user("U003")
        dashboard = build_dashboard(state, user, NOW)
        assert isinstance(dashboard, ParticipantDashboard)

        upcoming = [e.id for e in dashboard.upcoming_events]
        past = [e.id for e in dashboard.past_events]
        registered = {e.id for e in state.events if user.id in e.participants}
        assert set(upcoming) | set(past) == registered
        assert not set(upcoming) & set(past)
        assert upcoming == [2]
        assert past == [3, 1]
        assert [c.id for c in dashboard.coaching_centers] == [1]

    def test_participant_event_exactly_now_is_upcoming(self, state: AppState):
        user = state.find_user("U004")
        dashboard = build_dashboard(state, user, datetime(2024, 9, 10, 10, tzinfo=timezone.utc))
        assert [e.id for e in dashboard.upcoming_events] == [4]

    def test_coach_dashboard(self, state: AppState):
        dashboard = build_dashboard(state, state.find_user("U007"), NOW)
        assert isinstance(dashboard, CoachDashboard)
        assert [s.id for s in dashboard.upcoming_sessions] == ["S003"]
        assert dashboard.total_children == 3
        assert dashboard.attendance_percentage == pytest.approx(100.0)

    def test_coach_upcoming_sessions_limited_to_three(self, state: AppState):
        for n in range(5, 10):
            state.sessions.append(state.sessions[2].model_copy(update={"id": f"S00{n}"}))
        dashboard = build_dashboard(state, state.find_user("U007"), NOW)
        assert len(dashboard.upcoming_sessions) == 3

    def test_coach_attendance_without_completed_sessions(self, state: AppState):
        state.sessions = [s for s in state.sessions if s.status == "upcoming"]
        assert coach_attendance_percentage(state) == 0.0

    def test_build_dashboard_unknown_user_type(self, state: AppState):
        with pytest.raises(TypeError):
            build_dashboard(state, object(), NOW)

    def test_gender_breakdown(self, state: AppState):
        assert [(g.name, g.value) for g in gender_breakdown(state)] == [("Male", 2), ("Female", 1)]

    def test_community_stats(self, state: AppState):
        stats = {s.name: s for s in community_stats(state)}
        assert stats["VV Puram"].children == 2
        assert stats["VV Puram"].sessions == 2
        assert stats["VV Puram"].avg_attendance == pytest.approx(100.0)
        assert stats["Lalithadripura"].children == 1
