import csv
import io
import pytest

from yultimate.services.map_service import MapService, MapsConfigurationError
from yultimate.services.report_service import ReportService
from yultimate.services.state import AppState

@pytest.fixture
def state():
    return AppState.seeded()


class TestReportService:

    def test_leaderboard(self, state: AppState):
        board = ReportService(state).leaderboard()
        assert [p.name for p in board.top_players] == ["John Smith", "Jane Doe", "Alice Johnson"]
        assert [t.id for t in board.top_teams] == ["T01", "T02", "T03"]
        assert [t.id for t in board.top_spirit] == ["T04", "T02", "T01"]

    def test_leaderboard_leaves_state_order_alone(self, state: AppState):
        before = [t.id for t in state.teams]
        ReportService(state).leaderboard()
        assert [t.id for t in state.teams] == before

    def test_program_report(self, state: AppState):
        report = ReportService(state).program_report()
        assert [c.name for c in report.communities] == ["VV Puram", "Lalithadripura"]
        assert len(report.coach_activity) == 6

    def test_community_report_csv(self, state: AppState):
        rows = list(csv.reader(io.StringIO(ReportService(state).community_report_csv())))
        assert rows[0] == ["community", "children", "sessions", "avg_attendance_pct"]
        assert rows[1] == ["VV Puram", "2", "2", "100.0"]


class TestMapService:

    def test_points_of_interest(self, state: AppState):
        points = MapService(state, api_key="key").points_of_interest()
        ids = [p.id for p in points]
        assert ids[:3] == ["v-1", "v-2", "v-3"]
        assert "c-1" in ids
        community = next(p for p in points if p.id == "com-VV Puram")
        assert community.children == 30
        assert community.sessions == 2

    def test_venues_without_coordinates_are_skipped(self, state: AppState):
        state.venues[0] = state.venues[0].model_copy(update={"coordinates": None})
        ids = [p.id for p in MapService(state, api_key="key").points_of_interest()]
        assert "v-1" not in ids

    def test_focus_point(self, state: AppState):
        service = MapService(state, api_key="key")
        assert service.focus_point(2).name == "University Stadium"
        assert service.focus_point(99) is None
        assert service.focus_point(None) is None

    def test_missing_api_key(self, state: AppState):
        with pytest.raises(MapsConfigurationError, match="MAPS_API_KEY"):
            MapService(state, api_key="").require_api_key()
