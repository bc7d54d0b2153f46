import csv
import io

from yultimate.schemas.report_schemas import Leaderboard, MonthlyActivity, ProgramReport
from yultimate.services.dashboard_service import community_stats, gender_breakdown
from yultimate.services.state import AppState

LEADERBOARD_SIZE = 3

COACH_ACTIVITY = [
    ("Jan", 120),
    ("Feb", 140),
    ("Mar", 130),
    ("Apr", 150),
    ("May", 160),
    ("Jun", 155),
]

class ReportService:
    def __init__(self, state: AppState):
        self.state = state

    def program_report(self) -> ProgramReport:
        return ProgramReport(
            communities=community_stats(self.state),
            gender=gender_breakdown(self.state),
            coach_activity=[MonthlyActivity(month=m, hours=h) for m, h in COACH_ACTIVITY],
        )

    def leaderboard(self) -> Leaderboard:
        # Rankings never reorder the shared lists
        teams = self.state.teams
        return Leaderboard(
            top_players=sorted(self.state.player_stats, key=lambda p: p.score, reverse=True)[:LEADERBOARD_SIZE],
            top_teams=sorted(teams, key=lambda t: t.wins, reverse=True)[:LEADERBOARD_SIZE],
            top_spirit=sorted(teams, key=lambda t: t.spirit_score, reverse=True)[:LEADERBOARD_SIZE],
        )

    def community_report_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["community", "children", "sessions", "avg_attendance_pct"])
        for row in community_stats(self.state):
            writer.writerow([row.name, row.children, row.sessions, f"{row.avg_attendance:.1f}"])
        return buffer.getvalue()
