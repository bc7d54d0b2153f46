import logging
from typing import List, Optional

from yultimate.models import Alert, Assessment, AssessmentScore, Child, HomeVisit, Session
from yultimate.schemas.program_schemas import (
    AssessmentCreate,
    AssessmentProgress,
    CategoryProgress,
    ChildVisitSummary,
    HomeVisitCreate,
)
from yultimate.services.state import AppState

logger = logging.getLogger(__name__)

SCORE_CATEGORIES = ("teamwork", "confidence", "communication")

class ProgramService:
    """Children, coaching sessions and the welfare records kept against them."""

    def __init__(self, state: AppState):
        self.state = state

    def list_children(self) -> List[Child]:
        return list(self.state.children)

    def get_child(self, child_id: str) -> Optional[Child]:
        return self.state.find_child(child_id)

    def list_sessions(self) -> List[Session]:
        return list(self.state.sessions)

    def get_session(self, session_id: str) -> Optional[Session]:
        return self.state.find_session(session_id)

    def list_alerts(self) -> List[Alert]:
        return list(self.state.alerts)

    def mark_session_attendance(self, session_id: str, child_id: str) -> Optional[Session]:
        session = self.get_session(session_id)
        if not session:
            return None
        if child_id in session.participants:
            return session

        updated = session.model_copy(update={"participants": session.participants + [child_id]})
        for i, existing in enumerate(self.state.sessions):
            if existing.id == session_id:
                self.state.sessions[i] = updated
                break
        logger.info("Child %s marked present for session %s", child_id, session_id)
        return updated

    # --- Home visits ---

    def next_home_visit_id(self) -> str:
        numbers = [int(v.id[2:]) for v in self.state.home_visits if v.id.startswith("HV") and v.id[2:].isdigit()]
        return f"HV{max(numbers, default=0) + 1:03d}"

    def add_home_visit(self, data: HomeVisitCreate) -> HomeVisit:
        if not self.get_child(data.child_id):
            raise ValueError(f"Child with ID {data.child_id} not found.")

        visit = HomeVisit(id=self.next_home_visit_id(), **data.model_dump())
        self.state.home_visits.append(visit)
        logger.info("Logged home visit %s for child %s", visit.id, visit.child_id)
        return visit

    def visits_for_child(self, child_id: str) -> List[HomeVisit]:
        """Newest first."""
        visits = [v for v in self.state.home_visits if v.child_id == child_id]
        return sorted(visits, key=lambda v: v.date, reverse=True)

    def visit_summaries(self) -> List[ChildVisitSummary]:
        summaries = []
        for child in self.state.children:
            visits = self.visits_for_child(child.id)
            summaries.append(ChildVisitSummary(
                child_id=child.id,
                child_name=child.name,
                visit_count=len(visits),
                last_visit=visits[0].date if visits else None,
            ))
        return summaries

    # --- Assessments ---

    def add_assessment(self, data: AssessmentCreate) -> Assessment:
        if not self.get_child(data.child_id):
            raise ValueError(f"Child with ID {data.child_id} not found.")
        # One assessment per child and round
        for existing in self.state.assessments:
            if existing.child_id == data.child_id and existing.type == data.type:
                raise ValueError(f"{existing.type} assessment already recorded for child {data.child_id}.")

        assessment = Assessment(
            child_id=data.child_id,
            date=data.date,
            type=data.type,
            score=AssessmentScore(
                teamwork=data.teamwork,
                confidence=data.confidence,
                communication=data.communication,
            ),
        )
        self.state.assessments.append(assessment)
        logger.info("Recorded %s assessment for child %s", assessment.type, assessment.child_id)
        return assessment

    def assessments_for_child(self, child_id: str) -> List[Assessment]:
        return [a for a in self.state.assessments if a.child_id == child_id]

    def assessment_progress(self, child_id: str) -> Optional[AssessmentProgress]:
        if not self.get_child(child_id):
            return None

        assessments = self.assessments_for_child(child_id)
        baseline = next((a for a in assessments if a.type == "Baseline"), None)
        endline = next((a for a in assessments if a.type == "Endline"), None)

        categories = [
            CategoryProgress(
                category=name.capitalize(),
                baseline=getattr(baseline.score, name) if baseline else 0,
                endline=getattr(endline.score, name) if endline else 0,
            )
            for name in SCORE_CATEGORIES
        ]
        return AssessmentProgress(
            child_id=child_id,
            has_baseline=baseline is not None,
            has_endline=endline is not None,
            categories=categories,
        )
