"""Read-only views of the application state, scoped to the current user's role."""
from collections import OrderedDict
from datetime import datetime
from typing import List, Optional, Tuple

from yultimate.models import AdminUser, CoachUser, EventModel, OrganizerUser, ParticipantUser, SessionStatus
from yultimate.models.common import as_utc, utcnow
from yultimate.schemas.dashboard_schemas import (
    AdminCounts,
    AdminDashboard,
    CoachDashboard,
    CommunityStats,
    Dashboard,
    GenderSlice,
    OrganizerDashboard,
    ParticipantDashboard,
)
from yultimate.services.coaching_service import CoachingService
from yultimate.services.state import AppState

COACH_UPCOMING_LIMIT = 3

def gender_breakdown(state: AppState) -> List[GenderSlice]:
    return [
        GenderSlice(name="Male", value=sum(1 for c in state.children if c.gender == "Male")),
        GenderSlice(name="Female", value=sum(1 for c in state.children if c.gender == "Female")),
    ]

def community_stats(state: AppState) -> List[CommunityStats]:
    """Children, sessions and mean attendance of completed sessions, per community with children."""
    communities = OrderedDict()
    for child in state.children:
        entry = communities.setdefault(child.community, {"children": 0, "sessions": 0, "attendance": []})
        entry["children"] += 1

    for session in state.sessions:
        entry = communities.get(session.community)
        if entry is None:
            continue
        entry["sessions"] += 1
        if session.status == SessionStatus.COMPLETED and entry["children"] > 0:
            entry["attendance"].append(len(session.participants) / entry["children"] * 100)

    stats = []
    for name, entry in communities.items():
        attendance = entry["attendance"]
        stats.append(CommunityStats(
            name=name,
            children=entry["children"],
            sessions=entry["sessions"],
            avg_attendance=sum(attendance) / len(attendance) if attendance else 0.0,
        ))
    return stats

def split_upcoming_past(events: List[EventModel], now: datetime) -> Tuple[List[EventModel], List[EventModel]]:
    """Upcoming (date >= now) soonest first, past (date < now) latest first."""
    upcoming = sorted((e for e in events if e.date >= now), key=lambda e: e.date)
    past = sorted((e for e in events if e.date < now), key=lambda e: e.date, reverse=True)
    return upcoming, past

def coach_attendance_percentage(state: AppState) -> float:
    completed = [s for s in state.sessions if s.status == SessionStatus.COMPLETED]
    present = sum(len(s.participants) for s in completed)
    possible = sum(state.community_size(s.community) for s in completed)
    return present / possible * 100 if possible > 0 else 0.0

def admin_dashboard(state: AppState) -> AdminDashboard:
    return AdminDashboard(
        counts=AdminCounts(
            users=len(state.users),
            children=len(state.children),
            events=len(state.events),
            sessions=len(state.sessions),
        ),
        events=list(state.events),
        users=list(state.users),
        gender=gender_breakdown(state),
        communities=community_stats(state),
        session_dates=[s.date for s in state.sessions],
        alerts=list(state.alerts),
    )

def organizer_dashboard(state: AppState, user: OrganizerUser) -> OrganizerDashboard:
    organizations = [o for o in state.organizations if user.id in o.organizers]
    org_ids = {o.id for o in organizations}
    events = [e for e in state.events if e.organization_id in org_ids]
    return OrganizerDashboard(
        organizations=organizations,
        events=events,
        total_participants=sum(len(e.participants) for e in events),
    )

def participant_dashboard(state: AppState, user: ParticipantUser, now: datetime) -> ParticipantDashboard:
    registered = [e for e in state.events if user.id in e.participants]
    upcoming, past = split_upcoming_past(registered, now)
    return ParticipantDashboard(
        upcoming_events=upcoming,
        past_events=past,
        coaching_centers=CoachingService(state).centers_for_user(user.id),
    )

def coach_dashboard(state: AppState, user: CoachUser) -> CoachDashboard:
    upcoming = sorted(
        (s for s in state.sessions if s.status == SessionStatus.UPCOMING and s.coach == user.name),
        key=lambda s: s.date,
    )
    return CoachDashboard(
        upcoming_sessions=upcoming[:COACH_UPCOMING_LIMIT],
        attendance_percentage=coach_attendance_percentage(state),
        total_children=len(state.children),
        alerts=list(state.alerts),
    )

def build_dashboard(state: AppState, user, now: Optional[datetime] = None) -> Dashboard:
    now = as_utc(now) if now else utcnow()
    if isinstance(user, AdminUser):
        return admin_dashboard(state)
    if isinstance(user, OrganizerUser):
        return organizer_dashboard(state, user)
    if isinstance(user, ParticipantUser):
        return participant_dashboard(state, user, now)
    if isinstance(user, CoachUser):
        return coach_dashboard(state, user)
    raise TypeError(f"No dashboard for user type {type(user).__name__}")
