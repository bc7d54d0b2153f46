# Import all models here so callers can use ``from yultimate.models import ...``
from .common import ChildId, Coordinates, EventId, SessionId, UserId
from .user_model import (
    AdminUser,
    CoachUser,
    OrganizerUser,
    ParticipantUser,
    Role,
    User,
    user_adapter,
)
from .event_model import EventModel, EventType, GalleryImage, Organization, Venue, Winners
from .coaching_model import CoachingCenter
from .program_model import (
    Alert,
    AlertType,
    Assessment,
    AssessmentScore,
    AssessmentType,
    Child,
    Community,
    Gender,
    HomeVisit,
    Session,
    SessionStatus,
)
from .leaderboard_model import PlayerStat, Team
