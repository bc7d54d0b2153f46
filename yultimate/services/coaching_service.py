import logging
from typing import List, Optional

from yultimate.core.config import settings
from yultimate.models import CoachingCenter
from yultimate.schemas.coaching_schemas import CoachingCenterCreate, CoachingCenterDetail, EnrolledUser
from yultimate.services.state import AppState, next_int_id

logger = logging.getLogger(__name__)

def format_fee(fee: float, currency: Optional[str] = None) -> str:
    currency = currency or settings.FEE_CURRENCY
    amount = f"{fee:,.0f}" if float(fee).is_integer() else f"{fee:,.2f}"
    return f"{currency} {amount}"

class CoachingService:
    def __init__(self, state: AppState):
        self.state = state

    def list_centers(self) -> List[CoachingCenter]:
        return list(self.state.coaching_centers)

    def get_center(self, center_id: int) -> Optional[CoachingCenter]:
        return self.state.find_center(center_id)

    def add_coaching_center(self, data: CoachingCenterCreate) -> CoachingCenter:
        center = CoachingCenter(
            **data.model_dump(),
            id=next_int_id(self.state.coaching_centers),
            participants=[],
        )
        self.state.coaching_centers.append(center)
        logger.info("Created coaching center %s (%s)", center.id, center.name)
        return center

    def toggle_coaching_center_registration(self, center_id: int, user_id: str) -> Optional[CoachingCenter]:
        center = self.get_center(center_id)
        if not center:
            return None

        if user_id in center.participants:
            participants = [p for p in center.participants if p != user_id]
            logger.info("User %s left coaching center %s", user_id, center_id)
        else:
            participants = center.participants + [user_id]
            logger.info("User %s enrolled in coaching center %s", user_id, center_id)

        updated = center.model_copy(update={"participants": participants})
        for i, existing in enumerate(self.state.coaching_centers):
            if existing.id == center_id:
                self.state.coaching_centers[i] = updated
                break
        return updated

    def centers_for_user(self, user_id: str) -> List[CoachingCenter]:
        return [c for c in self.state.coaching_centers if user_id in c.participants]

    def get_center_detail(self, center_id: int) -> Optional[CoachingCenterDetail]:
        center = self.get_center(center_id)
        if not center:
            return None

        enrolled = [
            EnrolledUser(id=u.id, name=u.name, email=u.email)
            for u in self.state.users
            if u.id in center.participants
        ]
        return CoachingCenterDetail(
            id=center.id,
            name=center.name,
            specialty=center.specialty,
            location=center.location,
            description=center.description,
            schedule=center.schedule,
            fee=center.fee,
            fee_display=format_fee(center.fee),
            participants=enrolled,
        )
