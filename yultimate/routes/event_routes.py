from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from yultimate.api.dependencies import get_current_user, get_event_service, get_optional_user
from yultimate.models import EventModel, User
from yultimate.schemas.event_schemas import (
    EventCreate,
    EventQrPayload,
    EventUpdate,
    RegistrationToggleResult,
    ResultsSubmission,
)
from yultimate.services.event_service import EventService

router = APIRouter()

def _get_event_or_404(service: EventService, event_id: int) -> EventModel:
    event = service.get_event(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event

@router.get("", response_model=List[EventModel], summary="List events")
async def list_events(service: EventService = Depends(get_event_service)):
    return service.list_events()

@router.post("", response_model=EventModel, status_code=201, summary="Create New Event")
async def create_event(
    event_data: EventCreate,
    service: EventService = Depends(get_event_service)
):
    """
    Creates a new event with no participants.

    - **name**: at least 3 characters.
    - **description**: at least 10 characters.
    - **date**: must not be in the past.
    - **venue_id** / **organization_id**: must reference existing records.
    """
    try:
        return service.add_event(event_data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/search", response_model=List[EventModel], summary="Search events")
async def search_events(
    q: str = Query("", description="Matched against name, description, type and venue name"),
    service: EventService = Depends(get_event_service)
):
    return service.search_events(q)

@router.get("/{event_id}", response_model=EventModel, summary="Get event by ID")
async def get_event(
    event_id: int = Path(..., description="The ID of the event"),
    service: EventService = Depends(get_event_service)
):
    return _get_event_or_404(service, event_id)

@router.put("/{event_id}", response_model=EventModel, summary="Update event")
async def update_event(
    event_data: EventUpdate,
    event_id: int = Path(..., description="The ID of the event"),
    service: EventService = Depends(get_event_service)
):
    """
    Replaces the editable fields of an event. The venue is given by name;
    an unknown name creates a new venue.
    """
    try:
        event = service.update_event(event_id, event_data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event

@router.post("/{event_id}/registration", response_model=RegistrationToggleResult, summary="Register or unregister")
async def toggle_registration(
    event_id: int = Path(..., description="The ID of the event"),
    current_user=Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Registers the current user for the event, or unregisters them if already registered."""
    event = service.toggle_registration(event_id, current_user.id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return RegistrationToggleResult(
        event_id=event.id,
        user_id=current_user.id,
        registered=service.is_registered(event.id, current_user.id),
    )

@router.post("/{event_id}/results", response_model=EventModel, summary="Submit event results")
async def submit_results(
    results: ResultsSubmission,
    event_id: int = Path(..., description="The ID of the event"),
    service: EventService = Depends(get_event_service)
):
    try:
        event = service.submit_results(event_id, results)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event

@router.get("/{event_id}/participants", response_model=List[User], summary="List registered users")
async def list_participants(
    event_id: int = Path(..., description="The ID of the event"),
    service: EventService = Depends(get_event_service)
):
    participants = service.get_event_participants(event_id)
    if participants is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return participants

@router.get("/{event_id}/qr", response_model=EventQrPayload, summary="QR code payload for an event card")
async def event_qr_payload(
    event_id: int = Path(..., description="The ID of the event"),
    current_user=Depends(get_optional_user),
    service: EventService = Depends(get_event_service)
):
    event = _get_event_or_404(service, event_id)
    return EventQrPayload(
        eventId=event.id,
        eventName=event.name,
        userName=current_user.name if current_user else None,
    )
