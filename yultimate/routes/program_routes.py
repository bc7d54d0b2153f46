from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from yultimate.api.dependencies import get_program_service
from yultimate.models import Alert, Assessment, Child, HomeVisit, Session
from yultimate.schemas.program_schemas import (
    AssessmentCreate,
    AssessmentProgress,
    ChildVisitSummary,
    HomeVisitCreate,
)
from yultimate.services.program_service import ProgramService

router = APIRouter()

# --- Children ---

@router.get("/children", response_model=List[Child], summary="List children")
async def list_children(service: ProgramService = Depends(get_program_service)):
    return service.list_children()

@router.get("/children/{child_id}", response_model=Child, summary="Get child by ID")
async def get_child(
    child_id: str = Path(..., description="The ID of the child"),
    service: ProgramService = Depends(get_program_service)
):
    child = service.get_child(child_id)
    if not child:
        raise HTTPException(status_code=404, detail="Child not found")
    return child

@router.get("/children/{child_id}/assessments", response_model=List[Assessment])
async def list_child_assessments(
    child_id: str = Path(..., description="The ID of the child"),
    service: ProgramService = Depends(get_program_service)
):
    if not service.get_child(child_id):
        raise HTTPException(status_code=404, detail="Child not found")
    return service.assessments_for_child(child_id)

@router.get("/children/{child_id}/progress", response_model=AssessmentProgress, summary="Baseline vs endline scores")
async def child_progress(
    child_id: str = Path(..., description="The ID of the child"),
    service: ProgramService = Depends(get_program_service)
):
    progress = service.assessment_progress(child_id)
    if not progress:
        raise HTTPException(status_code=404, detail="Child not found")
    return progress

@router.get("/children/{child_id}/home-visits", response_model=List[HomeVisit], summary="Home visits, newest first")
async def list_child_visits(
    child_id: str = Path(..., description="The ID of the child"),
    service: ProgramService = Depends(get_program_service)
):
    if not service.get_child(child_id):
        raise HTTPException(status_code=404, detail="Child not found")
    return service.visits_for_child(child_id)

# --- Sessions & alerts ---

@router.get("/sessions", response_model=List[Session], summary="List coaching sessions")
async def list_sessions(service: ProgramService = Depends(get_program_service)):
    return service.list_sessions()

@router.get("/alerts", response_model=List[Alert], summary="List alerts")
async def list_alerts(service: ProgramService = Depends(get_program_service)):
    return service.list_alerts()

# --- Assessments ---

@router.post("/assessments", response_model=Assessment, status_code=201, summary="Record an assessment")
async def create_assessment(
    assessment_data: AssessmentCreate,
    service: ProgramService = Depends(get_program_service)
):
    """
    Records a Baseline or Endline assessment. Each child has at most one of each.
    """
    try:
        return service.add_assessment(assessment_data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

# --- Home visits ---

@router.get("/home-visits", response_model=List[ChildVisitSummary], summary="Visit count and last visit per child")
async def home_visit_summaries(service: ProgramService = Depends(get_program_service)):
    return service.visit_summaries()

@router.post("/home-visits", response_model=HomeVisit, status_code=201, summary="Log a home visit")
async def create_home_visit(
    visit_data: HomeVisitCreate,
    service: ProgramService = Depends(get_program_service)
):
    try:
        return service.add_home_visit(visit_data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
