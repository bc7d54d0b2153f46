from fastapi import APIRouter, Depends
from fastapi.responses import Response

from yultimate.api.dependencies import get_report_service
from yultimate.schemas.report_schemas import Leaderboard, ProgramReport
from yultimate.services.report_service import ReportService

router = APIRouter()

@router.get("/reports", response_model=ProgramReport, summary="Program report")
async def program_report(service: ReportService = Depends(get_report_service)):
    return service.program_report()

@router.get("/reports/communities.csv", summary="Community report as CSV")
async def community_report_csv(service: ReportService = Depends(get_report_service)):
    return Response(
        content=service.community_report_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="community-report.csv"'},
    )

@router.get("/leaderboard", response_model=Leaderboard, summary="Top players and teams")
async def leaderboard(service: ReportService = Depends(get_report_service)):
    return service.leaderboard()
