import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from yultimate.core.config import settings
from yultimate.routes import (
    auth_routes,
    checkin_routes,
    coaching_routes,
    dashboard_routes,
    event_routes,
    gallery_routes,
    map_routes,
    program_routes,
    report_routes,
    user_routes,
)
from yultimate.services.checkin_service import CheckinStations
from yultimate.services.state import AppState

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Y-Ultimate Program API")

# The signed session cookie is the client-side store for the current user and check-in station
app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY)

# In-memory state, reseeded on every start
app.state.store = AppState.seeded()
app.state.checkin_stations = CheckinStations()

# Include routers
app.include_router(auth_routes.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(dashboard_routes.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(event_routes.router, prefix="/api/events", tags=["Events"])
app.include_router(coaching_routes.router, prefix="/api/coaching-centers", tags=["Coaching Centers"])
app.include_router(checkin_routes.router, prefix="/api/checkin", tags=["Check-in"])
app.include_router(program_routes.router, prefix="/api/program", tags=["Program"])
app.include_router(gallery_routes.router, prefix="/api/gallery", tags=["Gallery"])
app.include_router(report_routes.router, prefix="/api", tags=["Reports"])
app.include_router(map_routes.router, prefix="/api/map", tags=["Map"])
app.include_router(user_routes.router, prefix="/api", tags=["Users"])
app.include_router(map_routes.page_router, tags=["Pages"])


@app.get("/")
async def root():
    return {"message": "Y-Ultimate Program API"}
