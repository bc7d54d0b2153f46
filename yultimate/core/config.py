from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    SECRET_KEY: str = "YOUR_SECRET_KEY_HERE"
    SESSION_USER_KEY: str = "yultimate_user" # Single client-storage key holding the current user
    MAPS_API_KEY: Optional[str] = None
    CHECKIN_RESET_SECONDS: float = 3.0
    CHECKIN_STATION_KEY: str = "yultimate_station" # Session key naming this client's scanning station
    FEE_CURRENCY: str = "INR"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
