import os
from datetime import date
from dotenv import load_dotenv

# Load .env from the repository root
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env"))

SECRET_KEY: str = os.getenv("SECRET_KEY", "project-tracker-dev-secret-change-in-prod")
ALGORITHM: str = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "480"))  # 8h
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated list, "*" allows everything (local dev)
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# Seed reference data (projects, professors, schedule, professor account) at startup
SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")

# Academic semester
SEMESTER_START: date = date.fromisoformat(os.getenv("SEMESTER_START", "2025-09-23"))
SEMESTER_WEEKS: int = int(os.getenv("SEMESTER_WEEKS", "11"))

# uvicorn runner
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "5000"))
