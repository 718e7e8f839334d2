"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict, List, Set
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_float_env(key: str, default: str) -> float:
    """Safely convert environment variable to float"""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        return float(default)

def safe_bool_env(key: str, default: str) -> bool:
    """Read true/false style environment variable"""
    return os.getenv(key, default).strip().lower() in {"1", "true", "yes", "on"}

# Score Types (Business Configuration)
SCORE_TYPES: Set[str] = {"exam", "quiz", "homework"}

# Grading weights by score type
SCORE_WEIGHTS: Dict[str, float] = {
    "exam": 0.5,
    "quiz": 0.3,
    "homework": 0.2
}

# Record ranges (advisory, checked by the schema validator only)
CLASS_ID_MIN = 0
CLASS_ID_MAX = 300
LEARNER_ID_MIN = 0

# Grading Configuration
class GradeConfig:
    PASS_THRESHOLD = safe_float_env("PASS_THRESHOLD", "70")
    # False: a category with no scores makes the class average null
    MISSING_CATEGORY_AS_ZERO = safe_bool_env("MISSING_CATEGORY_AS_ZERO", "false")

# Database Configuration
class MongoConfig:
    URL = os.getenv("DB_URL", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "grade_stats")
    GRADES_COLLECTION = os.getenv("GRADES_COLLECTION", "grades")
    MAX_POOL_SIZE = safe_int_env("MONGO_MAX_POOL_SIZE", "50")
    TIMEOUT_MS = safe_int_env("MONGO_TIMEOUT_MS", "30000")

# Server Configuration
class ServerConfig:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = safe_int_env("PORT", "5050")
    CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Logging Configuration
class LogConfig:
    LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    MAX_LOG_SIZE = 30 * 1024 * 1024  # 30 MB
    BACKUP_COUNT = 5
