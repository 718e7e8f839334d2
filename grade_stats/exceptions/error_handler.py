"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple, Any
from pymongo.errors import PyMongoError
from grade_stats.exceptions.exceptions import LearnerNotFoundError, ClassNotFoundError
from grade_stats.utils.statistics.grade_statistics_utils import empty_cohort_stats

logger = logging.getLogger(__name__)

MAX_ERROR_LENGTH = 500


def sanitize_error_message(e: Exception) -> str:
    return str(e).replace('\n', ' ').replace('\r', ' ')[:MAX_ERROR_LENGTH]


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[Any, int]:
    """Centralized error handling for services"""

    if isinstance(e, LearnerNotFoundError):
        return [], 404

    elif isinstance(e, ClassNotFoundError):
        return empty_cohort_stats(), 404

    elif isinstance(e, PyMongoError):
        message = sanitize_error_message(e)
        logger.error(f"Database error: {message}")
        return {"success": False, "message": message}, 500

    else:
        message = sanitize_error_message(e)
        logger.exception(f"Unexpected error: {message}")
        return {"success": False, "message": message}, 500
