"""Class Average Service - Business Logic Layer (SoC)"""
import logging
from typing import Dict, List
from grade_stats.config.settings import GradeConfig
from grade_stats.exceptions.exceptions import LearnerNotFoundError
from grade_stats.repositories.core.repository_factory import RepositoryFactory
from grade_stats.utils.statistics.grade_statistics_utils import weighted_class_average
from grade_stats.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class ClassAverageService:
    def __init__(self, repo=None):
        self.repo = repo or RepositoryFactory.get_grade_repo()

    def get_class_averages(self, learner_id) -> List[Dict]:
        """Weighted average per class for one learner, ordered by class_id"""
        parsed_id = ValidationUtils.parse_record_id(learner_id)
        if parsed_id is None:
            raise LearnerNotFoundError(f"Learner {learner_id} not found")

        rows = self.repo.get_learner_class_scores(parsed_id)
        logger.debug(f"Learner {parsed_id}: {len(rows)} classes with scores")
        if not rows:
            raise LearnerNotFoundError(f"Learner {parsed_id} not found")

        return [
            {
                "class_id": row["class_id"],
                "avg": weighted_class_average(row["scores"], GradeConfig.MISSING_CATEGORY_AS_ZERO)
            }
            for row in rows
        ]
