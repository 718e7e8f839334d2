"""Pass Rate Service - Cohort statistics over summed weighted scores"""
import logging
from typing import Dict
from grade_stats.config.settings import GradeConfig
from grade_stats.exceptions.exceptions import ClassNotFoundError
from grade_stats.repositories.core.repository_factory import RepositoryFactory
from grade_stats.utils.statistics.grade_statistics_utils import weighted_score_sum, build_cohort_stats
from grade_stats.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class PassRateService:
    def __init__(self, repo=None):
        self.repo = repo or RepositoryFactory.get_grade_repo()

    def get_overall_stats(self) -> Dict:
        """Pass-rate statistics across every learner, zeroed when there are none"""
        rows = self.repo.get_cohort_scores()
        logger.debug(f"Overall cohort: {len(rows)} learners")
        return self._summarize(rows)

    def get_class_stats(self, class_id) -> Dict:
        """Pass-rate statistics for one class"""
        parsed_id = ValidationUtils.parse_record_id(class_id)
        if parsed_id is None:
            raise ClassNotFoundError(f"Class {class_id} not found")

        rows = self.repo.get_cohort_scores(parsed_id)
        logger.debug(f"Class {parsed_id} cohort: {len(rows)} learners")
        if not rows:
            raise ClassNotFoundError(f"Class {parsed_id} not found")
        return self._summarize(rows)

    def _summarize(self, rows) -> Dict:
        sums = [weighted_score_sum(row["scores"]) for row in rows]
        return build_cohort_stats(sums, GradeConfig.PASS_THRESHOLD)
