"""
Tests for the class average and pass-rate services.
"""

from unittest.mock import MagicMock

import pytest
from bson.decimal128 import Decimal128
from grade_stats.config.settings import GradeConfig
from grade_stats.exceptions.exceptions import LearnerNotFoundError, ClassNotFoundError
from grade_stats.repositories.core.repository_factory import RepositoryFactory
from grade_stats.repositories.grades.grade_repo import GradeRepo
from grade_stats.services.learner.class_average_service import ClassAverageService
from grade_stats.services.cohort.pass_rate_service import PassRateService
from grade_stats.utils.index.optimizer import create_grade_indexes


class TestClassAverageService:

    def test_average_per_class(self, grade_repo):
        result = ClassAverageService(grade_repo).get_class_averages("1")
        assert [row["class_id"] for row in result] == [7, 101]
        assert result[0]["avg"] is None
        assert result[1]["avg"] == pytest.approx(0.5 * 85 + 0.3 * 70 + 0.2 * 80)

    def test_exam_only_learner_with_zero_policy(self, grade_repo, monkeypatch):
        monkeypatch.setattr(GradeConfig, "MISSING_CATEGORY_AS_ZERO", True)
        result = ClassAverageService(grade_repo).get_class_averages(1)
        assert result[0] == {"class_id": 7, "avg": pytest.approx(42.5)}

    def test_unknown_learner(self, grade_repo):
        with pytest.raises(LearnerNotFoundError):
            ClassAverageService(grade_repo).get_class_averages("999")

    def test_malformed_id_does_not_query(self):
        repo = MagicMock()
        with pytest.raises(LearnerNotFoundError):
            ClassAverageService(repo).get_class_averages("abc")
        repo.get_learner_class_scores.assert_not_called()

    def test_uses_factory_repo_by_default(self, grade_repo):
        RepositoryFactory.set_grade_repo(grade_repo)
        assert ClassAverageService().repo is grade_repo


class TestPassRateService:

    def test_overall_stats(self, grade_repo):
        stats = PassRateService(grade_repo).get_overall_stats()
        assert stats["totalLearners"] == 3
        assert stats["learnersAbove70"] == 2
        assert stats["percentageAbove70"] == pytest.approx(100 * 2 / 3)

    def test_exam_only_learner_excluded_exam_and_quiz_included(self, empty_collection):
        empty_collection.insert_many([
            {"class_id": 1, "learner_id": 10, "scores": [{"type": "exam", "score": 100}]},
            {"class_id": 1, "learner_id": 11, "scores": [
                {"type": "exam", "score": 100}, {"type": "quiz", "score": 100}
            ]},
        ])
        stats = PassRateService(GradeRepo(empty_collection)).get_class_stats(1)
        assert stats == {"totalLearners": 2, "learnersAbove70": 1, "percentageAbove70": 50}

    def test_decimal128_scores_in_store(self, empty_collection):
        empty_collection.insert_many([
            {"class_id": 3, "learner_id": 20, "scores": [
                {"type": "exam", "score": Decimal128("100")},
                {"type": "quiz", "score": Decimal128("100")},
            ]},
            {"class_id": 3, "learner_id": 21, "scores": [{"type": "exam", "score": Decimal128("100")}]},
        ])
        stats = PassRateService(GradeRepo(empty_collection)).get_class_stats(3)
        assert stats == {"totalLearners": 2, "learnersAbove70": 1, "percentageAbove70": 50}

    def test_overall_stats_empty_store(self, empty_collection):
        stats = PassRateService(GradeRepo(empty_collection)).get_overall_stats()
        assert stats == {"totalLearners": 0, "learnersAbove70": 0, "percentageAbove70": 0}

    def test_class_stats(self, grade_repo):
        stats = PassRateService(grade_repo).get_class_stats("7")
        assert stats == {"totalLearners": 1, "learnersAbove70": 1, "percentageAbove70": 100}

    def test_class_without_learners(self, grade_repo):
        with pytest.raises(ClassNotFoundError):
            PassRateService(grade_repo).get_class_stats("250")

    def test_malformed_class_id_does_not_query(self):
        repo = MagicMock()
        with pytest.raises(ClassNotFoundError):
            PassRateService(repo).get_class_stats("seven")
        repo.get_cohort_scores.assert_not_called()

    def test_threshold_from_config(self, grade_repo, monkeypatch):
        monkeypatch.setattr(GradeConfig, "PASS_THRESHOLD", 40)
        assert PassRateService(grade_repo).get_overall_stats()["learnersAbove70"] == 3


class TestIndexesDoNotChangeResults:

    def test_same_results_with_and_without_indexes(self, grades_collection, empty_collection):
        empty_collection.insert_many([
            {k: v for k, v in doc.items() if k != "_id"} for doc in grades_collection.find()
        ])
        create_grade_indexes(empty_collection)

        plain = GradeRepo(grades_collection)
        indexed = GradeRepo(empty_collection)

        assert ClassAverageService(plain).get_class_averages(1) == ClassAverageService(indexed).get_class_averages(1)
        assert PassRateService(plain).get_overall_stats() == PassRateService(indexed).get_overall_stats()
        assert PassRateService(plain).get_class_stats(101) == PassRateService(indexed).get_class_stats(101)
