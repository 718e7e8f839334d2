"""Grade Repository - Data Access Layer (SoC)"""
from typing import Dict, List, Optional
from grade_stats.grades_central_db import get_grades_collection
from grade_stats.repositories.grades.grade_pipelines import build_learner_class_scores_pipeline, build_cohort_scores_pipeline

class GradeRepo:
    def __init__(self, collection=None):
        self.collection = collection if collection is not None else get_grades_collection()

    def get_learner_class_scores(self, learner_id: int) -> List[Dict]:
        pipeline = build_learner_class_scores_pipeline(learner_id)
        return [
            {"class_id": doc["_id"], "scores": doc.get("scores", [])}
            for doc in self.collection.aggregate(pipeline)
        ]

    def get_cohort_scores(self, class_id: Optional[int] = None) -> List[Dict]:
        pipeline = build_cohort_scores_pipeline(class_id)
        return [
            {"learner_id": doc["_id"], "scores": doc.get("scores", [])}
            for doc in self.collection.aggregate(pipeline)
        ]
