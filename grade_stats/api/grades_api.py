"""Grades API - Presentation Layer (SoC)"""
from flask_restful import Resource
from grade_stats.services.learner.class_average_service import ClassAverageService
from grade_stats.services.cohort.pass_rate_service import PassRateService
from grade_stats.exceptions.error_handler import handle_service_error

class LearnerClassAverage(Resource):
    def __init__(self, repo=None):
        self.repo = repo

    def get(self, learner_id):
        try:
            result = ClassAverageService(self.repo).get_class_averages(learner_id)
            return result, 200
        except Exception as e:
            return handle_service_error(e)

class CohortStats(Resource):
    def __init__(self, repo=None):
        self.repo = repo

    def get(self):
        try:
            result = PassRateService(self.repo).get_overall_stats()
            return result, 200
        except Exception as e:
            return handle_service_error(e)

class ClassCohortStats(Resource):
    def __init__(self, repo=None):
        self.repo = repo

    def get(self, class_id):
        try:
            result = PassRateService(self.repo).get_class_stats(class_id)
            return result, 200
        except Exception as e:
            return handle_service_error(e)
