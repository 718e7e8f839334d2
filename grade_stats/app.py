import logging
from flask import Flask
from flask_restful import Resource, Api
from flask_cors import CORS
from pymongo.errors import PyMongoError
from grade_stats.config.settings import ServerConfig
from grade_stats.config.log_config import setup_logging
from grade_stats.api.grades_api import LearnerClassAverage, CohortStats, ClassCohortStats
from grade_stats.utils.index.optimizer import ensure_indexes_exist

logger = logging.getLogger(__name__)


class HealthCheck(Resource):
    def get(self):
        return {"message": "Grade statistics service is running"}, 200


class GradeStatsFlask(Flask):
    def __init__(self, *args, grade_repo=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.grade_repo = grade_repo

    def add_api(self):
        api = Api(self, catch_all_404s=True)
        repo_kwargs = {"repo": self.grade_repo}
        api.add_resource(HealthCheck, "/")
        # Grade statistics APIs
        api.add_resource(LearnerClassAverage, "/learner/<string:learner_id>/avg-class",
                         resource_class_kwargs=repo_kwargs)
        api.add_resource(CohortStats, "/stats", resource_class_kwargs=repo_kwargs)
        api.add_resource(ClassCohortStats, "/stats/<string:class_id>",
                         resource_class_kwargs=repo_kwargs)
        return api


def create_app(grade_repo=None) -> GradeStatsFlask:
    """Build the Flask app; grade_repo overrides the Mongo-backed repository"""
    setup_logging()
    app = GradeStatsFlask(__name__, grade_repo=grade_repo)
    CORS(app, origins=ServerConfig.CORS_ORIGINS)
    app.add_api()
    return app


def main():
    app = create_app()
    try:
        ensure_indexes_exist()
    except PyMongoError as e:
        logger.warning(f"Index setup skipped: {e}")
    app.run(host=ServerConfig.HOST, port=ServerConfig.PORT)


if __name__ == "__main__":
    main()
