import os
import tempfile

import mongomock
import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="grade_stats_logs_"))

from grade_stats.app import create_app
from grade_stats.repositories.core.repository_factory import RepositoryFactory
from grade_stats.repositories.grades.grade_repo import GradeRepo
from grade_stats.utils.index import optimizer


SAMPLE_GRADES = [
    # learner 1: two classes, every category present in class 101
    {"class_id": 101, "learner_id": 1, "scores": [
        {"type": "exam", "score": 80},
        {"type": "exam", "score": 90},
        {"type": "quiz", "score": 70},
        {"type": "homework", "score": 60},
        {"type": "homework", "score": 100},
    ]},
    {"class_id": 7, "learner_id": 1, "scores": [
        {"type": "exam", "score": 80},
        {"type": "exam", "score": 90},
    ]},
    # learner 2: exam 100 only, sums to 50
    {"class_id": 101, "learner_id": 2, "scores": [
        {"type": "exam", "score": 100},
    ]},
    # learner 3: exam 100 + quiz 100, sums to 80
    {"class_id": 101, "learner_id": 3, "scores": [
        {"type": "exam", "score": 100},
        {"type": "quiz", "score": 100},
    ]},
    # learner 4: record without scores is not part of any cohort
    {"class_id": 250, "learner_id": 4, "scores": []},
]


@pytest.fixture
def grades_collection():
    collection = mongomock.MongoClient().db.grades
    collection.insert_many([dict(doc) for doc in SAMPLE_GRADES])
    return collection


@pytest.fixture
def empty_collection():
    return mongomock.MongoClient().db.grades


@pytest.fixture
def grade_repo(grades_collection):
    return GradeRepo(grades_collection)


@pytest.fixture
def client(grade_repo):
    app = create_app(grade_repo=grade_repo)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture(autouse=True)
def reset_module_state():
    yield
    RepositoryFactory._grade_repo = None
    optimizer._indexed_collections.clear()
