"""Repository Factory - DRY Implementation"""
from grade_stats.repositories.grades.grade_repo import GradeRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _grade_repo = None

    @classmethod
    def get_grade_repo(cls) -> GradeRepo:
        """Get grade repository instance with caching"""
        if cls._grade_repo is None:
            cls._grade_repo = GradeRepo()
        return cls._grade_repo

    @classmethod
    def set_grade_repo(cls, repo: GradeRepo) -> None:
        """Replace the cached grade repository"""
        cls._grade_repo = repo
