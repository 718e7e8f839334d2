"""Custom exceptions - SoC principle"""

class GradeStatsError(Exception):
    """Base exception for grade statistics"""
    pass

class LearnerNotFoundError(GradeStatsError):
    """Learner has no scored records"""
    pass

class ClassNotFoundError(GradeStatsError):
    """Class has no learners with scored records"""
    pass
