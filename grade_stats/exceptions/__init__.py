"""Exceptions - domain errors and their HTTP translation"""
from .exceptions import GradeStatsError, LearnerNotFoundError, ClassNotFoundError
