"""Grade Statistics Utils - Weighted average and cohort pass-rate calculations"""
from numbers import Number
from bson.decimal128 import Decimal128
from typing import Dict, Iterable, List, Optional
from grade_stats.config.settings import SCORE_WEIGHTS


def _score_value(value) -> Optional[float]:
    """Numeric score value, None for anything MongoDB would not average"""
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    if isinstance(value, Number) and not isinstance(value, bool):
        return value
    return None


def split_scores_by_type(scores: Iterable[Dict]) -> Dict[str, List[float]]:
    """Group numeric score values by score type, unknown types are dropped"""
    by_type = {score_type: [] for score_type in SCORE_WEIGHTS}
    for entry in scores or []:
        if not isinstance(entry, dict):
            continue
        score_type = entry.get("type")
        value = _score_value(entry.get("score"))
        if score_type in by_type and value is not None:
            by_type[score_type].append(value)
    return by_type


def category_mean(values: List[float]) -> Optional[float]:
    """Mean of a score category, None when the category is empty"""
    if not values:
        return None
    return sum(values) / len(values)


def weighted_class_average(scores: Iterable[Dict], missing_as_zero: bool = False) -> Optional[float]:
    """
    Weighted average of one learner's scores in one class:
    0.5*mean(exam) + 0.3*mean(quiz) + 0.2*mean(homework).

    A category without scores has no mean. By default that makes the whole
    average None; with missing_as_zero the category adds nothing instead.
    """
    total = 0.0
    for score_type, values in split_scores_by_type(scores).items():
        mean = category_mean(values)
        if mean is None:
            if not missing_as_zero:
                return None
            continue
        total += SCORE_WEIGHTS[score_type] * mean
    return total


def weighted_score_sum(scores: Iterable[Dict]) -> float:
    """Sum of weight*score over every individual score entry"""
    return sum(
        SCORE_WEIGHTS[score_type] * value
        for score_type, values in split_scores_by_type(scores).items()
        for value in values
    )


def empty_cohort_stats() -> Dict:
    return {
        "totalLearners": 0,
        "learnersAbove70": 0,
        "percentageAbove70": 0
    }


def build_cohort_stats(learner_sums: Iterable[float], threshold: float = 70) -> Dict:
    """Count learners and those strictly above the pass threshold"""
    sums = list(learner_sums)
    total_learners = len(sums)
    if total_learners == 0:
        return empty_cohort_stats()

    learners_above = sum(1 for value in sums if value > threshold)
    return {
        "totalLearners": total_learners,
        "learnersAbove70": learners_above,
        "percentageAbove70": 100 * learners_above / total_learners
    }
