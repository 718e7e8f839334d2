"""Grade Domain Pipelines - Flow-Based Organization (SoC)"""
from typing import List, Dict, Optional

# ═══════════════════════════════════════════════════════════════════════════════
# LEARNER PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_learner_class_scores_pipeline(learner_id: int) -> List[Dict]:
    """Per-class score entries of one learner, one document per class"""
    return [
        {"$match": {"learner_id": learner_id}},
        {"$unwind": "$scores"},
        {"$group": {
            "_id": "$class_id",
            "scores": {"$push": "$scores"}
        }},
        {"$sort": {"_id": 1}}
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# COHORT PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_cohort_scores_pipeline(class_id: Optional[int] = None) -> List[Dict]:
    """All score entries grouped per learner, optionally restricted to one class"""
    pipeline = []
    if class_id is not None:
        pipeline.append({"$match": {"class_id": class_id}})
    pipeline.extend([
        {"$unwind": "$scores"},
        {"$group": {
            "_id": "$learner_id",
            "scores": {"$push": "$scores"}
        }}
    ])
    return pipeline
