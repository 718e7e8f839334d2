"""Index Optimization Utilities - Database Performance (SoC)"""
import logging
from pymongo import ASCENDING
from pymongo.errors import CollectionInvalid
from grade_stats.grades_central_db import get_db, get_grades_collection, COLLECTIONS
from grade_stats.config.settings import SCORE_TYPES, CLASS_ID_MIN, CLASS_ID_MAX, LEARNER_ID_MIN

logger = logging.getLogger(__name__)

GRADE_INDEXES = [
    [("class_id", ASCENDING)],
    [("learner_id", ASCENDING)],
    [("learner_id", ASCENDING), ("class_id", ASCENDING)]
]

GRADES_SCHEMA = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["class_id", "learner_id"],
        "properties": {
            "class_id": {
                "bsonType": "int",
                "minimum": CLASS_ID_MIN,
                "maximum": CLASS_ID_MAX,
                "description": f"must be an integer in [{CLASS_ID_MIN}, {CLASS_ID_MAX}] and is required"
            },
            "learner_id": {
                "bsonType": "int",
                "minimum": LEARNER_ID_MIN,
                "description": f"must be an integer greater than or equal to {LEARNER_ID_MIN} and is required"
            },
            "scores": {
                "bsonType": "array",
                "items": {
                    "bsonType": "object",
                    "properties": {
                        "type": {"enum": sorted(SCORE_TYPES)},
                        "score": {"bsonType": ["int", "long", "double", "decimal"]}
                    }
                }
            }
        }
    }
}

_indexed_collections = set()

def create_grade_indexes(collection=None):
    """Create the class_id, learner_id and (learner_id, class_id) indexes"""
    collection = collection if collection is not None else get_grades_collection()
    names = [collection.create_index(keys) for keys in GRADE_INDEXES]
    _indexed_collections.add(collection.name)
    logger.info(f"Indexed {collection.name}: {names}")
    return names

def ensure_indexes_exist(collection=None):
    """Auto-create indexes only when needed"""
    collection = collection if collection is not None else get_grades_collection()
    if collection.name in _indexed_collections:
        return
    create_grade_indexes(collection)

def apply_schema_validation(db=None, collection_name=None):
    """Attach the advisory grades validator; invalid writes only produce warnings"""
    db = db if db is not None else get_db()
    collection_name = collection_name or COLLECTIONS['grades_collection']
    options = {
        "validator": GRADES_SCHEMA,
        "validationLevel": "moderate",
        "validationAction": "warn"
    }
    try:
        db.create_collection(collection_name, **options)
        logger.info(f"Created {collection_name} with schema validation")
    except CollectionInvalid:
        db.command("collMod", collection_name, **options)
        logger.info(f"Updated schema validation on {collection_name}")

def main():
    from grade_stats.config.log_config import setup_logging
    setup_logging()
    apply_schema_validation()
    create_grade_indexes()
    logger.info("Grade collection setup completed")

if __name__ == "__main__":
    main()
