from typing import Dict, Iterable, List

from pymongo.database import Database


def backfill_pipeline() -> List[Dict]:
    """createdAt from the ObjectId timestamp, then updatedAt from createdAt, only where missing."""
    return [
        {"$set": {"createdAt": {"$ifNull": ["$createdAt", {"$toDate": "$_id"}]}}},
        {"$set": {"updatedAt": {"$ifNull": ["$updatedAt", "$createdAt"]}}},
    ]


class MaintenanceRepository:
    def __init__(self, db: Database):
        self.db = db

    def backfill_timestamps(self, collections: Iterable[str]) -> Dict[str, Dict[str, int]]:
        out: Dict[str, Dict[str, int]] = {}
        pipeline = backfill_pipeline()
        for name in collections:
            res = self.db[name].update_many({}, pipeline)
            out[name] = {"matched": res.matched_count, "modified": res.modified_count}
        return out
