from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.query_builder import QuerySpec


class DocumentRepository:
    """Raw document access for one collection; documents come back undecoded."""

    collection_name: str = ""

    def __init__(self, db: Database):
        self.db = db

    @property
    def collection(self) -> Collection:
        return self.db[self.collection_name]

    # -------------------------------
    # CRUD
    # -------------------------------
    def insert(self, doc: Dict[str, Any]) -> ObjectId:
        res = self.collection.insert_one(doc)
        return res.inserted_id

    def get_by_id(self, oid: ObjectId) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"_id": oid})

    def find(self, spec: QuerySpec) -> List[Dict[str, Any]]:
        cursor = (
            self.collection.find(spec.filter)
            .sort(spec.sort)
            .skip(spec.skip)
            .limit(spec.limit)
        )
        return list(cursor)

    def count(self, filter: Dict[str, Any]) -> int:
        return self.collection.count_documents(filter)

    def update_partial(self, oid: ObjectId, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, oid: ObjectId) -> bool:
        res = self.collection.delete_one({"_id": oid})
        return res.deleted_count > 0
