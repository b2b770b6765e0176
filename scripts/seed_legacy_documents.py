"""
Legacy document seed script

Inserts documents shaped like the ones older writers left in the collections
(aliased names, int64/float ages, string and datetime birthdates, ObjectId
cross-references, missing timestamps) so the read path can be checked by hand.

Usage:
    python scripts/seed_legacy_documents.py           # insert
    python scripts/seed_legacy_documents.py --clear   # remove seeded documents
"""
import sys
import os
from datetime import datetime, timezone

from bson import ObjectId
from bson.int64 import Int64

# put the project root on the Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from app.core.config import settings
from app.db import client

SEED_TAG = "legacy-seed"


def legacy_documents():
    """(collection, document) pairs covering each tolerated variant"""
    mammals = ObjectId()
    canine = ObjectId()
    return [
        ("categories", {"_id": mammals, "category_name": "Mammals", "seed": SEED_TAG}),
        ("categories", {"name": "Birds", "createdAt": datetime.now(timezone.utc), "seed": SEED_TAG}),
        ("species", {"_id": canine, "species_name": "Canine", "category": mammals, "seed": SEED_TAG}),
        ("species", {"name": "Feline", "category": str(mammals), "seed": SEED_TAG}),
        ("animals", {"animal_name": "Rex", "species": canine, "birthdate": "2019-06-15", "seed": SEED_TAG}),
        ("animals", {"name": "Mia", "species": "cat", "age": Int64(4), "adopted": True, "seed": SEED_TAG}),
        ("animals", {
            "name": "Tweety",
            "species": "bird",
            "age": 2.7,
            "location": {"type": "Point", "coordinates": [-73.97, 40.77]},
            "seed": SEED_TAG,
        }),
        ("animals", {
            "name": "Nemo",
            "species": "fish",
            "birthdate": datetime(2022, 1, 1, tzinfo=timezone.utc),
            "owner": "Marlin",
            "seed": SEED_TAG,
        }),
    ]


def seed():
    db = client[settings.MONGO_DB]
    inserted = 0
    for collection, doc in legacy_documents():
        res = db[collection].insert_one(doc)
        inserted += 1
        print(f"  [{inserted}] {collection:10s} {res.inserted_id}")
    print(f"\n[OK] inserted {inserted} legacy documents into '{settings.MONGO_DB}'")


def clear():
    db = client[settings.MONGO_DB]
    for collection in settings.collections:
        res = db[collection].delete_many({"seed": SEED_TAG})
        print(f"  {collection:10s} removed {res.deleted_count}")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "--clear":
        clear()
    else:
        seed()
