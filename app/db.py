from pymongo import MongoClient

from app.core.config import settings

# one client per process; pymongo pools connections internally
client = MongoClient(
    settings.MONGO_URI,
    tz_aware=True,
    serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
)


# DB dependency
def get_db():
    yield client[settings.MONGO_DB]
