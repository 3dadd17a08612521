"""
database.py – Motor client wrapper

One `Database` is built at startup, parked on `app.state` and handed to the
services through FastAPI dependencies (see core/deps.py); nothing imports a
module-global handle.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING

from ..core.config import Settings

log = logging.getLogger(__name__)


class Database:
    def __init__(self, client: AsyncIOMotorClient, settings: Settings):
        self.client = client
        self.settings = settings
        self.db = client.get_default_database()

    @classmethod
    def connect(cls, settings: Settings) -> "Database":
        """
        Build a Motor client from settings.

        • settings.mongo_uri is a pydantic MongoDsn → cast to str.
        • uuidRepresentation="standard" keeps UUIDs driver-default.
        """
        client = AsyncIOMotorClient(str(settings.mongo_uri), uuidRepresentation="standard")
        return cls(client, settings)

    @property
    def movies(self) -> AsyncIOMotorCollection:
        return self.db[self.settings.movies_collection]

    @property
    def users(self) -> AsyncIOMotorCollection:
        return self.db[self.settings.users_collection]

    async def ensure_indexes(self) -> None:
        # backs up the register pre-check: a racing insert hits DuplicateKeyError
        await self.users.create_index([("email", ASCENDING)], unique=True)
        log.info("indexes ensured on %s.%s", self.db.name, self.settings.users_collection)

    def close(self) -> None:
        self.client.close()
