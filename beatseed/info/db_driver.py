from typing import List
from typing import Optional
from beatseed.info.db_client import DbClientFactory
from beatseed.info.universal import DEFAULT_DB_NAME
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection


class Index:
    """
    A MongoDB index declaration.

    Keyword arguments are passed through to `Collection.create_index`.
    """
    def __init__(self, keys, **kwargs):
        self.kwargs = kwargs
        self.kwargs["keys"] = keys

    def to_dict(self):
        return self.kwargs


@dataclass
class MongoDbModelDriver:
    collection_name: str
    client_factory: DbClientFactory
    db_name: Optional[str] = None
    index: Optional[List[Index]] = None

    def get_db_collection_name(self) -> str:
        return self.collection_name

    def get_db_client(self) -> MongoClient:
        return self.client_factory.get_client()

    def get_db(self) -> Database:
        """
        Gets the MongoDB database.

        Uses `db_name` when set, otherwise the database named in the
        connection string, otherwise `DEFAULT_DB_NAME`.

        Returns:
            Database: The `pymongo.database.Database` instance.
        """
        client = self.get_db_client()
        if self.db_name:
            return client[self.db_name]
        return client.get_default_database(default=DEFAULT_DB_NAME)

    def get_db_collection(self) -> Collection:
        client_database = self.get_db()
        return client_database[self.get_db_collection_name()]

    def create_collection(self, **kvargs):
        db = self.get_db()
        collection_names = db.list_collection_names()
        name = self.get_db_collection_name()

        if name not in collection_names:
            db.create_collection(name, **kvargs)

    def create_index(self):
        indexes = self.index
        if indexes and len(indexes) > 0:
            collection = self.get_db_collection()
            for index in indexes:
                assert isinstance(index, Index)
                collection.create_index(**index.to_dict())

