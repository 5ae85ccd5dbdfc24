from beatseed.errors import ConnectError
from beatseed.info.universal import get_mongodb_uri
import threading
from typing import Optional
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from abc import ABC


class DbClientFactory(ABC):
    _t_client_cache_data = threading.local()

    def __init__(self, **kvargs):
        pass

    def get_client_uri(self) -> str:
        raise NotImplementedError

    def get_cache_key(self) -> str:
        return f"{type(self).__name__}+{hash(self.get_client_uri())}+synced"

    def get_client(self) -> MongoClient:
        cache_key = self.get_cache_key()
        db_client = getattr(self._t_client_cache_data, cache_key, None)
        if db_client is None:
            db_client = MongoClient(self.get_client_uri(), tz_aware=True)
            setattr(self._t_client_cache_data, cache_key, db_client)

        assert (db_client is not None)
        return db_client

    def connect(self) -> MongoClient:
        """
        Opens the client and verifies the server answers a ping.

        `MongoClient` connects lazily, so the ping is what surfaces an
        unreachable server or bad credentials before any work begins.

        Returns:
            MongoClient: The connected client.

        Raises:
            ConnectError: If the server cannot be reached. Not retried.
        """
        try:
            db_client = self.get_client()
            db_client.admin.command("ping")
        except PyMongoError as e:
            self.close()
            raise ConnectError(str(e)) from e
        return db_client

    def close(self) -> None:
        cache_key = self.get_cache_key()
        db_client: Optional[MongoClient] = getattr(self._t_client_cache_data, cache_key, None)
        if db_client is None:
            return

        delattr(self._t_client_cache_data, cache_key)
        db_client.close()


class UriClientFactory(DbClientFactory):
    def __init__(self, uri: str = "", **kvargs):
        super().__init__(**kvargs)
        self.uri = get_mongodb_uri(uri)

    def get_client_uri(self) -> str:
        return self.uri
