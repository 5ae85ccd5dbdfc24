from beatseed.info.universal import (
    BATCH_SIZE,
    DEFAULT_DB_NAME,
    DEFAULT_MONGODB_URI,
    NUM_USERS,
    USER_COLLECTION,
    SeedConfig,
    get_mongodb_uri,
)
from beatseed.info.db_client import DbClientFactory, UriClientFactory
from beatseed.info.db_driver import Index, MongoDbModelDriver
from beatseed.info.model import Address, Model, StrLower, UserRecord
from beatseed.info.util import get_current_time, to_utc_aware


__all__ = [
    "BATCH_SIZE",
    "DEFAULT_DB_NAME",
    "DEFAULT_MONGODB_URI",
    "NUM_USERS",
    "USER_COLLECTION",
    "SeedConfig",
    "get_mongodb_uri",
    "DbClientFactory",
    "UriClientFactory",
    "Index",
    "MongoDbModelDriver",
    "Address",
    "Model",
    "StrLower",
    "UserRecord",
    "get_current_time",
    "to_utc_aware",
]
