from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


DEFAULT_MONGODB_URI = "mongodb://localhost:27017/beathub"
DEFAULT_DB_NAME = "beathub"
USER_COLLECTION = "users"

NUM_USERS = 1000
BATCH_SIZE = 100


def get_mongodb_uri(uri: Optional[str] = None) -> str:
    """
    Resolves the MongoDB connection string.

    Args:
        uri (str, optional): An explicit connection string. Takes precedence
            over the environment.

    Returns:
        str: `uri`, else the `MONGODB_URI` environment variable, else
            `DEFAULT_MONGODB_URI`.

    Raises:
        ValueError: If the resolved connection string is blank.
    """
    mongodb_uri = uri or os.getenv("MONGODB_URI") or DEFAULT_MONGODB_URI
    mongodb_uri = mongodb_uri.strip()

    if len(mongodb_uri) == 0:
        raise ValueError("MONGODB_URI is empty")

    return mongodb_uri


@dataclass
class SeedConfig:
    """
    Parameters of one seeding run.

    Attributes:
        uri (str): MongoDB connection string.
        db_name (str, optional): Database to seed. Defaults to the database
            in the connection string path, then `DEFAULT_DB_NAME`.
        collection_name (str): Collection that is cleared and refilled.
        num_users (int): Total number of records to insert.
        batch_size (int): Maximum number of records per bulk insert.
    """
    uri: str = DEFAULT_MONGODB_URI
    db_name: Optional[str] = None
    collection_name: str = USER_COLLECTION
    num_users: int = NUM_USERS
    batch_size: int = BATCH_SIZE

    @classmethod
    def from_env(cls) -> "SeedConfig":
        return cls(uri=get_mongodb_uri())

