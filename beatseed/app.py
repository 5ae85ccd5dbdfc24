import sys
from typing import Optional

from pymongo.errors import PyMongoError

from beatseed.errors import BatchInsertError, ClearError, ConnectError, SeedError
from beatseed.info.db_client import DbClientFactory, UriClientFactory
from beatseed.info.db_driver import MongoDbModelDriver
from beatseed.info.model import UserRecord
from beatseed.info.universal import SeedConfig
from beatseed.seed.generator import UserRecordGenerator
from beatseed.seed.loader import BatchLoader
from beatseed.seed.report import ConsoleReporter, SeedReporter


def build_driver(config: SeedConfig, client_factory: DbClientFactory) -> MongoDbModelDriver:
    return MongoDbModelDriver(
        collection_name=config.collection_name,
        client_factory=client_factory,
        db_name=config.db_name,
        index=UserRecord.indexes,
    )


def run(
    config: Optional[SeedConfig] = None,
    reporter: Optional[SeedReporter] = None,
    generator: Optional[UserRecordGenerator] = None,
    client_factory: Optional[DbClientFactory] = None,
) -> int:
    """
    Connects, seeds the users collection and disconnects.

    This is the only place errors from the pipeline are handled.

    Returns:
        int: Process exit code, `0` on success and `1` on any fatal error.
    """
    reporter = reporter or ConsoleReporter()

    try:
        config = config or SeedConfig.from_env()
        client_factory = client_factory or UriClientFactory(config.uri)
        client_factory.connect()
    except (ConnectError, ValueError) as e:
        reporter.on_error("MongoDB connection error", e)
        return 1
    reporter.on_connected()

    try:
        driver = build_driver(config, client_factory)
        driver.create_collection()
        loader = BatchLoader(driver.get_db_collection(), generator or UserRecordGenerator(), reporter)
        # indexes are created on the emptied collection
        loader.seed(config.num_users, config.batch_size, after_clear=driver.create_index)
    except ClearError as e:
        reporter.on_error("Clearing error", e)
        return 1
    except BatchInsertError as e:
        reporter.on_error(f"Seeding error after {e.completed} users", e)
        return 1
    except (SeedError, PyMongoError, ValueError) as e:
        reporter.on_error("Seeding error", e)
        return 1
    finally:
        client_factory.close()
        reporter.on_closed()

    return 0


def main() -> None:
    sys.exit(run())
