from beatseed.errors import BatchInsertError, ClearError, ConnectError, SeedError

from beatseed.info import (
    Address,
    SeedConfig,
    UriClientFactory,
    UserRecord,
    get_mongodb_uri,
)

from beatseed.seed import (
    BatchLoader,
    BatchResult,
    ConsoleReporter,
    GeneratorProfile,
    SeedReport,
    SeedReporter,
    UserRecordGenerator,
    plan_batches,
)

__all__ = [
    "SeedError",
    "ConnectError",
    "ClearError",
    "BatchInsertError",

    #Info
    "Address",
    "SeedConfig",
    "UriClientFactory",
    "UserRecord",
    "get_mongodb_uri",

    #Seed
    "BatchLoader",
    "BatchResult",
    "ConsoleReporter",
    "GeneratorProfile",
    "SeedReport",
    "SeedReporter",
    "UserRecordGenerator",
    "plan_batches",
]
