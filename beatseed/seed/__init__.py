from beatseed.seed.generator import GeneratorProfile, UserRecordGenerator, email_local_part
from beatseed.seed.loader import DOCUMENT_ERROR_CODES, BatchLoader, BatchResult, SeedReport, plan_batches
from beatseed.seed.report import ConsoleReporter, SeedReporter


__all__ = [
    "GeneratorProfile",
    "UserRecordGenerator",
    "email_local_part",
    "DOCUMENT_ERROR_CODES",
    "BatchLoader",
    "BatchResult",
    "SeedReport",
    "plan_batches",
    "ConsoleReporter",
    "SeedReporter",
]
