"""
Exceptions raised by the seeding pipeline.

Core code raises these and never terminates the process itself; the
top-level entry point (`beatseed.app.run`) decides the exit code.
"""


class SeedError(Exception):
    """Base class for all fatal seeding failures."""


class ConnectError(SeedError):
    """The datastore could not be reached."""


class ClearError(SeedError):
    """Deleting the existing records failed."""


class BatchInsertError(SeedError):
    """
    A batch insert failed for a reason other than per-document constraint
    violations (e.g. connection loss or a write concern error).

    Attributes:
        batch_index (int): 1-based index of the failing batch.
        completed (int): Records inserted by earlier batches. These are not
            rolled back.
    """

    def __init__(self, message: str, batch_index: int, completed: int):
        super().__init__(message)
        self.batch_index = batch_index
        self.completed = completed
