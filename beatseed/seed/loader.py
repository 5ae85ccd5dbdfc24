"""
Batched, fault-tolerant bulk loading of generated users.

The collection is cleared first, then refilled batch by batch with unordered
`insert_many` calls: a document rejected by a per-document constraint (such
as a duplicate email) is skipped while the rest of its batch is kept.
"""
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from pymongo.collection import Collection
from pymongo.errors import BulkWriteError, PyMongoError

from beatseed.errors import BatchInsertError, ClearError
from beatseed.info.model import UserRecord
from beatseed.seed.generator import UserRecordGenerator
from beatseed.seed.report import SeedReporter

# duplicate key (11000, 11001, 12582) and document validation failure (121)
DOCUMENT_ERROR_CODES = frozenset({11000, 11001, 12582, 121})


def plan_batches(total: int, batch_size: int) -> List[int]:
    """
    Splits `total` records into batch sizes of at most `batch_size`.

    Every batch is full except possibly the last, which holds the remainder,
    so there are `ceil(total / batch_size)` batches summing to `total`.

    Args:
        total (int): Number of records to insert. Must be positive.
        batch_size (int): Maximum records per batch. Must be positive.

    Returns:
        List[int]: The size of each batch, in insertion order.

    Raises:
        ValueError: If either argument is not a positive integer.
    """
    for name, value in (("total", total), ("batch_size", batch_size)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")

    batch_count = -(-total // batch_size)
    return [min(batch_size, total - i * batch_size) for i in range(batch_count)]


@dataclass
class BatchResult:
    index: int
    total_batches: int
    requested: int
    inserted: int

    @property
    def skipped(self) -> int:
        return self.requested - self.inserted


@dataclass
class SeedReport:
    deleted: int = 0
    batches: List[BatchResult] = field(default_factory=list)

    @property
    def total_requested(self) -> int:
        return sum(batch.requested for batch in self.batches)

    @property
    def total_inserted(self) -> int:
        return sum(batch.inserted for batch in self.batches)

    @property
    def total_skipped(self) -> int:
        return sum(batch.skipped for batch in self.batches)


class BatchLoader:
    """
    Replaces the contents of a collection with generated users.

    Args:
        collection (Collection): Target collection.
        generator (UserRecordGenerator): Source of records.
        reporter (SeedReporter, optional): Receives progress events.
        tolerated_codes (Iterable[int], optional): Write error codes treated
            as per-document rejections rather than batch failures.
    """

    def __init__(
        self,
        collection: Collection,
        generator: UserRecordGenerator,
        reporter: Optional[SeedReporter] = None,
        tolerated_codes: Iterable[int] = DOCUMENT_ERROR_CODES,
    ):
        self.collection = collection
        self.generator = generator
        self.reporter = reporter or SeedReporter()
        self.tolerated_codes = frozenset(tolerated_codes)

    def clear(self) -> int:
        """
        Deletes every document in the collection.

        Returns:
            int: The number of documents removed.

        Raises:
            ClearError: If the delete fails. The collection may be partially
                cleared.
        """
        self.reporter.on_clear_start()
        try:
            result = self.collection.delete_many({})
        except PyMongoError as e:
            raise ClearError(f"failed to clear {self.collection.name}: {e}") from e

        self.reporter.on_cleared(result.deleted_count)
        return result.deleted_count

    def is_document_error(self, bwe: BulkWriteError) -> bool:
        details = bwe.details or {}
        if details.get("writeConcernErrors"):
            return False

        write_errors = details.get("writeErrors") or []
        return len(write_errors) > 0 and all(
            error.get("code") in self.tolerated_codes for error in write_errors
        )

    def insert_batch(
        self,
        records: List[UserRecord],
        index: int = 1,
        total_batches: int = 1,
        completed: int = 0,
    ) -> BatchResult:
        """
        Inserts one batch with an unordered bulk write.

        Documents rejected for a tolerated code are skipped; the rest of the
        batch stays inserted.

        Args:
            records (List[UserRecord]): The batch to insert.
            index (int): 1-based batch index, for reporting.
            total_batches (int): Number of batches in the run, for reporting.
            completed (int): Records inserted by earlier batches.

        Returns:
            BatchResult: Requested and inserted counts for the batch.

        Raises:
            BatchInsertError: On any failure that is not a per-document
                rejection. Nothing is rolled back.
        """
        docs = [record.dump_doc() for record in records]
        if not docs:
            return BatchResult(index, total_batches, requested=0, inserted=0)

        try:
            result = self.collection.insert_many(docs, ordered=False)
            inserted = len(result.inserted_ids)
        except BulkWriteError as bwe:
            if not self.is_document_error(bwe):
                raise BatchInsertError(
                    f"batch {index}/{total_batches} failed: {bwe}", index, completed
                ) from bwe
            inserted = bwe.details.get("nInserted", 0)
        except PyMongoError as e:
            raise BatchInsertError(
                f"batch {index}/{total_batches} failed: {e}", index, completed
            ) from e

        return BatchResult(index, total_batches, requested=len(docs), inserted=inserted)

    def seed(
        self,
        total: int,
        batch_size: int,
        after_clear: Optional[Callable[[], None]] = None,
    ) -> SeedReport:
        """
        Clears the collection and inserts `total` generated users.

        Batches run strictly in order; each one is fully generated in memory
        before its insert.

        Args:
            total (int): Number of users to insert.
            batch_size (int): Maximum users per insert call.
            after_clear (Callable, optional): Runs once the collection is
                empty and before the first insert, e.g. to create indexes.

        Returns:
            SeedReport: Per-batch results and the number of deleted documents.
        """
        sizes = plan_batches(total, batch_size)
        report = SeedReport(deleted=self.clear())
        if after_clear is not None:
            after_clear()

        self.reporter.on_plan(total, len(sizes))
        for i, size in enumerate(sizes, start=1):
            records = self.generator.generate_many(size)
            result = self.insert_batch(records, i, len(sizes), report.total_inserted)
            report.batches.append(result)
            self.reporter.on_batch(result)

        self.reporter.on_complete(report)
        return report
