from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from beatseed.seed.loader import BatchResult, SeedReport


class SeedReporter:
    """
    Receives progress events from a seeding run. All hooks are no-ops.
    """

    def on_connected(self) -> None:
        pass

    def on_clear_start(self) -> None:
        pass

    def on_cleared(self, deleted: int) -> None:
        pass

    def on_plan(self, total: int, batch_count: int) -> None:
        pass

    def on_batch(self, result: "BatchResult") -> None:
        pass

    def on_complete(self, report: "SeedReport") -> None:
        pass

    def on_closed(self) -> None:
        pass

    def on_error(self, message: str, error: BaseException) -> None:
        pass


class ConsoleReporter(SeedReporter):
    """
    Prints human-readable progress lines, prefixed with ✓ or ✗.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def ok(self, text: str) -> None:
        self.console.print(f"[green]✓[/green] {text}")

    def on_connected(self) -> None:
        self.ok("Connected to MongoDB")

    def on_clear_start(self) -> None:
        self.console.print("Clearing existing users...")

    def on_cleared(self, deleted: int) -> None:
        self.ok(f"Cleared existing users ({deleted} removed)")

    def on_plan(self, total: int, batch_count: int) -> None:
        self.console.print(f"Generating {total} users in {batch_count} batches...")

    def on_batch(self, result: "BatchResult") -> None:
        line = f"Batch {result.index}/{result.total_batches} complete ({result.inserted} users"
        if result.skipped:
            line += f", {result.skipped} skipped"
        self.ok(line + ")")

    def on_complete(self, report: "SeedReport") -> None:
        line = f"Successfully seeded {report.total_inserted} users"
        if report.total_skipped:
            line += f" ({report.total_skipped} skipped)"
        self.ok(line)

    def on_closed(self) -> None:
        self.ok("Database connection closed")

    def on_error(self, message: str, error: BaseException) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}: {escape(str(error))}")
