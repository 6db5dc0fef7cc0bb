import argparse
from typing import List

from rich.console import Console
from rich.progress import track
from rich.table import Table

from intervalstore.modes.IntervalStoreBaseMode import IntervalStoreBaseMode
from intervalstore.store.store_utils import render_entries
from intervalstore.stress.StressDriver import StressDriver
from intervalstore.stress.StressOptions import StressOptions


class StressMode(IntervalStoreBaseMode):
    name = "stress"

    def __init__(self, console: Console):
        super().__init__(console)

    def run(self):
        args = self._parse_args()
        overrides: List[str] = args.overrides
        show_store = bool(args.show)

        # Create options and override them
        options = StressOptions()
        options.overwrite_options(overrides)

        self.console.print(options)

        driver = StressDriver(options)
        report = driver.run(lambda rounds: track(rounds, description="assigning", console=self.console))

        table = Table(title="Stress Report")
        table.add_column("Metric", justify="left", style="cyan")
        table.add_column("Count", justify="right", style="magenta")

        table.add_row("Rounds", str(report.iterations))
        table.add_row("Applied", str(report.applied))
        table.add_row("Empty ranges", str(report.empty))
        table.add_row("Failed", str(report.failed))
        for kind, count in report.failures_by_kind.items():
            table.add_row(f"  {kind.name}", str(count))
        table.add_row("Boundaries", str(report.boundaries))

        self.console.print(table)

        if show_store:
            self.console.print(render_entries(driver.store.entries()))

        self.console.print("done!")

    def _parse_args(self) -> argparse.Namespace:
        parser = self._create_parser()
        parser.add_argument("overrides", nargs="*", default=[],
                            help="Option overrides as name=value (e.g. iterations=1000 seed=7).")
        parser.add_argument("--show", action="store_true", help="Print the final store content.")
        return parser.parse_args()
