import argparse
from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console


class IntervalStoreBaseMode(ABC):
    """
    A command of the intervalstore CLI. Each mode parses its own arguments from sys.argv.
    """
    name: str = ""

    def __init__(self, console: Console):
        self.console = console

    def _create_parser(self, usage: Optional[str] = None, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(prog=f"intervalstore {self.name}", usage=usage, epilog=epilog,
                                       formatter_class=argparse.RawDescriptionHelpFormatter)

    @abstractmethod
    def run(self):
        pass
