import argparse
import logging
import sys
from typing import Dict, Type, Tuple, List

from rich.console import Console
from rich.logging import RichHandler

from intervalstore.modes.IntervalStoreBaseMode import IntervalStoreBaseMode
from intervalstore.modes.PaintMode import PaintMode
from intervalstore.modes.StressMode import StressMode

intervalstore_modes: Dict[str, Type[IntervalStoreBaseMode]] = {
    "stress": StressMode,
    "paint": PaintMode,
}


def parse_args() -> Tuple[argparse.Namespace, List[str]]:
    parser = argparse.ArgumentParser(prog="intervalstore", add_help=False)
    parser.add_argument("mode", choices=intervalstore_modes.keys(), help="Which mode to start intervalstore in.")
    parser.add_argument("--verbose", action="store_true", help="Show debug log output.")
    return parser.parse_known_args()


def main() -> None:
    args, unknown_args = parse_args()
    sys.argv = [sys.argv[0], *unknown_args]

    console = Console()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(message)s",
                        handlers=[RichHandler(console=console)])

    mode_str = str(args.mode)
    mode_type = intervalstore_modes[mode_str]

    console.print("Interval Store - Piecewise-Constant Key Ranges")
    console.print(f"Mode: {mode_str}")
    mode = mode_type(console)
    mode.run()


if __name__ == "__main__":
    main()
