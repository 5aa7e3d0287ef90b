import argparse
import sys

from rich.console import Console
from rich.markup import escape

from .errors import FlatMoverError
from .flattener import Flattener
from .logger import setup_logger
from .progress import NullProgress, RichProgress

console = Console()

def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="flatmover",
        description="Move files from subdirectories into the root directory and remove the emptied subdirectories.",
    )
    p.add_argument("root", help="Root directory to flatten")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every move and deletion")
    p.add_argument("--no-progress", action="store_true", help="Do not show a progress bar")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger(verbose=args.verbose, console=console)

    reporter = NullProgress() if args.no_progress else RichProgress(console=console)
    try:
        summary = Flattener(args.root, reporter=reporter).run()
    except FlatMoverError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]", highlight=False)
        return 1

    console.print(
        f"[green]✓ File moving completed successfully![/green] "
        f"Moved {len(summary.moved)} files, removed {len(summary.removed_dirs)} directories."
    )
    return 0

if __name__ == "__main__":
    sys.exit(main())
