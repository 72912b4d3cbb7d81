from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main
from .cli.make_figures import main as figures_main

COMMANDS = {
    "analyze": analyze_main,
    "analysis": analyze_main,
    "figures": figures_main,
    "plots": figures_main,
}


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # No subcommand, or bare flags: analyze
    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    cmd = COMMANDS.get(argv[0].lower())
    if cmd is not None:
        return cmd(argv[1:])

    print("Usage:")
    print("  python -m connectfour_analysis analyze [--moves-csv ...] [--games-csv ...] [--outdir figures]")
    print("  python -m connectfour_analysis figures [--results-dir data/results] [--figures-dir data/figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
