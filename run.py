"""Browser Maze CLI entry point.

Provides subcommands for generating a maze in the terminal and running the
JSON API server. Accepts configuration via flags and environment variables,
with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import just_fix_windows_console
from dotenv import load_dotenv

just_fix_windows_console()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Browser Maze generator

    Generate a spanning-tree maze with start/goal rooms at the two ends of its
    longest path, or serve mazes as JSON to a browser-side renderer. CLI flags
    take precedence over environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST            Bind address for the web server (default: 0.0.0.0)
          PORT            Port for the web server (default: 5000)
          MAZE_SEED       Default seed for `generate` (default: random)
          MAZE_LOG_LEVEL  debug|info|warn|error (default: info)

        Examples:
          # Print a 12x8 maze for seed 42
          python run.py generate --seed 42 --width 12 --height 8

          # Emit the same maze as JSON (present walls only)
          python run.py generate --seed 42 --width 12 --height 8 --json

          # Run the API server on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="browser-maze",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Browser Maze {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed (default: env MAZE_SEED or random)")
    gen_parser.add_argument("--width", type=int, default=10, help="Rooms along x (default: 10)")
    gen_parser.add_argument("--height", type=int, default=10, help="Rooms along z (default: 10)")
    gen_parser.add_argument("--x-min", dest="x_min", type=int, default=0, help="West edge of the extent")
    gen_parser.add_argument("--z-min", dest="z_min", type=int, default=0, help="South edge of the extent")
    gen_parser.add_argument("--json", action="store_true", help="Print JSON instead of an ASCII drawing")
    gen_parser.add_argument("--all-walls", action="store_true", help="Include absent walls in JSON output")
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def _color(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def run_generate(args) -> int:
    from mazegen.maze import Maze, MazeConfig
    from mazegen.maze.render import render_ascii

    seed = args.seed
    if seed is None and os.getenv("MAZE_SEED"):
        try:
            seed = int(os.environ["MAZE_SEED"])
        except ValueError:
            print(f"[ERROR] MAZE_SEED must be an integer, got {os.environ['MAZE_SEED']!r}")
            return 1
    config = MazeConfig(
        x_min=args.x_min,
        x_max=args.x_min + args.width,
        z_min=args.z_min,
        z_max=args.z_min + args.height,
        seed=seed,
    )
    try:
        maze = Maze(config)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1
    if args.json:
        print(json.dumps(maze.to_dict(include_absent=args.all_walls), indent=2))
        return 0
    drawing = render_ascii(maze)
    drawing = drawing.replace(" S ", " " + _color("S", Fore.GREEN) + " ").replace(" G ", " " + _color("G", Fore.RED) + " ")
    print(_color(f"seed={maze.seed}", Fore.CYAN) + f" start={tuple(maze.start)} goal={tuple(maze.goal)} distance={maze.diameter}")
    print(drawing)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    divider = _color("=" * 40, Fore.MAGENTA)
    print("\n".join([
        divider,
        "  " + _color("Maze Server Bootup", Fore.CYAN + Style.BRIGHT),
        divider,
        f"  {_color('Host:', Fore.YELLOW):12} {_color(str(host), Fore.GREEN)}",
        f"  {_color('Port:', Fore.YELLOW):12} {_color(str(port), Fore.GREEN)}",
        divider,
        "",
    ]))
    from mazegen.logging_utils import log
    from mazegen.server import start_server

    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host=host, port=port, debug=bool(getattr(args, "debug", False)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
