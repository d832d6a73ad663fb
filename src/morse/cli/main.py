"""
Morse Translator CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from morse.config import APP_VERSION, LOG_LEVEL
from morse.cli.commands import translate, mapping, history, shell


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(prog="morse", description="Morse Translator CLI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")
    
    translate.add_subparser(subparsers)
    mapping.add_subparser(subparsers)
    history.add_subparser(subparsers)
    shell.add_subparser(subparsers)
    
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
