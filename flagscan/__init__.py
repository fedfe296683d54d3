import os
import sys
import logging

from typing import Optional

from . import const, vt100
from .args import Args, Pair, isFlag, parse
from .parser import ArgsParser, CoercionError, Parser

__all__ = [
    "Args",
    "ArgsParser",
    "CoercionError",
    "Pair",
    "Parser",
    "isFlag",
    "main",
    "parse",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.style('%(asctime)s', vt100.CYAN)} {vt100.style('%(levelname)s', vt100.YELLOW)} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                force=True,
            )
        else:
            logFile = const.GLOBAL_LOG_FILE
            os.makedirs(os.path.dirname(logFile), exist_ok=True)

            logging.basicConfig(
                level=logging.INFO,
                filename=logFile,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                force=True,
            )


OPTIONS = [
    ("-h, --help", "Show usage information"),
    ("-V, --version", "Show current version"),
    ("--verbose", "Enable verbose logging"),
    ("--require-positional", "Fail if no positional argument is given"),
    ("--expect-int <name>", "Read --<name> or -<name> as an integer"),
]


def usage():
    print(f"Usage: {const.ARGV0} [tokens...]")
    print()
    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()
    vt100.subtitle("Options")
    for flag, description in OPTIONS:
        print(vt100.indent(f"{vt100.style(flag, vt100.GREEN)}  {description}"))
    print()
    print(
        "Options without a value must come last or be followed by another flag,\n"
        "otherwise the next token is taken as their value.\n"
        f"Extra tokens are read from ${const.EXTRA_ARGS_ENV}."
    )


def _collectArgs(argv: Optional[list[str]]) -> list[str]:
    if argv is None:
        argv = sys.argv[1:]
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    return (extra.split() if extra else []) + argv


def _dump(parser: Parser):
    vt100.title("Positional")
    for i, value in enumerate(parser.positional()):
        print(vt100.indent(f"{i}: {value}"))
    print()

    vt100.title("Options")
    for opt in parser.options():
        print(vt100.indent(opt))
    print()

    vt100.title("Arguments")
    for key, value in parser.args():
        print(vt100.indent(f"{key} = {value}"))
    print()


def _run(parser: Parser) -> int:
    if parser.hasOption("--help", "-h"):
        usage()
        return 0

    if parser.hasOption("--version", "-V"):
        print(f"{const.ARGV0} v{const.VERSION_STR}")
        return 0

    if parser.hasOption("--require-positional") and parser.at(0) is None:
        raise RuntimeError("No positional argument found at index 0")

    integers: list[tuple[str, int]] = []
    for name in parser.get("--expect-int"):
        value = parser.getInt(f"--{name}", f"-{name}")
        if value is None:
            vt100.warning(f"Argument '{name}' was not given")
            continue
        integers.append((name, value))

    _dump(parser)

    if integers:
        vt100.title("Integers")
        for name, value in integers:
            print(vt100.indent(f"{name} = {value}"))
        print()

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    try:
        parser = Parser(_collectArgs(argv))
        parser.parse()
        logger.setup(parser.hasOption("--verbose"))
        # Logging was not configured during the first pass
        parser.parse()
        return _run(parser)

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
