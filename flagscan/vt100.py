import os
import sys

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def enabled() -> bool:
    """Colours are on unless NO_COLOR is set, see https://no-color.org."""
    return os.environ.get("NO_COLOR", "") == ""


def style(text: str, *codes: str) -> str:
    if not enabled() or len(codes) == 0:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(style(text, BOLD, WHITE, UNDERLINE))


def subtitle(text: str):
    print(f"{style(text, BOLD, WHITE)}:")


def error(msg: str) -> None:
    print(f"{style('Error:', RED)} {msg}\n", file=sys.stderr)


def warning(msg: str) -> None:
    print(f"{style('Warning:', YELLOW)} {msg}\n", file=sys.stderr)
