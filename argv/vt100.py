import sys
from typing import TextIO, Optional


RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str, file: Optional[TextIO] = None):
    print(f"{BOLD+WHITE+UNDERLINE}{text}{RESET}", file=file)


def subtitle(text: str, file: Optional[TextIO] = None):
    print(f"{BOLD+WHITE}{text}{RESET}:", file=file)


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
