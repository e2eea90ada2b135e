import logging
import os
import sys

from rich import print as print_rich
from rich.logging import RichHandler
from rich.markup import escape
from rich.traceback import install

from grammar import Grammar, GrammarError
from grammar.left_recursion import left_recursion_table
from utils.grammars import GRAMMAR_REGEX

install(show_locals=False)

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    log_level_str = os.getenv("LOG_LEVEL", level).upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def load_grammar(argv: list[str]) -> Grammar:
    if len(argv) > 1:
        with open(argv[1]) as f:
            logger.info("reading grammar from %s", argv[1])
            return Grammar.from_str(f.read())
    return Grammar.from_str(GRAMMAR_REGEX)


def main(argv: list[str]) -> int:
    setup_logging()
    try:
        g = load_grammar(argv)
        print_rich(escape(str(g)))
        print_rich(f"Has left recursion? {g.has_left_recursion()}")
        print_rich(escape(left_recursion_table(g).get_string()))
    except GrammarError as e:
        logger.error("malformed grammar: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
