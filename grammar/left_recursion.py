# this module reports Left Recursion in a grammar, both direct and indirect.
import logging
from typing import Iterator

from prettytable import PrettyTable

from .cfg import Grammar
from .core import Symbol

logger = logging.getLogger(__name__)


def compute_left_recursion_non_terminals(grammar: Grammar) -> Iterator[Symbol]:
    """Compute the non-terminals that have left recursion in the grammar.
    :param grammar: a grammar
    :return: the left-hand sides, in rule order, which can start with themselves
    """
    for rule in grammar:
        # A can-start-with A, either in one step or through other rules
        if rule.has_direct_left_recursion() or grammar.derives_to_symbol(
            rule.symbol, rule.symbol
        ):
            logger.debug("%s is left recursive", rule.symbol)
            yield rule.symbol


def has_left_recursion(grammar: Grammar) -> bool:
    """
    Detect if a grammar has left recursion.
    :param grammar: a grammar
    :return: True if the grammar has left recursion, False otherwise
    """
    return grammar.has_left_recursion()


def left_recursion_table(grammar: Grammar) -> PrettyTable:
    recursive = set(compute_left_recursion_non_terminals(grammar))
    pretty_table = PrettyTable()
    pretty_table.field_names = ["Rule", "Direct", "Left recursive"]
    for rule in grammar:
        pretty_table.add_row(
            [
                rule.symbol.text,
                "yes" if rule.has_direct_left_recursion() else "no",
                "yes" if rule.symbol in recursive else "no",
            ]
        )
    pretty_table.align["Rule"] = "l"
    return pretty_table
