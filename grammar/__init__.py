from .cfg import Grammar, Rule
from .core import Production, Symbol
from .errors import (
    GrammarError,
    InvalidProduction,
    InvalidRule,
    InvalidSymbol,
    UndefinedNonTerminal,
)

__all__ = [
    "Grammar",
    "GrammarError",
    "InvalidProduction",
    "InvalidRule",
    "InvalidSymbol",
    "Production",
    "Rule",
    "Symbol",
    "UndefinedNonTerminal",
]
