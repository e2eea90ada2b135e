class GrammarError(ValueError):
    """Base class for malformed grammars."""


class InvalidSymbol(GrammarError):
    pass


class InvalidProduction(GrammarError):
    pass


class InvalidRule(GrammarError):
    pass


class UndefinedNonTerminal(GrammarError):
    def __init__(self, symbol) -> None:
        super().__init__(f"no rule defines non-terminal {symbol!s}")
        self.symbol = symbol
