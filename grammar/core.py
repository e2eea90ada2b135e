from typing import Iterable, Optional

from .errors import InvalidProduction, InvalidSymbol

NON_TERMINAL_PREFIX = "<"


class Symbol:
    """A symbol in a grammar;
    Two symbols with the same text are the same symbol"""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        if not text:
            raise InvalidSymbol("symbol text must be a nonempty string")
        object.__setattr__(self, "text", text)

    def is_terminal(self) -> bool:
        return not self.text.startswith(NON_TERMINAL_PREFIX)

    def is_non_terminal(self) -> bool:
        return not self.is_terminal()

    def __setattr__(self, key, value):
        raise AttributeError("Cannot modify a symbol")

    def __hash__(self) -> int:
        return hash(self.text)

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.text == other.text

    def __str__(self):
        return self.text

    def __repr__(self):
        if self.is_terminal():
            return f"[bold blue]{self.text}[/bold blue]"
        return f"[bold red]{self.text}[/bold red]"


class Production(tuple[Symbol, ...]):
    """One alternative on the right-hand side of a rule."""

    def __new__(cls, args: Optional[Iterable[Symbol]] = None) -> "Production":
        symbols = tuple(args) if args is not None else ()
        if not symbols:
            raise InvalidProduction("a production must have at least one symbol")
        if not all(isinstance(symbol, Symbol) for symbol in symbols):
            raise InvalidProduction(f"expected symbols, got {symbols!r}")
        return tuple.__new__(Production, symbols)  # type: ignore

    @staticmethod
    def of(*texts: str) -> "Production":
        """A convenient constructor to avoid the frequent pattern:
        Production([Symbol("<A>"), Symbol("x")])"""
        return Production(Symbol(text) for text in texts)

    def first_symbol(self) -> Symbol:
        return self[0]

    def __str__(self):
        return "".join(str(symbol) for symbol in self)

    def __repr__(self):
        return "".join(repr(symbol) for symbol in self)
