import logging
import re
from typing import Iterable, Iterator, Optional, Sequence

from more_itertools import first, sliced, unique_everseen
from typeguard import typechecked

from .core import Production, Symbol
from .errors import GrammarError, InvalidRule, UndefinedNonTerminal

logger = logging.getLogger(__name__)

ALTERNATIVE_SEPARATOR = " or "
DEFINES = ":="


class Rule:
    """A non-terminal together with its alternatives."""

    __slots__ = ("symbol", "derivations")

    @typechecked
    def __init__(self, symbol: str, productions: Iterable[Production]) -> None:
        lhs = Symbol(symbol)
        if lhs.is_terminal():
            raise InvalidRule(f"left-hand side {lhs} must be a non-terminal")
        derivations = tuple(productions)
        if not all(isinstance(p, Production) for p in derivations):
            raise InvalidRule(f"expected productions for {lhs}, got {derivations!r}")
        if not derivations:
            raise InvalidRule(f"rule {lhs} must have at least one production")
        self.symbol = lhs
        self.derivations = derivations

    def has_direct_left_recursion(self) -> bool:
        return any(
            production.first_symbol().text == self.symbol.text
            for production in self.derivations
        )

    def __iter__(self) -> Iterator[Production]:
        return iter(self.derivations)

    def __str__(self) -> str:
        return ALTERNATIVE_SEPARATOR.join(str(p) for p in self.derivations)

    def __repr__(self) -> str:
        return f"{self.symbol!r} {DEFINES} " + " | ".join(
            repr(p) for p in self.derivations
        )


class Grammar:
    """An ordered, read-only collection of rules.

    The rules are never linked to one another; every "where is this symbol
    defined" question is answered by scanning the rule list again.
    """

    __slots__ = ("rules", "terminals", "non_terminals")

    def __init__(self, rules: Iterable[Rule]) -> None:
        self.rules: tuple[Rule, ...] = tuple(rules)
        self.non_terminals: frozenset[str] = frozenset(
            rule.symbol.text for rule in self.rules
        )
        self.terminals: frozenset[str] = frozenset(
            symbol.text
            for _, production in self.iter_productions()
            for symbol in production
            if symbol.is_terminal()
        )

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def iter_productions(self) -> Iterator[tuple[Symbol, Production]]:
        for rule in self.rules:
            for production in rule.derivations:
                yield rule.symbol, production

    def find_rule(self, symbol: Symbol) -> Optional[Rule]:
        return first(
            (rule for rule in self.rules if rule.symbol.text == symbol.text),
            default=None,
        )

    @typechecked
    def derives_to_symbol(
        self,
        start: Symbol,
        target: Symbol,
        visited: Optional[set[str]] = None,
    ) -> bool:
        """
        Decide whether `target` can be reached from `start` by repeatedly
        expanding the leftmost symbol of some alternative.

        :param start: the symbol to expand
        :param target: the symbol we are looking for
        :param visited: non-terminals already expanded during this walk
        :return: True if some chain of leftmost expansions of `start` begins with `target`
        """
        if start.is_terminal():
            return False

        if visited is None:
            visited = set()
        if start.text in visited:
            # a leftmost cycle which does not pass through the target
            return False
        visited.add(start.text)

        rule = self.find_rule(start)
        if rule is None:
            raise UndefinedNonTerminal(start)

        logger.debug("expanding %s while looking for %s", start, target)
        return any(
            leftmost == target or self.derives_to_symbol(leftmost, target, visited)
            for leftmost in (production.first_symbol() for production in rule)
        )

    def has_indirect_left_recursion(self) -> bool:
        return any(
            self.derives_to_symbol(rule.symbol, rule.symbol) for rule in self.rules
        )

    def has_left_recursion(self) -> bool:
        if any(rule.has_direct_left_recursion() for rule in self.rules):
            logger.debug("found direct left recursion")
            return True
        return self.has_indirect_left_recursion()

    def __str__(self) -> str:
        if not self.rules:
            return ""
        width = max(len(rule.symbol.text) for rule in self.rules) + 1
        return "".join(
            f"{rule.symbol.text.ljust(width)}{DEFINES} {rule!s}\n"
            for rule in self.rules
        )

    def __repr__(self) -> str:
        return "\n".join(repr(rule) for rule in self.rules)

    @staticmethod
    def from_str(grammar_str: str) -> "Grammar":
        return _parse_grammar(grammar_str)

    class Builder:
        __slots__ = ("_dict",)

        def __init__(self) -> None:
            self._dict: dict[str, list[Production]] = {}

        def add_expansion(
            self, origin: str, seq: Sequence[Symbol]
        ) -> "Grammar.Builder":
            self._dict.setdefault(origin, []).append(Production(seq))
            return self

        def add_definition(
            self, origin: str, definition: Iterable[Production]
        ) -> "Grammar.Builder":
            if origin in self._dict:
                raise InvalidRule(
                    f"you are not allowed overwrite the definition of {origin}"
                )
            self._dict[origin] = list(definition)
            return self

        def build(self) -> "Grammar":
            if not self._dict:
                raise GrammarError("grammar must have at least one rule")
            return Grammar(
                Rule(origin, unique_everseen(productions))
                for origin, productions in self._dict.items()
            )


def iter_symbol_tokens(input_str: str) -> Iterator[str]:
    input_str = input_str.strip()
    while input_str:
        if m := re.match(r"\|", input_str):  # alternative separator
            yield m.group(0)
        elif m := re.match(r"'[^']+'", input_str):  # quoted terminal
            yield m.group(0)
        elif m := re.match(r"<[^<>\s]+>", input_str):  # NonTerminal
            yield m.group(0)
        elif m := re.match(r"[^\s|']+", input_str):  # bare terminal
            yield m.group(0)
        else:
            raise GrammarError(f"Invalid token: {input_str}")
        input_str = input_str[m.end() :].strip()


def _parse_grammar(grammar_str: str) -> Grammar:
    """Ad Hoc grammar parser for the notation `<A> := <B> x | 'y'`"""
    grammar_builder = Grammar.Builder()
    pieces = re.split(
        rf"^\s*(<[^<>\s]+>)\s*{DEFINES}", grammar_str.strip(), flags=re.M
    )
    if pieces[0].strip():
        raise GrammarError(f"expected a rule, found {pieces[0].strip()!r}")
    for origin, definition_str in sliced(pieces[1:], n=2, strict=True):
        alternative: list[Symbol] = []
        for lexeme in iter_symbol_tokens(definition_str):
            if lexeme == "|":
                grammar_builder.add_expansion(origin, alternative)
                alternative = []
            elif lexeme.startswith("'"):
                terminal = Symbol(lexeme[1:-1])
                if not terminal.is_terminal():
                    raise GrammarError(
                        f"quoted symbol {lexeme} would be read as a non-terminal"
                    )
                alternative.append(terminal)
            else:
                alternative.append(Symbol(lexeme))
        grammar_builder.add_expansion(origin, alternative)
    return grammar_builder.build()
