"""Parallel string rewriting for bracketed L-systems."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def rewrite(symbols: str, rules: Mapping[str, str]) -> str:
    """Apply one substitution pass; symbols without a rule pass through."""

    expanded = []
    for char in symbols:
        expanded.append(rules.get(char, char))
    return "".join(expanded)


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    if iterations < 0:
        raise ValueError("iterations must be non-negative")

    symbols = axiom
    for _ in range(iterations):
        symbols = rewrite(symbols, rules)
    return symbols


def expanded_length(axiom: str, rules: Mapping[str, str], iterations: int) -> int:
    """Length of ``expand(axiom, rules, iterations)`` without building the string.

    Tracks per-symbol multiplicities, so callers can bound iteration counts
    before paying for an exponentially long expansion.
    """

    if iterations < 0:
        raise ValueError("iterations must be non-negative")

    counts = Counter(axiom)
    productions = {symbol: Counter(body) for symbol, body in rules.items()}
    for _ in range(iterations):
        following: Counter[str] = Counter()
        for symbol, count in counts.items():
            production = productions.get(symbol)
            if production is None:
                following[symbol] += count
                continue
            for child, multiplicity in production.items():
                following[child] += count * multiplicity
        counts = following
    return sum(counts.values())


@dataclass(frozen=True)
class LSystemGrammar:
    axiom: str
    rules: Mapping[str, str] = field(default_factory=dict)
    angle_deg: float = 90.0
    heading_deg: float = 0.0

    def __post_init__(self) -> None:
        for symbol in self.rules:
            if len(symbol) != 1:
                raise ValueError(f"Rule keys must be single symbols, got {symbol!r}")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def expand(self, iterations: int) -> str:
        return expand(self.axiom, self.rules, iterations)

    def expanded_length(self, iterations: int) -> int:
        return expanded_length(self.axiom, self.rules, iterations)


KOCH_SNOWFLAKE = LSystemGrammar(
    axiom="F++F++F",
    rules={"F": "F-F++F-F"},
    angle_deg=60.0,
)
DRAGON_CURVE = LSystemGrammar(
    axiom="FX",
    rules={"X": "X+YF+", "Y": "-FX-Y"},
    angle_deg=90.0,
)
BRACKETED_TREE = LSystemGrammar(
    axiom="F",
    rules={"F": "FF+[+F-F-F]-[-F+F+F]"},
    angle_deg=25.0,
    heading_deg=-90.0,
)
WINDY_PLANT = LSystemGrammar(
    axiom="X",
    rules={"F": "FF", "X": "F+[[X]-X]-F[-FX]+X"},
    angle_deg=22.0,
    heading_deg=-100.0,
)

PRESETS: dict[str, LSystemGrammar] = {
    "koch": KOCH_SNOWFLAKE,
    "dragon": DRAGON_CURVE,
    "tree": BRACKETED_TREE,
    "windy": WINDY_PLANT,
}
