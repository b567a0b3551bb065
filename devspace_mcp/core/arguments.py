"""
Argument translation for DevSpace subcommands.

Each operation describes its command line as an ordered list of directives.
build_args() folds the directives into the flat token list passed to the
devspace executable. Token order is exactly directive order.

Directive semantics:
- Positional(value): value alone, skipped when None
- Flag(name, condition): name unless condition is exactly False
- Option(name, value): name followed by str(value), skipped when None
- BooleanOption(name, value): name for True, "name=false" for False, nothing for None
- ArrayOption(name, values): name followed by every value, skipped when empty or None
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

Scalar = Union[str, int]


@dataclass(frozen=True)
class Positional:
    value: Optional[str]


@dataclass(frozen=True)
class Flag:
    name: str
    condition: Optional[bool] = None


@dataclass(frozen=True)
class Option:
    name: str
    value: Optional[Scalar] = None


@dataclass(frozen=True)
class BooleanOption:
    name: str
    value: Optional[bool] = None


@dataclass(frozen=True)
class ArrayOption:
    name: str
    values: Optional[Sequence[str]] = None


Directive = Union[Positional, Flag, Option, BooleanOption, ArrayOption]


def _stringify(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return format(value, "d")
    return str(value)


def emit(directive: Directive) -> List[str]:
    """Return the tokens contributed by a single directive."""
    if isinstance(directive, Positional):
        return [] if directive.value is None else [directive.value]

    if isinstance(directive, Flag):
        return [] if directive.condition is False else [directive.name]

    if isinstance(directive, Option):
        if directive.value is None:
            return []
        return [directive.name, _stringify(directive.value)]

    if isinstance(directive, BooleanOption):
        if directive.value is True:
            return [directive.name]
        if directive.value is False:
            return [f"{directive.name}=false"]
        return []

    if isinstance(directive, ArrayOption):
        if not directive.values:
            return []
        return [directive.name, *directive.values]

    raise TypeError(f"Unsupported argument directive: {directive!r}")


def build_args(directives: Iterable[Directive]) -> List[str]:
    """Fold directives into an argument list, preserving their order."""
    args: List[str] = []
    for directive in directives:
        args.extend(emit(directive))
    return args
