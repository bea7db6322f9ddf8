"""Mammals: the abstract mammal and its native and exotic kinds."""

from __future__ import annotations

from dataclasses import dataclass

from .animal import Animal, ExoticAnimal, NativeAnimal


@dataclass(kw_only=True)
class Mammal(Animal):
    """A mammal, with its fur colour.

    Only the native and exotic kinds may be created.
    """

    fur_color: str = ""

    def __post_init__(self) -> None:
        if type(self) is Mammal:
            raise TypeError("Mammal is abstract; create a native or exotic one")

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [*super()._sheet_rows(), ("Cor do pelo:\t", self.fur_color)]

    def describe(self) -> str:
        """Return the mammal's record sheet as text."""
        return super().describe()


@dataclass(kw_only=True)
class NativeMammal(Mammal, NativeAnimal):
    """A mammal native to the country."""


@dataclass(kw_only=True)
class ExoticMammal(Mammal, ExoticAnimal):
    """A mammal brought from abroad."""