"""Reptiles: the abstract reptile and its native and exotic kinds."""

from __future__ import annotations

from dataclasses import dataclass

from .animal import Animal, ExoticAnimal, NativeAnimal


@dataclass(kw_only=True)
class Reptile(Animal):
    """A reptile, recording whether it is venomous and its venom type.

    Only the native and exotic kinds may be created.
    """

    venomous: bool = False
    venom_type: str = ""

    def __post_init__(self) -> None:
        if type(self) is Reptile:
            raise TypeError("Reptile is abstract; create a native or exotic one")

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [
            *super()._sheet_rows(),
            ("Venenoso:\t", "Sim" if self.venomous else "Nao"),
            ("Veneno:\t\t", self.venom_type),
        ]

    def describe(self) -> str:
        """Return the reptile's record sheet as text."""
        return super().describe()


@dataclass(kw_only=True)
class NativeReptile(Reptile, NativeAnimal):
    """A reptile native to the country."""


@dataclass(kw_only=True)
class ExoticReptile(Reptile, ExoticAnimal):
    """A reptile brought from abroad."""