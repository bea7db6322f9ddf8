"""Amphibians: the abstract amphibian and its native and exotic kinds."""

from __future__ import annotations

from dataclasses import dataclass

from .animal import Animal, ExoticAnimal, NativeAnimal


@dataclass(kw_only=True)
class Amphibian(Animal):
    """An amphibian, tracking its skin molts.

    Only the native and exotic kinds may be created.
    """

    total_molts: int = 0
    last_molt: str = ""

    def __post_init__(self) -> None:
        if type(self) is Amphibian:
            raise TypeError("Amphibian is abstract; create a native or exotic one")

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [*super()._sheet_rows(), ("Ultima Muda:\t", self.last_molt)]

    def describe(self) -> str:
        """Return the amphibian's record sheet as text."""
        return super().describe()


@dataclass(kw_only=True)
class NativeAmphibian(Amphibian, NativeAnimal):
    """An amphibian native to the country."""

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [
            *super()._sheet_rows(),
            ("UF Origem:\t", self.uf_origin),
            ("Autorizacao:\t", self.authorization),
        ]

    def describe(self) -> str:
        """Return the sheet with the state of origin and the permit."""
        return super().describe()


@dataclass(kw_only=True)
class ExoticAmphibian(Amphibian, ExoticAnimal):
    """An amphibian brought from abroad."""

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [*super()._sheet_rows(), ("País Origem:\t", self.country_origin)]

    def describe(self) -> str:
        """Return the sheet with the country of origin."""
        return super().describe()