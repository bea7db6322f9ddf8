"""Birds: the abstract bird and its native and exotic kinds."""

from __future__ import annotations

from dataclasses import dataclass

from .animal import Animal, ExoticAnimal, NativeAnimal


@dataclass(kw_only=True)
class Bird(Animal):
    """A bird, with beak size and wingspan.

    Only the native and exotic kinds may be created.
    """

    beak_size_cm: float = 0.0
    wingspan: float = 0.0

    def __post_init__(self) -> None:
        if type(self) is Bird:
            raise TypeError("Bird is abstract; create a native or exotic one")

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [
            *super()._sheet_rows(),
            ("Bico:\t\t", f"{self.beak_size_cm:g}"),
            ("Envergadura:\t", f"{self.wingspan:g}"),
        ]

    def describe(self) -> str:
        """Return the bird's record sheet as text."""
        return super().describe()


@dataclass(kw_only=True)
class NativeBird(Bird, NativeAnimal):
    """A bird native to the country."""


@dataclass(kw_only=True)
class ExoticBird(Bird, ExoticAnimal):
    """A bird brought from abroad."""