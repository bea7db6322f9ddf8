"""Base animal record and the wild, native and exotic traits."""

from __future__ import annotations

from dataclasses import dataclass

from .staff import Employee


@dataclass(kw_only=True)
class Animal:
    """An animal kept by the pet shop, with its responsible staff."""

    id: int = 0
    animal_class: str = ""
    scientific_name: str = ""
    sex: str = ""
    size: float = 0.0
    diet: str = ""
    veterinarian: Employee | None = None
    handler: Employee | None = None
    baptism_name: str = ""

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [
            ("ID:\t\t", self.id),
            ("Classe:\t\t", self.animal_class),
            ("Cientifico:\t", self.scientific_name),
            ("Batismo:\t", self.baptism_name),
            ("Dieta:\t\t", self.diet),
            ("Sexo:\t\t", self.sex),
        ]

    def describe(self) -> str:
        """Return the animal's record sheet as text."""
        body = "".join(f"{label}{value}\n" for label, value in self._sheet_rows())
        return f"\nFicha do animal \n{body}\n"

    def __str__(self) -> str:
        return self.describe()

    def is_cared_for_by(self, employee_id: int) -> bool:
        """Tell whether the given employee is this animal's vet or handler."""
        return any(
            staff is not None and staff.id == employee_id
            for staff in (self.veterinarian, self.handler)
        )


@dataclass(kw_only=True)
class WildAnimal:
    """Trait of a wild animal: it carries an IBAMA authorization."""

    ibama_authorization: str = ""


@dataclass(kw_only=True)
class NativeAnimal(WildAnimal):
    """Trait of a native wild animal: its state of origin and permit."""

    uf_origin: str = ""
    authorization: str = ""


@dataclass(kw_only=True)
class ExoticAnimal(WildAnimal):
    """Trait of an exotic wild animal: its country and city of origin."""

    country_origin: str = ""
    city_origin: str = ""