"""The pet shop registry of animals and employees."""

from __future__ import annotations

from collections.abc import Iterator

from .amphibian import Amphibian
from .animal import Animal
from .bird import Bird
from .mammal import Mammal
from .reptile import Reptile
from .staff import Employee


class NotFoundError(LookupError):
    """Raised when no animal or employee has the requested id."""


class Registry:
    """Keeps animals by kind and employees, each indexed by id."""

    def __init__(self) -> None:
        self._amphibians: dict[int, Amphibian] = {}
        self._mammals: dict[int, Mammal] = {}
        self._reptiles: dict[int, Reptile] = {}
        self._birds: dict[int, Bird] = {}
        self._employees: dict[int, Employee] = {}

    def _table_for(self, animal: Animal) -> dict:
        kinds = (
            (Amphibian, self._amphibians),
            (Mammal, self._mammals),
            (Reptile, self._reptiles),
            (Bird, self._birds),
        )
        for kind, table in kinds:
            if isinstance(animal, kind):
                return table
        raise TypeError(f"cannot register an animal of type {type(animal).__name__}")

    def add_employee(self, employee: Employee) -> None:
        """Register an employee; its id must not be in use."""
        if not isinstance(employee, Employee):
            raise TypeError("only employees can be registered as staff")
        if employee.id in self._employees:
            raise ValueError(f"employee {employee.id} is already registered")
        self._employees[employee.id] = employee

    def add_animal(self, animal: Animal) -> None:
        """Register an animal in the table of its kind; the id must be new there."""
        table = self._table_for(animal)
        if animal.id in table:
            raise ValueError(f"animal {animal.id} is already registered")
        table[animal.id] = animal

    def find_animal(self, animal_id: int) -> Animal:
        """Return the animal with the given id."""
        for table in (self._amphibians, self._reptiles, self._birds, self._mammals):
            if animal_id in table:
                return table[animal_id]
        raise NotFoundError(f"animal {animal_id} not found")

    def _all_animals(self) -> Iterator[Animal]:
        for table in (self._amphibians, self._mammals, self._reptiles, self._birds):
            for _, animal in sorted(table.items()):
                yield animal

    def animals_of_employee(self, employee_id: int) -> list[Animal]:
        """Return the animals whose vet or handler is the given employee."""
        if employee_id not in self._employees:
            raise NotFoundError(f"employee {employee_id} not found")
        return [a for a in self._all_animals() if a.is_cared_for_by(employee_id)]

    def find_employee(self, employee_id: int) -> Employee:
        """Return the employee with the given id."""
        try:
            return self._employees[employee_id]
        except KeyError:
            raise NotFoundError(f"employee {employee_id} not found") from None

    def remove_employee(self, employee_id: int) -> Employee:
        """Remove and return the employee with the given id."""
        try:
            return self._employees.pop(employee_id)
        except KeyError:
            raise NotFoundError(f"employee {employee_id} not found") from None

    def remove_animal(self, animal_id: int) -> Animal:
        """Remove and return the animal with the given id."""
        for table in (self._amphibians, self._mammals, self._reptiles, self._birds):
            if animal_id in table:
                return table.pop(animal_id)
        raise NotFoundError(f"animal {animal_id} not found")

    def animal_count(self) -> int:
        """Return how many animals are registered."""
        return (
            len(self._amphibians)
            + len(self._mammals)
            + len(self._reptiles)
            + len(self._birds)
        )

    def employee_count(self) -> int:
        """Return how many employees are registered."""
        return len(self._employees)