"""Cars, dealerships and the manager that keeps a list of dealerships."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .registry import NotFoundError


@dataclass(eq=False)
class Car:
    """A car offered by a dealership.

    Two cars are considered the same when their brands match, and a car
    also compares equal to a string holding its brand.
    """

    brand: str = " "
    price: float = 0.0
    chassis: str = " "

    def describe(self) -> str:
        """Return the car's data sheet as text."""
        return (
            f"> Marca: {self.brand}\n"
            f"> Preco: {self.price:g}\n"
            f"> Numero do Chassi: {self.chassis}\n"
        )

    def __str__(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Car):
            return self.brand == other.brand
        if isinstance(other, str):
            return self.brand == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.brand)


@dataclass(eq=False)
class Dealership:
    """A dealership with a name, a CNPJ and a stock of cars."""

    name: str
    cnpj: int = 0
    cars: list[Car] = field(default_factory=list)

    def add_car(self, car: Car) -> bool:
        """Add a car to the stock; return False if an equal car is already there."""
        if any(existing == car for existing in self.cars):
            return False
        self.cars.append(car)
        return True

    def stock(self) -> int:
        """Return how many cars are in stock."""
        return len(self.cars)

    def describe(self) -> str:
        """Return the data sheets of every car in stock."""
        return "".join(f"{car.describe()}\n" for car in self.cars)

    def __str__(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dealership):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


class CarStatus(Enum):
    """Outcome of registering a car at a named dealership."""

    NOT_FOUND = 0
    EXISTS = 1
    REGISTERED = 2


class DealershipManager:
    """Keeps the dealerships, each identified by its name."""

    def __init__(self) -> None:
        self._dealerships: list[Dealership] = []

    def create_dealership(self, name: str, cnpj: int) -> Dealership:
        """Open a new dealership; raise ValueError if the name is taken."""
        dealership = Dealership(name, cnpj)
        if dealership in self._dealerships:
            raise ValueError(f"dealership {name!r} already exists")
        self._dealerships.append(dealership)
        return dealership

    def names(self) -> list[str]:
        """Return the names of the dealerships in the order they were opened."""
        return [dealership.name for dealership in self._dealerships]

    def find(self, name: str) -> Dealership:
        """Return the dealership with the given name."""
        for dealership in self._dealerships:
            if dealership.name == name:
                return dealership
        raise NotFoundError(f"dealership {name!r} not found")

    def register_car(self, dealership_name: str, car: Car) -> CarStatus:
        """Add a car to the named dealership and tell what happened."""
        try:
            dealership = self.find(dealership_name)
        except NotFoundError:
            return CarStatus.NOT_FOUND
        if dealership.add_car(car):
            return CarStatus.REGISTERED
        return CarStatus.EXISTS

    def stock_report(self, name: str) -> str:
        """Return the stock listing of the named dealership."""
        dealership = self.find(name)
        return f"\n O estoque da {name} possui: \n{dealership.describe()}"