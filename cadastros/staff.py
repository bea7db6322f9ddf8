"""Employees of the pet shop: handlers and veterinarians."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(kw_only=True)
class Employee:
    """An employee with identification and health data."""

    id: int = 0
    name: str = ""
    cpf: str = ""
    age: int = 0
    blood_type: str = ""
    rh_factor: str = ""
    specialty: str = ""

    def _sheet_rows(self) -> list[tuple[str, object]]:
        return [
            ("ID:\t\t", self.id),
            ("Nome:\t\t", self.name),
            ("CPF:\t", self.cpf),
            ("Idade:\t\t", self.age),
            ("Tipo Sanguineo:\t\t", self.blood_type),
            ("Fator RH:\t\t", self.rh_factor),
            ("Especialidade:\t", self.specialty),
        ]

    def describe(self) -> str:
        """Return the employee's record sheet as text."""
        body = "".join(f"{label}{value}\n" for label, value in self._sheet_rows())
        return f"\n  Ficha do Funcionario  \n{body}\n"

    def __str__(self) -> str:
        return self.describe()


@dataclass(kw_only=True)
class Handler(Employee):
    """An employee who handles animals, with a security clearance level."""

    security_level: int = 0


@dataclass(kw_only=True)
class Veterinarian(Employee):
    """An employee who treats animals, registered with a regional council."""

    crmv: str = ""