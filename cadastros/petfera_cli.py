"""Interactive menus for the pet shop registry of animals and employees."""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import partial
from typing import TextIO

from .amphibian import ExoticAmphibian, NativeAmphibian
from .animal import Animal
from .bird import ExoticBird, NativeBird
from .mammal import ExoticMammal, NativeMammal
from .registry import NotFoundError, Registry
from .reptile import ExoticReptile, NativeReptile
from .staff import Employee, Handler, Veterinarian

_RULE = " \n ++++++++++++++++++++++++++++++++++++++++++++++ \n"
_INVALID_CHOICE = "\n\nAlternativa inválida! Tente outra vez.\n\n"
_INVALID_INPUT = "\nEntrada inválida! Operacao cancelada.\n"
_NATIVE = "Nativo"
_EXOTIC = "Exotico"


class PetFeraShell:
    """Reads menu choices from a text stream and acts on a registry."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        registry: Registry | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.registry = registry if registry is not None else Registry()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _ask(self, prompt: str = "") -> str:
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int:
        return int(self._ask(prompt).strip())

    def _ask_float(self, prompt: str) -> float:
        return float(self._ask(prompt).strip())

    def _menu(
        self,
        title: str,
        labels: list[str],
        actions: dict[int, Callable[[], None]],
    ) -> None:
        options = "".join(
            f" Digite '{number}' para: {label}\n"
            for number, label in enumerate(labels, start=1)
        )
        text = (
            f"\n\n +++++++++++++ {title} ++++++++++++++++ \n\n\n"
            " Escolha uma das seguintes alternativas abaixo: \n"
            f"{options}"
            " Digite '0' para: SAIR\n"
            f"{_RULE}\n"
            " Alternativa escolhida: "
        )
        while True:
            try:
                line = self._ask(text)
            except EOFError:
                return
            try:
                choice = int(line.strip())
            except ValueError:
                choice = -1
            if choice == 0:
                return
            action = actions.get(choice)
            if action is None:
                self._write(_INVALID_CHOICE)
                continue
            try:
                action()
            except EOFError:
                return

    def run(self) -> None:
        """Show the main menu until the user quits or the input ends."""
        self._menu(
            "MENU INICIAL",
            [
                "CADASTRAR Dados do Banco",
                "CONSULTAR Dados do Banco",
                "REMOVER Dados do Banco",
            ],
            {1: self.register_menu, 2: self.query_menu, 3: self.remove_menu},
        )

    def register_menu(self) -> None:
        """Menu for registering animals and employees."""
        self._menu(
            "MENU CADASTRAR",
            ["Animal", "Funcionário"],
            {1: self.register_animal_menu, 2: self._register_employee},
        )

    def register_animal_menu(self) -> None:
        """Menu for registering an animal of a chosen kind."""
        self._menu(
            "MENU CADASTRAR ANIMAIS",
            ["Anfíbio", "Mamífero", "Réptil", "Ave"],
            {
                1: partial(
                    self._register_animal,
                    NativeAmphibian,
                    ExoticAmphibian,
                    self._read_amphibian,
                ),
                2: partial(
                    self._register_animal, NativeMammal, ExoticMammal, self._read_mammal
                ),
                3: partial(
                    self._register_animal,
                    NativeReptile,
                    ExoticReptile,
                    self._read_reptile,
                ),
                4: partial(
                    self._register_animal, NativeBird, ExoticBird, self._read_bird
                ),
            },
        )

    def query_menu(self) -> None:
        """Menu for looking up animals, employees and counts."""
        self._menu(
            "MENU CONSULTAR",
            [
                "Animal",
                "Animal pelo id do funcionário",
                "Funcionário",
                "Quantidade de animais",
                "Quantidade de funcionários",
            ],
            {
                1: self._query_animal,
                2: self._query_animals_of_employee,
                3: self._query_employee,
                4: self._count_animals,
                5: self._count_employees,
            },
        )

    def remove_menu(self) -> None:
        """Menu for removing animals and employees."""
        self._menu(
            "MENU REMOVER",
            ["Animal", "Funcionário"],
            {1: self._remove_animal, 2: self._remove_employee},
        )

    def _register_employee(self) -> None:
        role = self._ask("Informe a função do funcionário: \n").strip()
        kinds: dict[str, type[Employee]] = {
            "Tratador": Handler,
            "Veterinario": Veterinarian,
        }
        kind = kinds.get(role)
        if kind is None:
            self._write("\nFuncao invalida! Use Tratador ou Veterinario.\n")
            return
        try:
            employee_id = self._ask_int("Numero de Identificacao do Funcionario (ID): ")
            name = self._ask("\nNome do Funcionario: ")
            cpf = self._ask("\nCPF do Funcionario: ")
            age = self._ask_int("\nIdade do Funcionario: ")
        except ValueError:
            self._write(_INVALID_INPUT)
            return
        blood_type = self._ask("\nTipo sanguineo do Funcionario: ")
        rh_factor = self._ask("\nFator RH do tipo sanguineo: ")[:1]
        specialty = self._ask("\nEspecialidade: \n")
        employee = kind(
            id=employee_id,
            name=name,
            cpf=cpf,
            age=age,
            blood_type=blood_type,
            rh_factor=rh_factor,
            specialty=specialty,
        )
        try:
            self.registry.add_employee(employee)
        except ValueError:
            self._write("\nFuncionario ja cadastrado!\n")
            return
        self._write("\nFuncionario cadastrado!\n\n")

    def _staff(self, employee_id: int) -> Employee | None:
        try:
            return self.registry.find_employee(employee_id)
        except NotFoundError:
            return None

    def _read_common(self, animal_class: str) -> dict[str, object]:
        animal_id = self._ask_int("Numero de Identificacao do Animal (ID): ")
        scientific_name = self._ask("\nNome Cientifico: ")
        sex = self._ask("\nSexo: ")[:1]
        size = self._ask_float("\nTamanho: ")
        diet = self._ask("\nDieta: ")
        vet_id = self._ask_int("\nID do Veterinario responsavel: ")
        handler_id = self._ask_int("\nID do Tratador responsavel: ")
        baptism_name = self._ask("\nNome de batismo: ")
        return {
            "id": animal_id,
            "animal_class": animal_class,
            "scientific_name": scientific_name,
            "sex": sex,
            "size": size,
            "diet": diet,
            "veterinarian": self._staff(vet_id),
            "handler": self._staff(handler_id),
            "baptism_name": baptism_name,
        }

    def _read_amphibian(self) -> dict[str, object]:
        total_molts = self._ask_int("\nTotal de mudas: ")
        last_molt = self._ask("\nData da ultima muda (DD/MM/AAAA): ")
        return {"total_molts": total_molts, "last_molt": last_molt}

    def _read_mammal(self) -> dict[str, object]:
        return {"fur_color": self._ask("\nCor do pelo do animal: ")}

    def _read_reptile(self) -> dict[str, object]:
        answer = self._ask("\nAnimal venenoso ( Sim ou Nao ): ").strip()
        if answer in ("Sim", "sim"):
            return {"venomous": True, "venom_type": self._ask("\nTipo do veneno: ")}
        return {"venomous": False, "venom_type": "Nenhum"}

    def _read_bird(self) -> dict[str, object]:
        beak = self._ask_float("\nTamanho do bico do animal: ")
        wingspan = self._ask_float("\nEnvergadura do animal: ")
        return {"beak_size_cm": beak, "wingspan": wingspan}

    def _register_animal(
        self,
        native_kind: type[Animal],
        exotic_kind: type[Animal],
        read_specific: Callable[[], dict[str, object]],
    ) -> None:
        animal_class = self._ask("Informe a classe: \n").strip()
        origin = self._ask("Informe o tipo: \n").strip()
        if origin not in (_NATIVE, _EXOTIC):
            self._write("\nTipo invalido! Use Nativo ou Exotico.\n")
            return
        try:
            fields = self._read_common(animal_class)
            fields.update(read_specific())
        except ValueError:
            self._write(_INVALID_INPUT)
            return
        fields["ibama_authorization"] = self._ask("\nID do Ibama: ")
        if origin == _NATIVE:
            fields["uf_origin"] = self._ask("\nEstado de Origem: ")
            fields["authorization"] = self._ask("\nAutorizacao do Ibama: ")
            animal = native_kind(**fields)
        else:
            fields["country_origin"] = self._ask("\nPais de Origem: ")
            animal = exotic_kind(**fields)
        try:
            self.registry.add_animal(animal)
        except ValueError:
            self._write("\nAnimal ja cadastrado!\n")
            return
        self._write("\nAnimal cadastrado!\n\n")

    def _ask_id(self, prompt: str) -> int | None:
        try:
            return self._ask_int(prompt)
        except ValueError:
            self._write(_INVALID_INPUT)
            return None

    def _query_animal(self) -> None:
        animal_id = self._ask_id("Informe o id: \n")
        if animal_id is None:
            return
        try:
            animal = self.registry.find_animal(animal_id)
        except NotFoundError:
            self._write("Animal nao encontrado!\n")
            return
        self._write(f"Dados do Animal procurado: \n{animal.describe()}")

    def _query_animals_of_employee(self) -> None:
        employee_id = self._ask_id("Informe o id do funcionário: \n")
        if employee_id is None:
            return
        try:
            animals = self.registry.animals_of_employee(employee_id)
        except NotFoundError:
            self._write("Nao existe Funcionario com o ID fornecido\n")
            return
        self._write("\nLista dos Animais relacionados ao respectivo Funcionario: \n")
        for animal in animals:
            self._write(animal.describe())

    def _query_employee(self) -> None:
        employee_id = self._ask_id("Informe o id: \n")
        if employee_id is None:
            return
        try:
            employee = self.registry.find_employee(employee_id)
        except NotFoundError:
            self._write("Funcionario nao encontrado\n")
            return
        self._write(employee.describe())

    def _count_animals(self) -> None:
        self._write(
            f"\nQuantidade de animais cadastrados: {self.registry.animal_count()}\n"
        )

    def _count_employees(self) -> None:
        self._write(
            "\nQuantidade de funcionarios cadastrados: "
            f"{self.registry.employee_count()}\n"
        )

    def _remove_animal(self) -> None:
        animal_id = self._ask_id("Informe o id: \n")
        if animal_id is None:
            return
        try:
            self.registry.remove_animal(animal_id)
        except NotFoundError:
            self._write("Animal nao existe!\n")
            return
        self._write("\nAnimal removido!\n\n")

    def _remove_employee(self) -> None:
        employee_id = self._ask_id("Informe o id: \n")
        if employee_id is None:
            return
        try:
            self.registry.remove_employee(employee_id)
        except NotFoundError:
            self._write("Funcionario nao existe\n")
            return
        self._write("Funcionario Removido !\n")


def main(argv: list[str] | None = None) -> int:
    """Run the pet shop menu on standard input and output."""
    PetFeraShell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())