"""Interactive menu for managing dealerships and their cars."""

from __future__ import annotations

import sys
from typing import TextIO

from .dealership import Car, CarStatus, DealershipManager
from .registry import NotFoundError

_MENU = (
    "\n++++++++++++++++++++++++++++++++\n"
    "\nEscolha a opção desejada\n"
    "Digite 1 - Adicionar Automóvel \n"
    "Digite 2 - Criar Concessionária\n"
    "Digite 3 - Lista de Automoveis\n"
    "Digite 0 - Sair\n"
    "++++++++++++++++++++++++++++++++\n"
    "\nDigite sua Escolha: \n"
)
_INVALID = "\nEntrada inválida, digite novamente\n"
_NOT_FOUND = "\nConcessionaria nao encontrada. Tente novamente.\n"


class DealershipShell:
    """Reads menu choices from a text stream and acts on a manager."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        manager: DealershipManager | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.manager = manager if manager is not None else DealershipManager()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _ask(self, prompt: str = "") -> str:
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def run(self) -> None:
        """Show the menu until the user quits or the input ends."""
        actions = {
            1: self._register_car,
            2: self._create_dealership,
            3: self._show_stock,
        }
        try:
            while True:
                try:
                    choice = int(self._ask(_MENU).strip())
                except ValueError:
                    choice = -1
                if choice == 0:
                    self._write("\nAte mais!\n")
                    return
                action = actions.get(choice)
                if action is None:
                    self._write(_INVALID)
                else:
                    action()
        except EOFError:
            return

    def _list_names(self, header: str) -> None:
        self._write(f"\n{header}\nConcessionarias:\n\n")
        for name in self.manager.names():
            self._write(f"{name}\n")

    def _create_dealership(self) -> None:
        name = self._ask("Informe o nome da concessionaria: ")
        try:
            cnpj = int(self._ask("\nInforme o CNPJ da concessionaria: ").strip())
        except ValueError:
            self._write(_INVALID)
            return
        self._write(f"NOME:{name}\n")
        try:
            self.manager.create_dealership(name, cnpj)
        except ValueError:
            self._write("\nConcessionaria existente. Tente outra vez")
        else:
            self._write("\nConcessionaria Inaugurada.\n")

    def _register_car(self) -> None:
        self._list_names("Deseja cadastrar o carro em qual concessionaria? ")
        name = self._ask("\nDigite a concessionaria: ")
        try:
            self.manager.find(name)
        except NotFoundError:
            self._write(_NOT_FOUND)
            return
        self._write("\n-> Digite os dados do carro")
        chassis = self._ask("\nNumero do Chassi: ")
        brand = self._ask("\nMarca: ")
        try:
            price = float(self._ask("\nPreço: ").strip())
        except ValueError:
            self._write(_INVALID)
            return
        status = self.manager.register_car(name, Car(brand, price, chassis))
        if status is CarStatus.REGISTERED:
            self._write("\nCarro cadastrado.\n")
        elif status is CarStatus.EXISTS:
            self._write("\nCarro ja cadastrado. Operacao CANCELADA!\n")
            self._write("\nCarro ja cadastrado.\n")
        else:
            self._write(_NOT_FOUND)

    def _show_stock(self) -> None:
        self._list_names("Estoque de qual concessionaria quer acessar? ")
        name = self._ask("\nDigite a concessionaria: ")
        try:
            self._write(self.manager.stock_report(name))
        except NotFoundError:
            self._write(_NOT_FOUND)


def main(argv: list[str] | None = None) -> int:
    """Run the dealership menu on standard input and output."""
    DealershipShell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())