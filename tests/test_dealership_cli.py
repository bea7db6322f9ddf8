import io

from cadastros.dealership import DealershipManager
from cadastros.dealership_cli import DealershipShell


def _run(text, manager=None):
    manager = manager if manager is not None else DealershipManager()
    out = io.StringIO()
    DealershipShell(io.StringIO(text), out, manager).run()
    return out.getvalue(), manager


def test_quit_says_goodbye():
    output, _ = _run("0\n")
    assert output.endswith("\nAte mais!\n")


def test_invalid_choice():
    output, _ = _run("9\nabc\n0\n")
    assert output.count("Entrada inválida, digite novamente") == 2


def test_create_dealership():
    output, manager = _run("2\nLoja\n123\n0\n")
    assert "NOME:Loja" in output
    assert "Concessionaria Inaugurada." in output
    assert manager.names() == ["Loja"]
    assert manager.find("Loja").cnpj == 123


def test_create_duplicate_dealership():
    output, manager = _run("2\nLoja\n1\n2\nLoja\n2\n0\n")
    assert "Concessionaria existente. Tente outra vez" in output
    assert manager.names() == ["Loja"]


def test_register_car_and_duplicate():
    script = "2\nLoja\n1\n1\nLoja\nCH-1\nFiat\n100\n1\nLoja\nCH-2\nFiat\n200\n0\n"
    output, manager = _run(script)
    assert "\nCarro cadastrado.\n" in output
    assert "Carro ja cadastrado. Operacao CANCELADA!" in output
    assert manager.find("Loja").stock() == 1
    assert manager.find("Loja").cars[0].chassis == "CH-1"


def test_register_car_unknown_dealership():
    output, manager = _run("1\nNada\n0\n")
    assert "Concessionaria nao encontrada. Tente novamente." in output
    assert manager.names() == []


def test_show_stock():
    script = "2\nLoja\n1\n1\nLoja\nCH-1\nFiat\n100\n3\nLoja\n0\n"
    output, manager = _run(script)
    assert manager.stock_report("Loja") in output
    assert "> Marca: Fiat" in output


def test_end_of_input_stops_without_goodbye():
    output, _ = _run("2\nLoja\n")
    assert "Ate mais!" not in output
    assert output.startswith("\n++++++++++++++++++++++++++++++++\n")