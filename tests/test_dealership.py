import pytest

from cadastros.dealership import Car, CarStatus, Dealership, DealershipManager
from cadastros.registry import NotFoundError


def test_car_describe_format():
    car = Car("Fiat", 50000, "CHASSI-0001")
    assert car.describe() == (
        "> Marca: Fiat\n> Preco: 50000\n> Numero do Chassi: CHASSI-0001\n"
    )
    assert str(car) == car.describe()


def test_default_car():
    car = Car()
    assert car.brand == " "
    assert car.chassis == " "
    assert car.price == 0


def test_car_equality_by_brand():
    assert Car("Fiat", 1, "A") == Car("Fiat", 2, "B")
    assert not Car("Fiat", 1, "A") == Car("Ford", 1, "A")
    assert Car("Fiat", 1, "A") == "Fiat"
    assert not Car("Fiat", 1, "A") == "Ford"


def test_dealership_rejects_same_brand():
    shop = Dealership("Loja", 123)
    assert shop.add_car(Car("Fiat", 10, "A")) is True
    assert shop.add_car(Car("Fiat", 20, "B")) is False
    assert shop.add_car(Car("Ford", 20, "C")) is True
    assert shop.stock() == 2


def test_dealership_describe_lists_every_car():
    shop = Dealership("Loja")
    first, second = Car("Fiat", 10, "A"), Car("Ford", 20, "B")
    shop.add_car(first)
    shop.add_car(second)
    assert shop.describe() == first.describe() + "\n" + second.describe() + "\n"


def test_dealership_equality_by_name():
    assert Dealership("Loja", 1) == Dealership("Loja", 2)
    assert not Dealership("Loja", 1) == Dealership("Outra", 1)


def test_manager_create_and_names():
    manager = DealershipManager()
    manager.create_dealership("A", 1)
    manager.create_dealership("B", 2)
    assert manager.names() == ["A", "B"]
    assert manager.find("B").cnpj == 2


def test_manager_duplicate_name_raises():
    manager = DealershipManager()
    manager.create_dealership("A", 1)
    with pytest.raises(ValueError):
        manager.create_dealership("A", 5)
    assert manager.names() == ["A"]


def test_manager_find_missing():
    with pytest.raises(NotFoundError):
        DealershipManager().find("Nada")


def test_register_car_statuses():
    manager = DealershipManager()
    manager.create_dealership("A", 1)
    assert manager.register_car("Z", Car("Fiat", 1, "X")) is CarStatus.NOT_FOUND
    assert manager.register_car("A", Car("Fiat", 1, "X")) is CarStatus.REGISTERED
    assert manager.register_car("A", Car("Fiat", 2, "Y")) is CarStatus.EXISTS
    assert manager.find("A").stock() == 1


def test_stock_report():
    manager = DealershipManager()
    manager.create_dealership("A", 1)
    car = Car("Fiat", 1.5, "X")
    manager.register_car("A", car)
    report = manager.stock_report("A")
    assert report == "\n O estoque da A possui: \n" + car.describe() + "\n"
    assert "> Preco: 1.5\n" in report


def test_stock_report_missing():
    with pytest.raises(NotFoundError):
        DealershipManager().stock_report("A")