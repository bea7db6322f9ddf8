import pytest

from cadastros.animal import ExoticAnimal, NativeAnimal
from cadastros.reptile import ExoticReptile, NativeReptile, Reptile
from cadastros.staff import Handler, Veterinarian


def test_reptile_is_abstract():
    with pytest.raises(TypeError):
        Reptile(id=1)


def test_native_reptile_fields_and_traits():
    snake = NativeReptile(
        id=7,
        scientific_name="Bothrops jararaca",
        venomous=True,
        venom_type="Hemotoxico",
        uf_origin="RN",
        authorization="auth-1",
    )
    assert isinstance(snake, NativeAnimal)
    assert snake.venomous is True
    assert snake.venom_type == "Hemotoxico"
    assert snake.uf_origin == "RN"


def test_exotic_reptile_traits():
    lizard = ExoticReptile(id=3, country_origin="Australia", city_origin="Perth")
    assert isinstance(lizard, ExoticAnimal)
    assert lizard.country_origin == "Australia"
    assert lizard.venomous is False


def test_describe_lists_venom_rows():
    snake = NativeReptile(id=7, baptism_name="Jara", venomous=True, venom_type="Neuro")
    text = snake.describe()
    assert text.startswith("\nFicha do animal \n")
    assert "ID:\t\t7\n" in text
    assert "Batismo:\tJara\n" in text
    assert "Venenoso:\tSim\n" in text
    assert "Veneno:\t\tNeuro\n" in text
    assert text.endswith("\n\n")


def test_describe_not_venomous():
    lizard = ExoticReptile(id=2, venom_type="Nenhum")
    assert "Venenoso:\tNao\n" in lizard.describe()
    assert str(lizard) == lizard.describe()


def test_is_cared_for_by():
    vet = Veterinarian(id=10, name="Ana")
    handler = Handler(id=20, name="Bia")
    snake = NativeReptile(id=1, veterinarian=vet, handler=handler)
    assert snake.is_cared_for_by(10)
    assert snake.is_cared_for_by(20)
    assert not snake.is_cared_for_by(30)