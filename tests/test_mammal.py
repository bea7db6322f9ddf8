import pytest

from cadastros.mammal import ExoticMammal, Mammal, NativeMammal
from cadastros.staff import Handler


def test_base_mammal_cannot_be_created():
    with pytest.raises(TypeError):
        Mammal(id=1)


def test_sheet_includes_fur_color_and_base_fields():
    mammal = NativeMammal(
        id=8,
        animal_class="Mammalia",
        scientific_name="Leopardus pardalis",
        sex="M",
        diet="Carnivora",
        baptism_name="Pintado",
        fur_color="Amarelo",
        uf_origin="MG",
    )
    text = mammal.describe()
    assert text.startswith("\nFicha do animal \n")
    assert text.endswith("\n\n")
    assert "Amarelo" in text
    assert "Cientifico:\tLeopardus pardalis\n" in text
    assert "Sexo:\t\tM\n" in text


def test_fur_color_after_base_rows():
    text = ExoticMammal(id=9, fur_color="Cinza").describe()
    assert text.index("Sexo:") < text.index("Cinza")


def test_exotic_origin_and_equality():
    first = ExoticMammal(id=10, country_origin="Quenia", fur_color="Marrom")
    second = ExoticMammal(id=10, country_origin="Quenia", fur_color="Marrom")
    assert first == second
    assert first.country_origin == "Quenia"
    second.fur_color = "Preto"
    assert first != second
    assert "Preto" in second.describe()


def test_cared_for_by_handler():
    handler = Handler(id=30, name="Davi", security_level=2)
    mammal = NativeMammal(id=11, handler=handler)
    assert mammal.is_cared_for_by(30)
    assert not mammal.is_cared_for_by(31)
    assert str(mammal) == mammal.describe()