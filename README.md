# cadastros

Two small record-keeping tools with menu-driven console front ends:

- **PetFera**: a registry for a pet shop that keeps wild animals. It stores
  amphibians, birds, mammals and reptiles, in native or exotic kinds, together
  with the staff who look after them: handlers and veterinarians.
- **Concessionária**: a manager for car dealerships and the cars in their stock.

The menus and messages are in Portuguese.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Start the pet shop registry:

```
petfera
```

Its main menu has three submenus:

- **Cadastrar**: register an employee (role `Tratador` or `Veterinario`) or an
  animal (amphibian, mammal, reptile or bird, of type `Nativo` or `Exotico`).
  An animal's veterinarian and handler are looked up by employee id. If no
  employee has that id, the animal is registered without one.
- **Consultar**: look up an animal or an employee by id, list the animals in an
  employee's care, or show how many animals and employees are on record.
- **Remover**: remove an animal or an employee by id.

Enter `0` to leave a menu. The program also ends when its input ends.

Start the dealership manager:

```
concessionaria
```

From its menu you can open a dealership (name and CNPJ), add a car to one by
name, and list a dealership's stock.

## Library use

The pet shop registry works without the menus:

```python
from cadastros.mammal import NativeMammal
from cadastros.registry import NotFoundError, Registry
from cadastros.staff import Handler, Veterinarian

registry = Registry()
vet = Veterinarian(id=1, name="Ana", crmv="CRMV-0000")
handler = Handler(id=2, name="Bruno", security_level=1)
registry.add_employee(vet)
registry.add_employee(handler)

capybara = NativeMammal(
    id=10,
    animal_class="Mammalia",
    scientific_name="Hydrochoerus hydrochaeris",
    sex="F",
    size=1.2,
    diet="Herbivora",
    veterinarian=vet,
    handler=handler,
    baptism_name="Capi",
    fur_color="Marrom",
    uf_origin="RN",
)
registry.add_animal(capybara)

print(registry.find_animal(10).describe())
for animal in registry.animals_of_employee(vet.id):
    print(animal.baptism_name)

print(registry.animal_count(), registry.employee_count())

try:
    registry.remove_animal(999)
except NotFoundError:
    print("no such animal")
```

`add_employee` and `add_animal` raise `ValueError` when the id is already in
use. Lookups and removals raise `NotFoundError`, a `LookupError`.

Animal classes live in `cadastros.amphibian`, `cadastros.bird`,
`cadastros.mammal` and `cadastros.reptile`. Each module has an abstract base
(`Amphibian`, `Bird`, `Mammal`, `Reptile`) that raises `TypeError` if it is
created directly, and a native and an exotic kind. `describe()` returns the
record card as text. The shared base `Animal` and the `WildAnimal`,
`NativeAnimal` and `ExoticAnimal` traits are in `cadastros.animal`. Staff
classes (`Employee`, `Handler`, `Veterinarian`) are in `cadastros.staff`.

The dealership side:

```python
from cadastros.dealership import Car, DealershipManager

manager = DealershipManager()
manager.create_dealership("Centro", 1234)
status = manager.register_car("Centro", Car("Fiat", 45000.0, "CHASSI-0001"))
print(status)                      # CarStatus.REGISTERED
print(manager.stock_report("Centro"))
```

A dealership does not accept a second car of a brand it already has in stock.
`register_car` returns a `CarStatus` (`NOT_FOUND`, `EXISTS` or `REGISTERED`).
`create_dealership` raises `ValueError` for a name that is already taken, and
`find` and `stock_report` raise `NotFoundError` for an unknown name.

## What it does not do

- Everything is kept in memory. Nothing is saved to disk, so records are lost
  when the program exits.
- Records cannot be edited once they are registered. To change one, remove it
  and register it again.