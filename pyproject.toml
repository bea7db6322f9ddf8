[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastros"
version = "0.1.0"
description = "Registries for a wild-animal pet shop and for car dealerships, with interactive menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["registry", "pet shop", "animals", "employees", "dealership", "cars"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petfera = "cadastros.petfera_cli:main"
concessionaria = "cadastros.dealership_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cadastros"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
