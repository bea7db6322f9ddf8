"""Registries for a wild-animal pet shop and for car dealerships, with console menus."""

__version__ = "0.1.0"