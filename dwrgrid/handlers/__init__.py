"""Example grid handlers exposed through the remoting registry."""

from dwrgrid.handlers.basic_read import BasicReadExample, DwrProxyExample
from dwrgrid.handlers.crud import CrudExample

__all__ = [
    "BasicReadExample",
    "CrudExample",
    "DwrProxyExample",
]
