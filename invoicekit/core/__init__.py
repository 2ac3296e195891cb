"""Core domain layer - entities, interfaces, services and exceptions."""

from invoicekit.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
