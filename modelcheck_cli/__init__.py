"""ModelCheck: referential integrity checks for UML model projects."""

__version__ = "0.1.0"
