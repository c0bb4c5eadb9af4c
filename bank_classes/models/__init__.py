"""Domain models for the banking exercises."""

from bank_classes.models.people import Person, Student

__all__ = ["Person", "Student"]
