"""Person interface and its student implementation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Person(ABC):
    """Capability interface for person-like types."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description of this person."""

    def display_info(self) -> None:
        """Print the description to stdout."""
        print(self.describe())


@dataclass
class Student(Person):
    """Student with a name and an age."""

    name: str = ""
    age: int = 0

    def describe(self) -> str:
        return f"Student Name: {self.name}, Age: {self.age}"
