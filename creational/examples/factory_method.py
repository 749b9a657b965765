"""
Factory Method Design Pattern

Create objects without specifying the exact class that will be created:
the creator declares the factory method and subclasses decide which
product it returns.
"""

from abc import ABC, abstractmethod
from typing import List


class Product(ABC):
    """Interface every product returned by a factory method implements."""

    @abstractmethod
    def action(self) -> str:
        """Perform an action and return a string confirming it."""


class ConcreteProduct(Product):
    def action(self) -> str:
        return "action completed"


class Creator(ABC):
    """
    Declares the factory method.

    Subclasses implement ``factory_method`` to return a ``Product``. The
    creator's other operations do not depend on which product that is.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def other_action(self) -> List[str]:
        return ["other", "action"]


class ConcreteCreator(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct()


def creator(creator: Creator) -> List[str]:
    """Client code: works with any creator through the base interface."""
    return creator.other_action()


def demonstrate() -> List[str]:
    concrete = ConcreteCreator()
    return [
        repr(creator(concrete)),
        concrete.factory_method().action(),
    ]


def main():
    for line in demonstrate():
        print(line)


if __name__ == "__main__":
    main()
