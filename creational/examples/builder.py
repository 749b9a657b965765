"""
Builder Design Pattern

Create complex objects through a controlled, step-by-step construction
process. Different builders produce variations of the object while the
director runs the same construction sequence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class House:
    """The product: a house assembled from walls, doors, windows and a roof."""

    def __init__(self):
        self.walls: List[str] = []
        self.doors: List[str] = []
        self.windows: List[str] = []
        self.roof: Optional[str] = None

    def show(self) -> str:
        """Describe the house that has been built."""
        roof = f"{self.roof} roof" if self.roof else "no roof"
        return (
            f"House with {len(self.walls)} walls, {len(self.doors)} doors, "
            f"{len(self.windows)} windows, and a {roof}."
        )


class HouseBuilder(ABC):
    """Declares one method per part of the house."""

    @abstractmethod
    def build_walls(self) -> None:
        pass

    @abstractmethod
    def build_doors(self) -> None:
        pass

    @abstractmethod
    def build_windows(self) -> None:
        pass

    @abstractmethod
    def build_roof(self) -> None:
        pass

    @abstractmethod
    def get_house(self) -> House:
        pass


class WoodenHouseBuilder(HouseBuilder):
    """Builds a house out of wooden components."""

    def __init__(self):
        self._house = House()

    def build_walls(self) -> None:
        self._house.walls = ["wooden wall"] * 4

    def build_doors(self) -> None:
        self._house.doors = ["wooden door"] * 2

    def build_windows(self) -> None:
        self._house.windows = ["wooden-framed window"] * 4

    def build_roof(self) -> None:
        self._house.roof = "wooden"

    def get_house(self) -> House:
        return self._house


class BrickHouseBuilder(HouseBuilder):
    """Builds a house out of brick and metal components."""

    def __init__(self):
        self._house = House()

    def build_walls(self) -> None:
        self._house.walls = ["brick wall"] * 4

    def build_doors(self) -> None:
        self._house.doors = ["metal door"]

    def build_windows(self) -> None:
        self._house.windows = ["brick-framed window"] * 6

    def build_roof(self) -> None:
        self._house.roof = "metal"

    def get_house(self) -> House:
        return self._house


class HouseDirector:
    """
    Controls the building process.

    The director calls the builder steps in a fixed order: walls, doors,
    windows, roof.
    """

    def __init__(self):
        self._builder: Optional[HouseBuilder] = None

    def set_builder(self, builder: HouseBuilder) -> None:
        self._builder = builder

    def construct_house(self) -> House:
        """
        Run every build step in sequence.

        Returns:
            The completed house.
        """
        if self._builder is None:
            raise RuntimeError("No builder set on the director")

        self._builder.build_walls()
        self._builder.build_doors()
        self._builder.build_windows()
        self._builder.build_roof()
        return self._builder.get_house()


def demonstrate() -> List[str]:
    """Build a wooden house and a brick house with the same director."""
    director = HouseDirector()
    lines = []

    for builder in (WoodenHouseBuilder(), BrickHouseBuilder()):
        director.set_builder(builder)
        lines.append(director.construct_house().show())

    return lines


def main():
    for line in demonstrate():
        print(line)


if __name__ == "__main__":
    main()
