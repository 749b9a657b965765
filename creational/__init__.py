"""A catalog of creational design patterns: Singleton, Builder and Factory Method."""

__version__ = "1.0.0"
