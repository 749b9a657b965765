"""
Design Patterns Module

This module contains the pattern implementations the rest of the package is built on.
Currently includes:
- Singleton Pattern: lazy, thread-safe registry plus a metaclass-based Singleton base class
"""

from .singleton import (
    LazySingletonRegistry,
    RegistryState,
    Singleton,
    SingletonABCMeta,
    SingletonMeta,
)

__all__ = [
    "LazySingletonRegistry",
    "RegistryState",
    "Singleton",
    "SingletonMeta",
    "SingletonABCMeta",
]
