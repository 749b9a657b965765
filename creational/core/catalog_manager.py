from dataclasses import dataclass
from typing import Callable, Dict, List
import logging
from creational.core.patterns.singleton import Singleton
from creational.examples import builder, factory_method, singleton


ExampleRunner = Callable[[], List[str]]


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    runner: ExampleRunner
    description: str = ""


class CatalogManager(Singleton):
    """
    Singleton Catalog Manager.

    Keeps the registry of runnable pattern examples. Each example is a
    callable returning the lines it would print, so the command line and
    the tests can run any of them by name.
    """

    def _setup(self):
        """Initialize the catalog manager."""
        self._entries: Dict[str, CatalogEntry] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_examples()

    def _register_core_examples(self):
        self.register_example(
            "singleton", singleton.demonstrate,
            "Lazy, thread-safe single instance shared by every caller",
        )
        self.register_example(
            "builder", builder.demonstrate,
            "Step-by-step construction of houses by interchangeable builders",
        )
        self.register_example(
            "factory_method", factory_method.demonstrate,
            "Subclasses decide which product the creator instantiates",
        )
        self._logger.info(f"Registered {len(self._entries)} core examples")

    def register_example(self, name: str, runner: ExampleRunner, description: str = "") -> CatalogEntry:
        """
        Add an example to the catalog, replacing any entry with the same name.

        Returns:
            The stored catalog entry
        """
        entry = CatalogEntry(name, runner, description)
        self._entries[name] = entry
        self._logger.debug(f"Example '{name}' registered")
        return entry

    def has_example(self, name: str) -> bool:
        return name in self._entries

    def list_examples(self) -> List[str]:
        return list(self._entries)

    def describe_examples(self) -> Dict[str, str]:
        return {name: entry.description for name, entry in self._entries.items()}

    def run_example(self, name: str) -> List[str]:
        """
        Run a registered example and collect its output lines.

        Raises:
            KeyError: no example is registered under ``name``
        """
        entry = self._entries.get(name)
        if entry is None:
            self._logger.error(f"Unknown example '{name}'")
            raise KeyError(name)

        self._logger.info(f"Running example '{name}'")
        return list(entry.runner())
