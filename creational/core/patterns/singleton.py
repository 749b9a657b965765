from abc import ABC, ABCMeta
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
import logging
import threading

from creational.core.exceptions import ConstructionFailure, IllegalDuplication


T = TypeVar("T")

_UNSET: Any = object()


class RegistryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class LazySingletonRegistry(Generic[T]):
    """
    Process-wide holder for one lazily constructed instance.

    The instance is built by ``factory`` on the first call to
    ``get_instance()`` and kept until the process exits. Concurrent first
    callers are serialized by a lock around the check-and-create sequence,
    so the factory runs at most once per successful construction.
    """

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        self._factory = factory
        self._name = name or getattr(factory, "__qualname__", repr(factory))
        # Single reference, assigned only after the factory has returned.
        self._instance: Any = _UNSET
        self._lock = threading.RLock()
        self._constructing = False
        self._logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> RegistryState:
        if self._instance is _UNSET:
            return RegistryState.UNINITIALIZED
        return RegistryState.INITIALIZED

    def is_initialized(self) -> bool:
        return self._instance is not _UNSET

    def get_instance(self) -> T:
        """
        Get the shared instance, constructing it on first access.

        Returns:
            The same object for every caller in the process.

        Raises:
            ConstructionFailure: the factory raised. The registry stays
                uninitialized and the next call tries again.
        """
        instance = self._instance
        if instance is not _UNSET:
            return instance

        with self._lock:
            if self._instance is not _UNSET:
                return self._instance
            if self._constructing:
                raise ConstructionFailure(
                    self._name, RecursionError("factory requested its own instance")
                )

            self._constructing = True
            try:
                self._logger.debug(f"Constructing singleton '{self._name}'")
                instance = self._factory()
            except Exception as e:
                self._logger.error(f"Failed to construct singleton '{self._name}': {e}")
                raise ConstructionFailure(self._name, e) from e
            finally:
                self._constructing = False

            self._instance = instance
            self._logger.debug(f"Singleton '{self._name}' initialized")
            return instance

    def __copy__(self):
        raise IllegalDuplication(self._name, "copy")

    def __deepcopy__(self, memo):
        raise IllegalDuplication(self._name, "deepcopy")

    def __reduce__(self):
        raise IllegalDuplication(self._name, "pickle")

    def __repr__(self) -> str:
        return f"<LazySingletonRegistry {self._name!r} {self.state.value}>"


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    Calling a class built with this metaclass returns the single instance
    held by that class's own ``LazySingletonRegistry``. Arguments are not
    accepted: the instance is created the same way whoever asks first.
    """

    _registries: Dict[type, LazySingletonRegistry] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls):
        return SingletonMeta.registry_for(cls).get_instance()

    def registry_for(cls) -> LazySingletonRegistry:
        """Get the registry backing ``cls``, creating it on first use."""
        registry = SingletonMeta._registries.get(cls)
        if registry is not None:
            return registry

        with SingletonMeta._lock:
            registry = SingletonMeta._registries.get(cls)
            if registry is None:
                registry = LazySingletonRegistry(
                    super(SingletonMeta, cls).__call__,
                    name=f"{cls.__module__}.{cls.__qualname__}",
                )
                SingletonMeta._registries[cls] = registry
        return registry


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


def _resolve_instance(cls):
    return cls.get_instance()


class Singleton(ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for implementing Singleton pattern.

    Any class that inherits from this will automatically become a singleton
    with thread-safe lazy initialization. Copying raises
    ``IllegalDuplication`` and unpickling resolves to the existing instance.
    """

    def __init__(self):
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance.

        Returns:
            The singleton instance of the class.
        """
        return cls()

    @classmethod
    def is_initialized(cls) -> bool:
        return SingletonMeta.registry_for(cls).is_initialized()

    def __copy__(self):
        raise IllegalDuplication(type(self).__qualname__, "copy")

    def __deepcopy__(self, memo):
        raise IllegalDuplication(type(self).__qualname__, "deepcopy")

    def __reduce__(self):
        return _resolve_instance, (type(self),)
