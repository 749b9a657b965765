"""
Singleton Design Pattern

Ensure a class has only one instance and provide a global point of access
to it. The instance is built lazily on first access, under a real lock, so
concurrent first callers still end up sharing one object.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List
import copy
import logging
import pickle
import threading
import time

from creational.core.config_manager import ConfigManager
from creational.core.exceptions import IllegalDuplication
from creational.core.patterns.singleton import Singleton


logger = logging.getLogger(__name__)


class SharedResource(Singleton):
    """
    A singleton with a deliberately slow constructor.

    ``construction_count`` records how many times ``_setup`` ran, which is
    what the demonstration checks under concurrent access.
    """

    construction_count = 0
    _count_lock = threading.Lock()

    def _setup(self):
        delay = ConfigManager.get_instance().get_demo_settings()["construction_delay"]
        time.sleep(delay)
        with SharedResource._count_lock:
            SharedResource.construction_count += 1
        self.created_at = time.time()


def demonstrate() -> List[str]:
    demo = ConfigManager.get_instance().get_demo_settings()
    workers = demo["workers"]
    lines = []

    logger.debug(f"Requesting SharedResource from {workers} threads")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(SharedResource.get_instance) for _ in range(workers)]
        instances = [future.result() for future in futures]

    distinct = len(set(id(instance) for instance in instances))
    lines.append(
        f"{workers} concurrent callers, {distinct} distinct instance(s), "
        f"{SharedResource.construction_count} construction(s)"
    )

    resource = SharedResource.get_instance()
    lines.append(f"SharedResource() is get_instance(): {SharedResource() is resource}")

    try:
        copy.copy(resource)
        lines.append("copy.copy produced a second instance")
    except IllegalDuplication as e:
        lines.append(f"copy.copy rejected: {e}")

    restored = pickle.loads(pickle.dumps(resource))
    lines.append(f"pickle round trip returns the shared instance: {restored is resource}")

    return lines


def main():
    for line in demonstrate():
        print(line)


if __name__ == "__main__":
    main()
