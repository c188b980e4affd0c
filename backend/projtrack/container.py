"""Dependency injection container — wires the store implementation to the API."""
from __future__ import annotations
from functools import lru_cache

from projtrack.core.config import SEED_ON_STARTUP
from projtrack.persistence.interfaces.storage import Storage
from projtrack.persistence.memory.mem_storage import MemStorage
from projtrack.persistence.seed import seed_storage


def build_store(seed: bool = True) -> MemStorage:
    store = MemStorage()
    if seed:
        seed_storage(store)
    return store


@lru_cache(maxsize=1)
def get_store() -> Storage:
    return build_store(seed=SEED_ON_STARTUP)
