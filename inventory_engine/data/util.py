from __future__ import annotations

from typing import Literal, Optional

from .backends.memory_backend import InMemoryProductRepository, InMemoryWarehouseDirectory
from .interface import ProductRepository, WarehouseDirectory
from ..config import get_config


def get_repository(kind: Optional[Literal["memory"]] = None) -> ProductRepository:
    kind = kind or get_config().repository_kind
    if kind == "memory":
        return InMemoryProductRepository()
    raise ValueError(f"Unknown repository kind: {kind}")


def get_warehouse_directory(kind: Optional[Literal["memory"]] = None) -> WarehouseDirectory:
    kind = kind or get_config().repository_kind
    if kind == "memory":
        return InMemoryWarehouseDirectory()
    raise ValueError(f"Unknown repository kind: {kind}")
