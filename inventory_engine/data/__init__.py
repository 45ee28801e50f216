from .interface import ProductRepository, WarehouseDirectory
from .util import get_repository, get_warehouse_directory

__all__ = [
    "ProductRepository",
    "WarehouseDirectory",
    "get_repository",
    "get_warehouse_directory",
]
