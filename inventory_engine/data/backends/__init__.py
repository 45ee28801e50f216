from .memory_backend import InMemoryProductRepository, InMemoryWarehouseDirectory

__all__ = ["InMemoryProductRepository", "InMemoryWarehouseDirectory"]
