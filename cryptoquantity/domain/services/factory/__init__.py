from .quantity_factory import QuantityFactory

__all__ = [
    "QuantityFactory",
]
