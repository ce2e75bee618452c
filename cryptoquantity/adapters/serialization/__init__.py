from .codec import QuantityCodec, serialize, serialize_json, unserialize
from .models import SerializedQuantity

__all__ = [
    "QuantityCodec",
    "SerializedQuantity",
    "serialize",
    "serialize_json",
    "unserialize",
]
