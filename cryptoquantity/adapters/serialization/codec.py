from collections.abc import Mapping
from typing import Any, Union

from pydantic import ValidationError

from cryptoquantity.domain.exceptions import InvalidSerializationError
from cryptoquantity.domain.values import Quantity
from cryptoquantity.shared.logging import get_logger

from .models import SerializedQuantity

logger = get_logger(__name__)

SerializedData = Union[Mapping[str, Any], str, bytes, bytearray]


def serialize(quantity: Quantity) -> dict:
    """Canonical mapping form: ``{"value": "<digits>", "precision": <int>}``."""
    return SerializedQuantity(
        value=quantity.get_smallest_unit_string(), precision=quantity.precision
    ).model_dump()


def serialize_json(quantity: Quantity) -> str:
    return SerializedQuantity(
        value=quantity.get_smallest_unit_string(), precision=quantity.precision
    ).model_dump_json()


def unserialize(data: SerializedData) -> Quantity:
    """
    Decode a serialized quantity.

    :param data: Already decoded mapping, or its JSON text

    :return: Quantity with the exact magnitude and precision that were serialized

    :raises InvalidSerializationError: If data doesn't resolve to a mapping with
        an integer-string value and a non-negative integer precision
    """
    try:
        if isinstance(data, Mapping):
            model = SerializedQuantity.model_validate(dict(data))
        elif isinstance(data, (str, bytes, bytearray)):
            model = SerializedQuantity.model_validate_json(data)
        else:
            raise InvalidSerializationError(
                f"expected a mapping or JSON text, got {type(data).__name__}"
            )

    except ValidationError as e:
        raise InvalidSerializationError(
            "; ".join(_describe(error) for error in e.errors())
        ) from e

    return Quantity.from_smallest_unit(model.value, model.precision)


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "input"

    return f"{location}: {error.get('msg')}"


class QuantityCodec:
    """Injectable serializer that logs rejected payloads."""

    def encode(self, quantity: Quantity) -> dict:
        return serialize(quantity)

    def encode_json(self, quantity: Quantity) -> str:
        return serialize_json(quantity)

    def decode(self, data: SerializedData) -> Quantity:
        try:
            return unserialize(data)
        except InvalidSerializationError as e:
            logger.warning(
                "quantity_unserialize_failed",
                error=str(e),
                payload_type=type(data).__name__,
            )
            raise
