from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class SerializedQuantity(BaseModel):
    """Wire form of a quantity: exact smallest-unit digits plus precision."""

    model_config = ConfigDict(frozen=True)

    value: StrictStr = Field(
        pattern=r"^-?[0-9]+$",
        description="Amount in the smallest unit, as a base-10 integer string",
        examples=["12345000", "-1"],
    )
    precision: StrictInt = Field(
        ge=0, description="Number of decimal places", examples=[8, 18]
    )
