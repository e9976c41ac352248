"""Common schemas used across multiple API endpoints.

Provides the camelCase base model and the standard acknowledgement
wrapper returned by endpoints that do not hand back a resource.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase wire names.

    Fields are declared in snake_case and exposed as camelCase on the wire
    (``first_name`` <-> ``firstName``). Snake_case input is accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AckResponse(CamelModel):
    """Acknowledgement returned by signup, OTP verification and resend.

    Attributes:
        success: Always True for 2xx responses.
        message: Human-readable outcome.
    """

    success: bool = Field(default=True, description="Operation succeeded")
    message: str = Field(..., description="Human-readable outcome")
