"""Pydantic schemas for JSON output validation.

All --json output from dynprod commands goes through these models so the
structure stays consistent across commands:
- product: ProductResponse | ErrorResponse
- count: CountResponse | ErrorResponse
"""

from typing import Any, List, Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "unexpected_error"],
    )
    message: str = Field(description="Human-readable error description")


class CountResponse(BaseModel):
    """Response for the count command.

    Attributes:
        status: Always "success"
        rows: Number of rows
        lengths: Length of each row, in order
        total: Number of combinations in the full product
    """

    status: Literal["success"] = "success"
    rows: int = Field(ge=0, description="Number of rows")
    lengths: List[int] = Field(description="Length of each row")
    total: int = Field(ge=0, description="Number of combinations")


class ProductResponse(CountResponse):
    """Response for the product command.

    Attributes:
        count: Number of combinations included in this response
        truncated: True if --limit cut the enumeration short
        combinations: The combinations, in odometer order
    """

    count: int = Field(ge=0, description="Combinations included")
    truncated: bool = Field(default=False, description="Output stopped at --limit")
    combinations: List[List[Any]] = Field(description="Combinations in order")

