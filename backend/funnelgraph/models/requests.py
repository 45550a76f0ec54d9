"""API request models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class FunnelRequest(BaseModel):
    data: Any = Field(
        ...,
        description="Numbers, records with a 'value' field, or an object with 'values'",
    )
    width: float | None = Field(default=None, gt=0, description="Container width")
    height: float | None = Field(default=None, gt=0, description="Container height")
    direction: Literal["horizontal", "vertical"] = Field(
        default="horizontal",
        description="Main axis along the width (horizontal) or the height (vertical)",
    )
    gradient_direction: Literal["horizontal", "vertical"] = Field(
        default="horizontal",
        description="Direction of multi-colour gradient fills",
    )
