"""Administrative response models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class OperationResponse(BaseModel):
    """Result of an administrative operation."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable result")
    data: Optional[Dict[str, Any]] = Field(None, description="Operation details")
