"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from gilded_rose.config import settings


# === Request Schemas ===


class ItemInput(BaseModel):
    """Item to stock. quality is deliberately not range-checked."""

    name: str = Field(..., description="Item name, also selects the update rule")
    sell_in: int = Field(..., description="Days left before the sell-by date")
    quality: int = Field(..., description="Current quality")


class SimulateRequest(BaseModel):
    """Simulation request"""

    items: list[ItemInput] = Field(default_factory=list)
    days: int = Field(
        1,
        ge=0,
        le=settings.MAX_SIMULATION_DAYS,
        description="Number of days to simulate",
    )
    include_history: bool = Field(False, description="Return every day's snapshot")


# === Response Schemas ===


class ItemSchema(BaseModel):
    """Item state"""

    name: str
    sell_in: int
    quality: int
    category: str
    display: str


class SimulateResponse(BaseModel):
    """Simulation result"""

    days: int
    items: list[ItemSchema]
    history: Optional[list[list[ItemSchema]]] = None


class ErrorResponse(BaseModel):
    """Error response"""

    success: bool = False
    error: str
    detail: Optional[str] = None
