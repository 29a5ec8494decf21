"""Structured output of the WOD generator."""

from pydantic import BaseModel, Field


class WodRequest(BaseModel):
    type: str = Field(..., min_length=1)  # AMRAP, EMOM, For Time, ...
    duration: int = Field(..., ge=1, le=180)  # minutes
    level: str = Field(..., min_length=1)  # beginner | intermediate | advanced
    focus: str | None = None
    equipment: list[str] = Field(default_factory=list)


class WodScaling(BaseModel):
    beginner: str = ""
    intermediate: str = ""
    advanced: str = ""


class WodResponse(BaseModel):
    type: str
    name: str
    description: str = ""
    movements: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    scaling: WodScaling = Field(default_factory=WodScaling)
