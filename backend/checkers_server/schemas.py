from __future__ import annotations

from pydantic import BaseModel, Field


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0, le=7)
    col: int = Field(..., ge=0, le=7)


class SelectRequest(CoordinateModel):
    pass


class TargetRequest(CoordinateModel):
    pass
