# src/cms_backend/schemas/common.py
from __future__ import annotations
from typing import Annotated, Optional
from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ids and integer columns are signed 64-bit in storage
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
IdPath = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


class CamelModel(BaseModel):
    """Wire models speak camelCase; Python code keeps snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    offset: Int64
    size: int
    name: Optional[str] = None

    @field_validator("size")
    @classmethod
    def _size_bounds(cls, v: int) -> int:
        if v <= 0 or v > 100:
            raise ValueError("size must be between 1 and 100")
        return v

    @field_validator("offset")
    @classmethod
    def _offset_bounds(cls, v: int) -> int:
        if v < 0:
            raise ValueError("offset must be >= 0")
        return v

    @property
    def like(self) -> str:
        """LIKE pattern for the optional name filter ('' when unfiltered)."""
        return f"%{self.name}%" if self.name else ""
