"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class MazeListItem(BaseModel):
    """Schema for maze list item (without grid data)."""

    slug: str
    name: str
    rows: int = Field(..., gt=0)
    cols: int = Field(..., gt=0)


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class MazeDetail(MazeListItem):
    """Schema for detailed maze response with grid data."""

    grid_data: str
    start: MazePosition
    exit: MazePosition


class MazeValidateRequest(BaseModel):
    """Schema for validating maze text."""

    grid_data: str


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None


class PathResponse(BaseModel):
    """Schema for a path from start to exit."""

    steps: int
    positions: list[MazePosition]
    grid_data: str  # maze with the path drawn on it


class PathListResponse(BaseModel):
    """Schema for possible paths response."""

    paths: list[PathResponse]
    total: int
    distinct: int
