"""Session schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from maze_game.schemas.maze import MazePosition


class SessionCreateRequest(BaseModel):
    """Schema for creating a new navigation session."""

    maze: str = Field(..., min_length=1)


class SessionState(BaseModel):
    """Schema for session state."""

    id: str
    maze: str
    current_position: MazePosition
    steps: int
    status: str  # active, completed, quit
    grid_data: str  # maze with the player drawn as "@"


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="^(up|down|left|right)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str  # moved, blocked, completed
    position: MazePosition
    steps: int
    message: Optional[str] = None
