"""Session routes for manual maze navigation."""

import logging

from fastapi import APIRouter, HTTPException, status

from maze_game.api.deps import Registry
from maze_game.core.grid import Direction
from maze_game.core.maze_engine import MazeEngine, SessionClosedError
from maze_game.schemas.session import (
    MoveRequest,
    MoveResponse,
    SessionCreateRequest,
    SessionState,
)
from maze_game.services.maze_registry import MazeNotRegisteredError, MazeRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["Sessions"])


def _session_engine(registry: MazeRegistry, session_id: str) -> MazeEngine:
    engine = registry.session_engine(session_id)
    if engine is None or engine.get_session(session_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    return engine


def _session_state(registry: MazeRegistry, engine: MazeEngine, session_id: str) -> SessionState:
    state = engine.get_session(session_id)
    return SessionState(
        **state.to_dict(),
        maze=registry.session_maze(session_id),
        grid_data=engine.visualize(session_id),
    )


@router.post(
    "",
    response_model=SessionState,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    request: SessionCreateRequest,
    registry: Registry,
) -> SessionState:
    """Create a new navigation session.

    The player starts at the maze's start position (S).
    """
    try:
        state = registry.create_session(request.maze)
    except MazeNotRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {request.maze}",
        )

    logger.info(f"Session {state.session_id} created on maze {request.maze}")
    engine = registry.engine(request.maze)
    return _session_state(registry, engine, state.session_id)


@router.get(
    "/{session_id}",
    response_model=SessionState,
)
async def get_session(session_id: str, registry: Registry) -> SessionState:
    """Get session state by ID."""
    engine = _session_engine(registry, session_id)
    return _session_state(registry, engine, session_id)


@router.post(
    "/{session_id}/move",
    response_model=MoveResponse,
)
async def move(
    session_id: str,
    request: MoveRequest,
    registry: Registry,
) -> MoveResponse:
    """Move one cell in a direction.

    Moving into a wall or off the grid returns status "blocked" and
    leaves the player in place.
    """
    engine = _session_engine(registry, session_id)

    try:
        result = engine.move(session_id, Direction(request.direction))
    except SessionClosedError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return MoveResponse.model_validate(result.to_dict())


@router.post(
    "/{session_id}/quit",
    response_model=SessionState,
)
async def quit_session(session_id: str, registry: Registry) -> SessionState:
    """Quit a session without reaching the exit."""
    engine = _session_engine(registry, session_id)

    try:
        engine.quit(session_id)
    except SessionClosedError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return _session_state(registry, engine, session_id)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_session(session_id: str, registry: Registry) -> None:
    """Remove a session, whether or not it has ended."""
    if not registry.end_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )

    logger.info(f"Session {session_id} deleted")
