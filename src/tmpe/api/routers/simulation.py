"""API endpoints through which the host simulation drives the frame clock.

The config service reads the process-wide frame counter to decide when to
check the config file for external edits. The simulation loop reports its
progress here so that check actually runs.
"""

import logging

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from src.tmpe.api.dependencies import FrameCounterDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulation", tags=["simulation"])


class FrameStatus(BaseModel):
    """Response model for the host frame counter."""

    current_frame: int = Field(description="Current simulation frame index")


@router.get("/frames", response_model=FrameStatus)
async def get_current_frame(clock: FrameCounterDep) -> FrameStatus:
    """Get the current simulation frame index."""
    return FrameStatus(current_frame=clock.current_frame)


@router.post("/frames/advance", response_model=FrameStatus)
async def advance_frames(
    clock: FrameCounterDep,
    count: int = Query(default=1, ge=0, description="Number of frames simulated"),
) -> FrameStatus:
    """Advance the frame counter by the number of frames simulated.

    Args:
        count: Frames simulated since the last report

    Returns:
        FrameStatus with the new frame index
    """
    frame = clock.advance(count)
    logger.debug("Simulation advanced %d frames to frame %d", count, frame)
    return FrameStatus(current_frame=frame)
