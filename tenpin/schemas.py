from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """RFC 7807 shaped error payload."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    instance: Optional[str] = None
    code: str


class FrameOut(BaseModel):
    """Read-only snapshot of a frame."""

    model_config = ConfigDict(frozen=True)

    rolls: tuple[int, ...] = ()
    pins_down: int = 0
    is_strike: bool = False
    is_spare: bool = False
    is_finished: bool = False


class GameSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    frames: List[FrameOut] = Field(default_factory=list)
    bonus_rolls: List[int] = Field(default_factory=list)
    scores: List[int] = Field(default_factory=list)
    total: int = 0
    is_over: bool = False
