"""RunConfig — configuration for a timed question-cycling run."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_INTERVAL_SECONDS = 3.0


class RunConfig(BaseModel, frozen=True):
    """Root configuration for `quiz-engine run`.

    ``seed`` omitted means questions are drawn from OS entropy.
    """

    name: str = Field(min_length=1)
    questions_path: Path
    seed: int | None = None
    interval_seconds: float = Field(default=DEFAULT_INTERVAL_SECONDS, gt=0.0)
    rounds: int = Field(default=1, ge=1)
