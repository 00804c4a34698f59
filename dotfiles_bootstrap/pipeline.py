from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .config import BootstrapConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapCtx:
    cfg: BootstrapConfig
    dry_run: bool = False


class Step(Protocol):
    """A single forward-only step."""

    step_id: str

    def run(self, ctx: BootstrapCtx) -> None:
        ...


@dataclass
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    skipped_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None


class StepFailed(Exception):
    """Wraps the error raised by a step, keeping the step id."""

    def __init__(self, step_id: str, error: BaseException, result: PipelineResult) -> None:
        super().__init__(f"{step_id}: {error}")
        self.step_id = step_id
        self.error = error
        self.result = result


def run_pipeline(
    *,
    ctx: BootstrapCtx,
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order; the first failure stops the run."""

    ids = [s.step_id for s in steps]
    for wanted in (start_at, stop_after):
        if wanted is not None and wanted not in ids:
            raise ValueError(f"Unknown step id {wanted!r} (known: {', '.join(ids)})")
    if start_at is not None and stop_after is not None and ids.index(stop_after) < ids.index(start_at):
        raise ValueError(f"stop_after {stop_after!r} comes before start_at {start_at!r}")

    result = PipelineResult()
    started = start_at is None
    stopped = False

    for step in steps:
        if stopped or (not started and step.step_id != start_at):
            result.skipped_steps.append(step.step_id)
            continue
        started = True

        logger.info("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except Exception as e:
            result.failed_step = step.step_id
            raise StepFailed(step.step_id, e, result) from e
        result.ran_steps.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            stopped = True

    return result
