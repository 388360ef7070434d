"""Sequential step pipeline used by the application use cases."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from lustre_dev.domain.exceptions import PreviewError
from lustre_dev.ports.console import ConsolePort

logger = logging.getLogger(__name__)

ErrorMapper = Callable[[Any], PreviewError]


def keep(error: PreviewError) -> PreviewError:
    """Error mapper for steps that already raise preview errors."""
    return error


class StepKind(str, Enum):
    """Kinds of step the runner knows how to execute."""

    BEGIN = "begin"
    DONE = "done"
    MAP = "map"
    ATTEMPT = "attempt"
    RUN = "run"
    GUARD = "guard"


@dataclass(frozen=True)
class Step:
    """Descriptor for one unit of pipeline work."""

    kind: StepKind
    label: str
    action: Callable[[Any], Any] | None = None
    catch: tuple[type[Exception], ...] = ()
    on_error: ErrorMapper | None = None


class PipelineResult(BaseModel):
    """Outcome of a pipeline execution."""

    value: Any = Field(default=None, description="Value produced by the last step")
    error: PreviewError | None = Field(default=None, description="First error raised")
    failed_step: str | None = Field(default=None, description="Step running when it failed")

    @property
    def ok(self) -> bool:
        """Check if every step completed."""
        return self.error is None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}


class Pipeline:
    """Ordered list of steps run strictly left to right.

    Every step receives the value produced by the one before it. The first
    failing step stops the run; nothing after it executes. Only the error
    types a step declares in ``catch`` are turned into a pipeline error, so
    anything else a collaborator raises propagates unchanged.
    """

    def __init__(self, console: ConsolePort):
        """Initialize an empty pipeline.

        Args:
            console: Console port receiving the progress markers
        """
        self._console = console
        self._steps: list[Step] = []

    @property
    def steps(self) -> tuple[Step, ...]:
        """Steps in execution order."""
        return tuple(self._steps)

    def begin(self, label: str) -> Pipeline:
        """Start a named step, printing a start marker when reached."""
        return self._add(Step(StepKind.BEGIN, label))

    def done(self, label: str) -> Pipeline:
        """Close the current step, printing a completion marker when reached."""
        return self._add(Step(StepKind.DONE, label))

    def map(self, transform: Callable[[Any], Any], label: str = "map") -> Pipeline:
        """Apply an infallible transform to the current value."""
        return self._add(Step(StepKind.MAP, label, transform))

    def attempt(
        self,
        operation: Callable[[Any], Any],
        on_error: ErrorMapper,
        catch: tuple[type[Exception], ...] = (PreviewError,),
        label: str = "attempt",
    ) -> Pipeline:
        """Run a fallible operation, mapping declared errors on failure.

        Args:
            operation: Called with the current value; its result becomes the next value
            on_error: Translates a caught error into a PreviewError
            catch: Error types the operation is declared to raise
            label: Name used in debug logs
        """
        return self._add(Step(StepKind.ATTEMPT, label, operation, catch, on_error))

    def run(
        self,
        action: Callable[[Any], Any],
        on_error: ErrorMapper,
        catch: tuple[type[Exception], ...] = (PreviewError,),
        label: str = "run",
    ) -> Pipeline:
        """Run a side-effecting action, awaiting it if it is a coroutine.

        Args:
            action: Called with the current value; may return an awaitable
            on_error: Translates a caught error into a PreviewError
            catch: Error types the action is declared to raise
            label: Name used in debug logs
        """
        return self._add(Step(StepKind.RUN, label, action, catch, on_error))

    def guard(
        self,
        predicate: Callable[[Any], bool],
        error: ErrorMapper,
        label: str = "guard",
    ) -> Pipeline:
        """Abort with ``error(value)`` when ``predicate(value)`` holds."""
        return self._add(Step(StepKind.GUARD, label, predicate, (), error))

    async def execute(self, value: Any = None) -> PipelineResult:
        """Run every step in order.

        Args:
            value: Initial value handed to the first step

        Returns:
            PipelineResult with the last value, or the first error raised
        """
        current: str | None = None

        for step in self._steps:
            logger.debug("Pipeline step %s (%s)", step.label, step.kind.value)

            if step.kind == StepKind.BEGIN:
                current = step.label
                self._console.print(f"[cyan]{step.label}...[/cyan]")
            elif step.kind == StepKind.DONE:
                self._console.print_success(step.label)
            elif step.kind == StepKind.MAP:
                value = step.action(value)
            elif step.kind == StepKind.GUARD:
                if step.action(value):
                    return self._fail(step.on_error(value), current)
            else:
                try:
                    result = step.action(value)
                    if step.kind == StepKind.RUN and inspect.isawaitable(result):
                        result = await result
                except step.catch as e:
                    return self._fail(step.on_error(e), current)
                value = result

        return PipelineResult(value=value)

    def _add(self, step: Step) -> Pipeline:
        self._steps.append(step)
        return self

    @staticmethod
    def _fail(error: PreviewError, step_label: str | None) -> PipelineResult:
        logger.debug("Pipeline stopped during %r: %s", step_label, error)
        return PipelineResult(error=error, failed_step=step_label)
