from __future__ import annotations

import asyncio
import logging
from typing import Union

from .config import PipelineConfig
from .errors import AnalysisFailure, EmptyInputError, SessionBusyError
from .pipeline import AnalysisBackend, AnalysisOutcome, Operation, RuleBasedBackend

logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Submission boundary for one surface.

    Callers submit text and await the outcome. Only one submission may be in
    flight; a second one is rejected with SessionBusyError. The simulated
    latency stands in for a remote backend and is a cancellation point, so a
    superseded submission can simply be cancelled by its caller.
    """

    def __init__(
        self,
        backend: AnalysisBackend | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self._config = config or PipelineConfig()
        self._backend = backend or RuleBasedBackend(self._config)
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def config(self) -> PipelineConfig:
        return self._config

    async def submit(self, operation: Union[str, Operation], text: str) -> AnalysisOutcome:
        """Run one operation against text and return its tagged outcome."""
        op = Operation.parse(operation)
        if not text or not text.strip():
            raise EmptyInputError("Please enter or select some text first")
        if self._busy:
            raise SessionBusyError(f"An analysis is already running; ignoring '{op.value}'.")

        self._busy = True
        try:
            logger.debug("Submitting %s (%d chars)", op.value, len(text))
            delay = self._config.latency_seconds(op.value)
            if delay > 0:
                await asyncio.sleep(delay)
            try:
                outcome = self._backend.analyze(op, text)
            except Exception as exc:
                logger.exception("Analysis error during %s", op.value)
                raise AnalysisFailure(op.value) from exc
            logger.debug("Completed %s", op.value)
            return outcome
        finally:
            self._busy = False


async def analyze(
    operation: Union[str, Operation], text: str, config: PipelineConfig | None = None
) -> AnalysisOutcome:
    """Run a single submission through a fresh session."""
    return await AnalysisSession(config=config).submit(operation, text)
