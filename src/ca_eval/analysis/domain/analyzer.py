"""Analyzer Protocol — structural interface to the remote analysis service."""

from typing import Protocol

from ca_eval.analysis.domain.conversation import Conversation
from ca_eval.analysis.domain.result import AnalysisResult, ResultKind


class Analyzer(Protocol):
    """Structural interface satisfied by any analysis client.

    One request per call, no retries. Implementations raise AnalysisTimeout or
    AnalysisFailure and never mutate caller state.
    """

    async def analyze(
        self, conversation: Conversation, expect: ResultKind | None = None
    ) -> AnalysisResult: ...
