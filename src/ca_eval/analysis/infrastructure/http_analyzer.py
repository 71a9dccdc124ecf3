"""HttpAnalyzer — Analyzer implementation backed by ``POST /analyze``."""

import time

from ca_eval.analysis.domain.conversation import Conversation
from ca_eval.analysis.domain.observer import AnalysisObserver
from ca_eval.analysis.domain.result import AnalysisResult, ResultKind
from ca_eval.analysis.infrastructure.errors import AnalysisFailure, AnalysisTimeout
from ca_eval.analysis.infrastructure.parser import parse_analysis_result
from ca_eval.api.infrastructure.client import ApiClient
from ca_eval.api.infrastructure.errors import ApiRequestError, ApiTimeoutError


class HttpAnalyzer:
    """Sends a Conversation to the analysis service and returns the parsed result.

    Satisfies the Analyzer protocol structurally.
    """

    def __init__(self, client: ApiClient, observer: AnalysisObserver) -> None:
        self._client = client
        self._observer = observer

    async def analyze(
        self, conversation: Conversation, expect: ResultKind | None = None
    ) -> AnalysisResult:
        """Analyze one conversation.

        Raises:
            AnalysisTimeout: if the service does not answer in time.
            AnalysisFailure: on any other transport or parsing failure.
        """
        self._observer.analysis_started(
            num_messages=len(conversation.messages), expect=expect
        )
        start = time.monotonic()
        try:
            payload = await self._client.post(
                "/analyze", body=conversation.model_dump(mode="json")
            )
            result = parse_analysis_result(payload=payload, expect=expect)
        except ApiTimeoutError as exc:
            self._observer.analysis_failed(reason=str(exc), timed_out=True)
            raise AnalysisTimeout(timeout_seconds=exc.timeout_seconds) from exc
        except ApiRequestError as exc:
            self._observer.analysis_failed(reason=exc.reason, timed_out=False)
            raise AnalysisFailure(reason=exc.reason) from exc
        except AnalysisFailure as exc:
            self._observer.analysis_failed(reason=exc.reason, timed_out=False)
            raise

        self._observer.analysis_completed(
            kind=result.kind,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return result
