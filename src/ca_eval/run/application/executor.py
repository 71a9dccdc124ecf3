"""RunExecutor — dispatches tests one run at a time and keeps the current results."""

import asyncio
import time
import uuid
from collections.abc import Sequence
from typing import Literal

from ca_eval.analysis.domain.analyzer import Analyzer
from ca_eval.analysis.domain.conversation import Conversation
from ca_eval.analysis.domain.result import ResultKind
from ca_eval.core.errors import CaEvalError
from ca_eval.run.application.aggregator import summarize, summarize_compliance
from ca_eval.run.application.remote_records import to_record
from ca_eval.run.domain.batch import BatchRun
from ca_eval.run.domain.errors import EmptyInput, UnknownBuiltinScenario
from ca_eval.run.domain.observer import RunObserver
from ca_eval.run.domain.record import RunKind, RunRecord
from ca_eval.run.domain.remote_batch import RemoteBatchKind, RemoteBatchSource
from ca_eval.run.domain.summary import BatchSummary, ComplianceBatchSummary
from ca_eval.scenario.domain.builtin import BUILTIN_COMPLIANCE_SCENARIOS
from ca_eval.scenario.domain.scenario import Scenario
from ca_eval.validation.application.runner import ValidationRunner
from ca_eval.validation.domain.metrics import ValidationMetrics, ValidationUnavailable

type ExecutorState = Literal["idle", "running", "idle_with_result"]


class RunExecutor:
    """Single writer of the console's "current run" state.

    Only one run may be in flight. Every entry point checks and sets ``busy``
    before its first await, so on a single event loop the check-and-set cannot
    interleave with another entry point. A request made while busy is dropped:
    it returns None, makes no analyzer call and changes no state.

    Analyzer failures never propagate; they are recorded as ErrorEnvelope
    results on the affected RunRecord. The only exceptions raised here are
    EmptyInput and UnknownBuiltinScenario, before anything is dispatched.
    """

    def __init__(
        self,
        analyzer: Analyzer,
        validation_runner: ValidationRunner,
        observer: RunObserver,
        remote_batch_source: RemoteBatchSource | None = None,
        max_concurrent: int = 1,
    ) -> None:
        self._analyzer = analyzer
        self._validation_runner = validation_runner
        self._observer = observer
        self._remote_batch_source = remote_batch_source
        self._max_concurrent = max(1, max_concurrent)

        self._busy = False
        self._last_record: RunRecord | None = None
        self._last_batch: BatchRun | None = None
        self._last_summary: BatchSummary | None = None
        self._last_compliance_summary: ComplianceBatchSummary | None = None
        self._last_validation: ValidationMetrics | ValidationUnavailable | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def state(self) -> ExecutorState:
        if self._busy:
            return "running"
        if (
            self._last_record is None
            and self._last_batch is None
            and self._last_validation is None
        ):
            return "idle"
        return "idle_with_result"

    @property
    def last_record(self) -> RunRecord | None:
        return self._last_record

    @property
    def last_batch(self) -> BatchRun | None:
        return self._last_batch

    @property
    def last_summary(self) -> BatchSummary | None:
        return self._last_summary

    @property
    def last_compliance_summary(self) -> ComplianceBatchSummary | None:
        return self._last_compliance_summary

    @property
    def last_validation(self) -> ValidationMetrics | ValidationUnavailable | None:
        return self._last_validation

    def _try_begin(self, kind: str) -> bool:
        if self._busy:
            self._observer.run_rejected(kind=kind)
            return False
        self._busy = True
        return True

    def _end(self) -> None:
        self._busy = False

    # ------------------------------------------------------------------
    # Single runs
    # ------------------------------------------------------------------

    async def run_single(self, text: str) -> RunRecord | None:
        """Analyze free text as a one-message customer conversation.

        Raises:
            EmptyInput: if text is blank. No request is made.
        """
        if self._busy:
            self._observer.run_rejected(kind="quick")
            return None
        if not text.strip():
            raise EmptyInput()

        self._busy = True
        try:
            record = await self._dispatch(
                kind="quick",
                name=text,
                conversation=Conversation.from_customer_text(text=text),
                expect="emotion",
            )
        finally:
            self._end()
        self._last_record = record
        return record

    async def run_scenario(self, scenario: Scenario) -> RunRecord | None:
        """Dispatch one scenario and judge the result against its expectation."""
        kind: RunKind = (
            "compliance" if scenario.category == "compliance" else "scenario"
        )
        if not self._try_begin(kind=kind):
            return None
        try:
            record = await self._dispatch_scenario(kind=kind, scenario=scenario)
        finally:
            self._end()
        self._last_record = record
        return record

    async def run_compliance(self, scenario: Scenario | int = 0) -> RunRecord | None:
        """Run a compliance scenario, by default the first built-in conversation.

        An int selects one of the built-in compliance scenarios by position.

        Raises:
            UnknownBuiltinScenario: if the int is not a valid position.
        """
        if isinstance(scenario, int):
            if not 0 <= scenario < len(BUILTIN_COMPLIANCE_SCENARIOS):
                raise UnknownBuiltinScenario(
                    index=scenario, count=len(BUILTIN_COMPLIANCE_SCENARIOS)
                )
            scenario = BUILTIN_COMPLIANCE_SCENARIOS[scenario]
        return await self.run_scenario(scenario)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    async def run_batch(self, scenarios: Sequence[Scenario]) -> BatchRun | None:
        """Dispatch every scenario and aggregate once all of them have resolved.

        Items run one at a time unless max_concurrent > 1. Records keep the
        order of ``scenarios`` whatever order they complete in.
        """
        if not self._try_begin(kind="batch"):
            return None
        try:
            run_id = str(uuid.uuid4())
            self._observer.batch_started(
                run_id=run_id,
                total=len(scenarios),
                max_concurrent=self._max_concurrent,
            )
            started_at = time.monotonic()

            slots: list[RunRecord | None] = [None] * len(scenarios)
            sem = asyncio.Semaphore(self._max_concurrent)
            async with asyncio.TaskGroup() as tg:
                for index, scenario in enumerate(scenarios):
                    tg.create_task(
                        self._run_batch_item(
                            sem=sem,
                            run_id=run_id,
                            index=index,
                            scenario=scenario,
                            slots=slots,
                        )
                    )

            records = [record for record in slots if record is not None]
            batch = BatchRun(run_id=run_id, records=records)
            self._store_batch(batch=batch)
            self._observer.batch_completed(
                run_id=run_id,
                total=len(records),
                error_count=len(batch.failed_records),
                elapsed_seconds=time.monotonic() - started_at,
            )
        finally:
            self._end()
        return batch

    async def _run_batch_item(
        self,
        sem: asyncio.Semaphore,
        run_id: str,
        index: int,
        scenario: Scenario,
        slots: list[RunRecord | None],
    ) -> None:
        async with sem:
            record = await self._dispatch_scenario(kind="batch", scenario=scenario)
        slots[index] = record
        self._observer.batch_item_completed(
            run_id=run_id, index=index, name=scenario.name, errored=record.is_error
        )

    async def run_remote_batch(self, kind: RemoteBatchKind) -> BatchRun | None:
        """Ask the service to run its own batch and normalize the entries.

        A failure of the whole call yields a BatchRun with no records and
        ``error`` set.
        """
        if self._remote_batch_source is None:
            raise RuntimeError("RunExecutor was created without a remote batch source")
        if not self._try_begin(kind="remote_batch"):
            return None
        try:
            run_id = str(uuid.uuid4())
            self._observer.run_started(kind="remote_batch", name=kind)
            started_at = time.monotonic()
            try:
                entries = await self._remote_batch_source.run(kind=kind)
            except CaEvalError as exc:
                self._observer.run_item_failed(
                    kind="remote_batch", name=kind, reason=str(exc)
                )
                batch = BatchRun(run_id=run_id, records=[], error=str(exc))
            else:
                records = [to_record(entry=entry, kind=kind) for entry in entries]
                batch = BatchRun(run_id=run_id, records=records)
            self._store_batch(batch=batch)
            self._observer.batch_completed(
                run_id=run_id,
                total=len(batch.records),
                error_count=len(batch.failed_records),
                elapsed_seconds=time.monotonic() - started_at,
            )
        finally:
            self._end()
        return batch

    def _store_batch(self, batch: BatchRun) -> None:
        """Replace the previous batch and recompute its summaries from scratch."""
        self._last_batch = batch
        self._last_summary = summarize(batch.records)
        self._last_compliance_summary = summarize_compliance(batch.records)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    async def run_validation(self) -> ValidationMetrics | ValidationUnavailable | None:
        """Query the system-health endpoint through the ValidationRunner."""
        if not self._try_begin(kind="validation"):
            return None
        try:
            outcome = await self._validation_runner.validate()
        finally:
            self._end()
        self._last_validation = outcome
        return outcome

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def _dispatch_scenario(self, kind: RunKind, scenario: Scenario) -> RunRecord:
        return await self._dispatch(
            kind=kind,
            name=scenario.name,
            conversation=scenario.to_conversation(),
            expect=scenario.category,
            scenario=scenario,
        )

    async def _dispatch(
        self,
        kind: RunKind,
        name: str,
        conversation: Conversation,
        expect: ResultKind,
        scenario: Scenario | None = None,
    ) -> RunRecord:
        """Make one analyzer call and turn its outcome into a RunRecord."""
        expected = scenario.expected_emotion if scenario is not None else None
        expected_score = scenario.expected_score if scenario is not None else None
        self._observer.run_started(kind=kind, name=name)
        try:
            result = await self._analyzer.analyze(
                conversation=conversation, expect=expect
            )
        except Exception as exc:  # noqa: BLE001
            self._observer.run_item_failed(kind=kind, name=name, reason=str(exc))
            record = RunRecord.from_error(
                kind=kind,
                name=name,
                error=exc,
                scenario=scenario,
                expected=expected,
                expected_score=expected_score,
            )
        else:
            record = RunRecord.from_result(
                kind=kind,
                name=name,
                result=result,
                scenario=scenario,
                expected=expected,
                expected_score=expected_score,
            )
        self._observer.run_completed(
            kind=kind, name=name, errored=record.is_error, correct=record.correct
        )
        return record
