"""Tests for BatchRun."""

from ca_eval.analysis.infrastructure.errors import AnalysisFailure
from ca_eval.run.domain.batch import BatchRun
from ca_eval.run.domain.record import RunRecord
from tests.analysis.results import emotion_result


class TestBatchRun:
    def test_failed_records_lists_only_errors(self) -> None:
        ok = RunRecord.from_result(kind="batch", name="ok", result=emotion_result())
        failed = RunRecord.from_error(
            kind="batch", name="bad", error=AnalysisFailure(reason="x")
        )

        batch = BatchRun(run_id="run-1", records=[ok, failed, ok])

        assert batch.failed_records == [failed]
        assert batch.error is None

    def test_whole_batch_error(self) -> None:
        batch = BatchRun(run_id="run-2", records=[], error="Server error occurred")

        assert batch.records == []
        assert batch.failed_records == []
