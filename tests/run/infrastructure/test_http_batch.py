"""Tests for HttpRemoteBatchSource against a mocked HTTP transport."""

import httpx
import pytest

from ca_eval.run.infrastructure.errors import RemoteBatchError
from ca_eval.run.infrastructure.http_batch import HttpRemoteBatchSource
from tests.api.transport import json_handler, make_client


class TestHttpRemoteBatchSource:
    async def test_posts_to_kind_endpoint_and_parses_entries(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": [
                        {
                            "name": "Happy",
                            "text": "Great!",
                            "expected": "joy",
                            "result": "joy",
                            "confidence": 0.9,
                            "correct": True,
                            "extra": "ignored",
                        }
                    ],
                },
            )

        async with make_client(handler) as client:
            entries = await HttpRemoteBatchSource(client=client).run(kind="emotions")

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/testing/batch/emotions"
        assert len(entries) == 1
        assert entries[0].result == "joy"
        assert entries[0].confidence == 0.9

    async def test_error_status_raises_remote_batch_error(self) -> None:
        async with make_client(json_handler({}, status_code=500)) as client:
            with pytest.raises(RemoteBatchError) as exc_info:
                await HttpRemoteBatchSource(client=client).run(kind="compliance")

        assert exc_info.value.kind == "compliance"
        assert exc_info.value.reason == "Server error occurred"

    async def test_non_list_payload_raises(self) -> None:
        async with make_client(json_handler({"data": {"ok": True}})) as client:
            with pytest.raises(RemoteBatchError, match="not a list"):
                await HttpRemoteBatchSource(client=client).run(kind="emotions")

    async def test_malformed_entry_raises(self) -> None:
        async with make_client(json_handler([{"confidence": 4}])) as client:
            with pytest.raises(RemoteBatchError, match="malformed entry"):
                await HttpRemoteBatchSource(client=client).run(kind="emotions")
