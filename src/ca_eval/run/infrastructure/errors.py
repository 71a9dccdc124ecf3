"""Error types raised by run infrastructure."""

from ca_eval.core.errors import CaEvalError


class RemoteBatchError(CaEvalError):
    """Raised when the server-side batch endpoint fails or its body is unreadable."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Failed to run remote {kind} batch: {reason}")
