"""ScoreExpectation — a threshold predicate over an overall compliance score."""

import operator
import re
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel

type Comparison = Literal[">", ">=", "<", "<=", "=="]

_COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
}
_EXPRESSION = re.compile(r"^\s*(>=|<=|==|>|<)\s*(\d+(?:\.\d+)?)\s*%?\s*$")


class ScoreExpectation(BaseModel, frozen=True):
    """Expected range for ``overall_compliance_score``, written like ``> 90``."""

    comparison: Comparison
    threshold: float

    @classmethod
    def parse(cls, expression: str) -> "ScoreExpectation":
        """Parse an expression such as ``"> 90"`` or ``"<=30%"``.

        Raises:
            ValueError: if the expression is not a comparison against a number.
        """
        match = _EXPRESSION.match(expression)
        if match is None:
            raise ValueError(f"not a score expectation: {expression!r}")
        return cls(comparison=match.group(1), threshold=float(match.group(2)))

    def is_met_by(self, score: float) -> bool:
        return _COMPARATORS[self.comparison](score, self.threshold)

    def __str__(self) -> str:
        return f"{self.comparison} {self.threshold:g}"
