"""
Calculator handler.

Integer add/sub/mul/mod are computed natively; division and free-form
expressions go to the arbitrary-precision evaluator.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from functools import reduce

from ..core.exceptions import ArithmeticFailure, InvalidArgumentError
from ..core.interfaces.evaluator import IExpressionEvaluator
from ..core.interfaces.logger import ILogger
from .preconditions import PreconditionChecker

USAGE = """\
Usage:
  opskit calc EXPRESSION      Evaluate a floating-point expression, e.g. "2.5 * (3 + 1)"
  opskit calc OP A B [C]      Apply OP to two or three numbers

Operations:
  add, sub, mul, mod          integer arithmetic
  div                         floating-point division"""

_INTEGER = re.compile(r"^[+-]?\d+$")
_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def _truncated_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as shell $(( a % b )) gives."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


INTEGER_OPS: dict[str, Callable[[int, int], int]] = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
    "mul": lambda a, b: a * b,
    "mod": _truncated_mod,
}

OPERATIONS = (*INTEGER_OPS, "div")


class CalcService:
    """
    Evaluates `calc` invocations.

    Usage:
        service = CalcService(evaluator, checker, logger, scale=6)
        service.apply("add", ["5", "3"])   # "8"
        service.apply("div", ["6", "3"])   # "2.000000"
    """

    def __init__(
        self,
        evaluator: IExpressionEvaluator,
        checker: PreconditionChecker,
        logger: ILogger,
        scale: int = 6,
    ) -> None:
        self._evaluator = evaluator
        self._checker = checker
        self._logger = logger
        self._scale = scale

    def run(self, args: Sequence[str]) -> str | None:
        """
        Dispatch on argument count.

        Returns:
            The result text, or None when there is nothing to compute
            (the caller prints usage)
        """
        if not args:
            return None
        if len(args) == 1:
            return self.evaluate(args[0])
        op, *operands = args
        return self.apply(op, operands)

    def evaluate(self, expression: str) -> str:
        """Evaluate a free-form expression with the external evaluator."""
        if not expression.strip():
            raise InvalidArgumentError("Expression is empty", argument="EXPRESSION")
        self._checker.require(self._evaluator.tool)
        self._logger.debug("calc: evaluating %r", expression)
        return self._evaluator.evaluate(expression, self._scale)

    def apply(self, op: str, operands: Sequence[str]) -> str:
        """Apply a named operation to two or three operands."""
        op = op.lower()
        if op not in OPERATIONS:
            raise InvalidArgumentError(
                f"Unknown operation {op!r} (expected one of: {', '.join(OPERATIONS)})",
                argument="OP",
                value=op,
            )
        if len(operands) not in (2, 3):
            raise InvalidArgumentError(
                f"{op} takes 2 or 3 numbers, got {len(operands)}",
                argument="OP",
                value=op,
            )

        if op == "div":
            return self._divide(operands)

        numbers = [self._parse_integer(v) for v in operands]
        if op == "mod" and any(n == 0 for n in numbers[1:]):
            self._logger.warning("calc: modulo by zero %s", operands)
            raise ArithmeticFailure("Division by zero")
        return str(reduce(INTEGER_OPS[op], numbers))

    def _divide(self, operands: Sequence[str]) -> str:
        for value in operands:
            if not _DECIMAL.match(value):
                raise InvalidArgumentError(f"Not a number: {value!r}", argument="NUMBER", value=value)
        if any(float(v) == 0 for v in operands[1:]):
            self._logger.warning("calc: division by zero %s", list(operands))
            raise ArithmeticFailure("Division by zero")

        self._checker.require(self._evaluator.tool)
        expression = " / ".join(f"({v})" for v in operands)
        return self._evaluator.evaluate(expression, self._scale)

    @staticmethod
    def _parse_integer(value: str) -> int:
        if not _INTEGER.match(value):
            raise InvalidArgumentError(f"Not an integer: {value!r}", argument="NUMBER", value=value)
        return int(value)
