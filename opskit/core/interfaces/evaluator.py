"""Arbitrary-precision expression evaluator interface (calc)."""

from abc import ABC, abstractmethod


class IExpressionEvaluator(ABC):
    """Evaluates arithmetic expressions as decimal text."""

    tool: str = "bc"

    @abstractmethod
    def evaluate(self, expression: str, scale: int) -> str:
        """
        Evaluate an expression.

        Args:
            expression: Arithmetic expression, e.g. "6 / 3"
            scale: Digits kept after the decimal point

        Returns:
            The result as decimal text, e.g. "2.000000"

        Raises:
            ArithmeticFailure: On division by zero
            ExternalToolError: If the evaluator rejects the expression
        """
        pass
