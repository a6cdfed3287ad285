"""
bc expression evaluator.
"""

from ..core.exceptions import ArithmeticFailure, ExternalToolError
from ..core.interfaces.evaluator import IExpressionEvaluator
from ..core.interfaces.process import IProcessRunner


class BcEvaluator(IExpressionEvaluator):
    """
    Evaluates expressions with `bc -l`.

    bc reports most errors on stderr with exit status 0, so stderr output
    is treated as failure regardless of the exit code.
    """

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def evaluate(self, expression: str, scale: int) -> str:
        result = self._runner.run(["bc", "-l"], input=f"scale={scale}\n{expression}\n")
        stderr = result.stderr.strip()
        if "divide by zero" in stderr.lower():
            raise ArithmeticFailure("Division by zero", context={"expression": expression})
        if stderr or not result.ok:
            raise ExternalToolError(
                f"bc could not evaluate {expression!r}",
                argv=result.argv,
                returncode=result.returncode,
                stderr=stderr,
            )
        output = normalize_bc_output(result.stdout)
        if not output:
            raise ExternalToolError(f"bc produced no result for {expression!r}", argv=result.argv)
        return output


def normalize_bc_output(output: str) -> str:
    """
    Join bc's backslash line continuations and add the leading zero bc omits.

    >>> normalize_bc_output(".500000\\n")
    '0.500000'
    >>> normalize_bc_output("-.25\\n")
    '-0.25'
    """
    joined = output.replace("\\\n", "")
    lines = []
    for line in joined.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("."):
            line = "0" + line
        elif line.startswith("-."):
            line = "-0" + line[1:]
        lines.append(line)
    return "\n".join(lines)
