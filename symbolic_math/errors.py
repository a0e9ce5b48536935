"""
Evaluation errors for symbolic_math.

Construction, simplification and expansion never fail on well-formed trees;
only evaluation reports data-dependent failures, all derived from EvalError.
"""

from typing import Any, Optional


class EvalError(Exception):
    """Base class for failures raised while evaluating an expression"""


class SymbolNotFound(EvalError, KeyError):
    """A variable was reached that has no value in the bindings"""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"symbol not found in bindings: {self.symbol}"


class UndefinedOperation(EvalError, ArithmeticError):
    """A power produced a NaN or infinite result"""

    def __init__(self, base: Optional[Any] = None, exponent: Optional[Any] = None):
        self.base = base
        self.exponent = exponent
        super().__init__(base, exponent)

    def __str__(self) -> str:
        if self.base is None and self.exponent is None:
            return "undefined operation"
        return f"undefined operation: {self.base} ^ {self.exponent} is not finite"
