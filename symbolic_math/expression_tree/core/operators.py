import numpy as np
import numba
from enum import IntEnum
from typing import Optional, Union

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}

# Reverse mapping, used when rendering
OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}

# error_model='numpy' keeps IEEE-754 semantics: x / 0 gives +-inf or nan
# instead of raising ZeroDivisionError. No fastmath, the nan/inf checks
# after Pow depend on it.

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  raise ValueError("unsupported binary operator")

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  raise ValueError("unsupported unary operator")


def apply_binary_op(left: float, right: float, op_type: OpType) -> float:
  """Scalar IEEE-754 arithmetic for one operator, no rounding."""
  return float(evaluate_binary_op(float(left), float(right), op_type))


def apply_unary_op(operand: float, op_type: OpType) -> float:
  return float(evaluate_unary_op(float(operand), op_type))


def round_significant(values: Union[float, np.ndarray],
                      digits: Optional[int]) -> Union[float, np.ndarray]:
  """
  Round to `digits` significant decimal digits.

  Works element-wise on arrays and returns a float for scalar input. Zero,
  nan and +-inf pass through unchanged, as do magnitudes so small that the
  scale factor would overflow (below roughly 1e-290). `digits=None` returns
  the input unchanged.
  """
  if digits is None:
    return values
  arr = np.asarray(values, dtype=np.float64)
  with np.errstate(all='ignore'):
    magnitude = np.floor(np.log10(np.abs(arr)))
    exponent = (digits - 1) - magnitude
    # Scale by non-negative powers of ten only, 10**-k is inexact in float64
    scale = np.power(10.0, np.abs(exponent))
    rounded = np.where(exponent >= 0,
                       np.round(arr * scale) / scale,
                       np.round(arr / scale) * scale)
  keep = np.isfinite(arr) & (arr != 0) & np.isfinite(scale) & np.isfinite(rounded)
  result = np.where(keep, rounded, arr)
  if result.ndim == 0:
    return float(result)
  return result


def is_finite(values: Union[float, np.ndarray]) -> bool:
  return bool(np.all(np.isfinite(values)))
