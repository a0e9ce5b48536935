import numpy as np
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Set, Tuple, Union

from .operators import (
  NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS,
  evaluate_constant, evaluate_binary_op, evaluate_unary_op,
  apply_binary_op, apply_unary_op, round_significant, is_finite
)
from .symbol import Symbol, normalize_bindings
from ...config import (
  EvaluationConfig, SimplifyConfig,
  DEFAULT_EVALUATION_CONFIG, DEFAULT_SIMPLIFY_CONFIG
)
from ...errors import EvalError, SymbolNotFound, UndefinedOperation
from ...logging_system import get_logger

Operand = Union['Node', int, float]


def _as_node(value: Any) -> Optional['Node']:
  """Coerce an operand for the operator overloads, None if unsupported"""
  if isinstance(value, Node):
    return value
  if isinstance(value, bool):
    return None
  if isinstance(value, Real):
    return ConstantNode(value)
  return None


def _require_node(value: Any, role: str) -> 'Node':
  if not isinstance(value, Node):
    raise TypeError(f"{role} must be a Node, got {type(value).__name__}")
  return value


def format_number(value: float) -> str:
  """Default numeric formatting: integral values print without '.0'"""
  if value.is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(value)


class Node(ABC):
  """
  Immutable expression tree node.

  Concrete variants are ConstantNode, VariableNode, BinaryOpNode (+ - * / ^)
  and NegNode. Equality is structural and every transformation builds a new
  tree; assigning to an attribute after construction raises AttributeError.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  # Constructors

  @classmethod
  def constant(cls, value: float) -> 'ConstantNode':
    return ConstantNode(value)

  @classmethod
  def variable(cls, name: Union[str, Symbol]) -> 'VariableNode':
    return VariableNode(name)

  # Tree structure

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_display_string(self) -> str:
    pass

  @abstractmethod
  def _structurally_equal(self, other: 'Node') -> bool:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def copy(self) -> 'Node':
    # Trees are immutable, sharing is safe
    return self

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache', 1 + sum(child.size() for child in self.children()))
    return self._size_cache

  def depth(self) -> int:
    """Maximum depth, leaves have depth 1"""
    return 1 + max((child.depth() for child in self.children()), default=0)

  def variables(self) -> Set[Symbol]:
    """Symbols referenced anywhere in the tree"""
    found: Set[Symbol] = set()
    for child in self.children():
      found |= child.variables()
    return found

  def is_constant(self) -> bool:
    return False

  def constant_value(self) -> float:
    raise TypeError(f"constant_value() called on non-constant node {self!r}")

  def symbol_if_variable(self) -> Optional[Symbol]:
    return None

  def __str__(self) -> str:
    return self.to_display_string()

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self is other:
      return True
    if type(self) is not type(other) or hash(self) != hash(other):
      return False
    return self._structurally_equal(other)

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  # Evaluation

  def evaluate(self, bindings: Optional[Mapping[Union[Symbol, str], float]] = None,
               config: Optional[EvaluationConfig] = None) -> float:
    """
    Evaluate the tree under a binding environment.

    Args:
        bindings: values for the variables, keyed by Symbol or name
        config: precision contract, defaults to 14 significant digits

    Raises:
        SymbolNotFound: a variable has no binding
        UndefinedOperation: a power evaluated to nan or +-inf
    """
    config = config or DEFAULT_EVALUATION_CONFIG
    values = {symbol: float(value) for symbol, value in normalize_bindings(bindings).items()}
    try:
      return float(self._evaluate(values, config))
    except EvalError as exc:
      get_logger().debug(f"evaluation of {self} failed: {exc}")
      raise

  def evaluate_batch(self, bindings: Optional[Mapping[Union[Symbol, str], Any]] = None,
                     config: Optional[EvaluationConfig] = None,
                     n_samples: Optional[int] = None) -> np.ndarray:
    """
    Element-wise evaluation over arrays of samples.

    Each bound value is a one-dimensional array (scalars are broadcast). All
    arrays must share one length; `n_samples` fixes the length when nothing
    is bound to an array. A power producing any nan or +-inf element raises
    UndefinedOperation.
    """
    config = config or DEFAULT_EVALUATION_CONFIG
    raw = normalize_bindings(bindings)
    arrays: Dict[Symbol, np.ndarray] = {}
    lengths = set()
    for symbol, value in raw.items():
      arr = np.asarray(value, dtype=np.float64)
      if arr.ndim > 1:
        raise ValueError(f"Binding for '{symbol.name}' must be one-dimensional, got shape {arr.shape}")
      if arr.ndim == 1:
        lengths.add(arr.shape[0])
      arrays[symbol] = arr
    if n_samples is not None:
      lengths.add(int(n_samples))
    if len(lengths) > 1:
      raise ValueError(f"Bound arrays have inconsistent lengths: {sorted(lengths)}")
    size = lengths.pop() if lengths else 1
    for symbol, arr in arrays.items():
      if arr.ndim == 0:
        arrays[symbol] = evaluate_constant(size, float(arr))
    try:
      return self._evaluate_batch(arrays, size, config)
    except EvalError as exc:
      get_logger().debug(f"batch evaluation of {self} failed: {exc}")
      raise

  @abstractmethod
  def _evaluate(self, bindings: Dict[Symbol, float], config: EvaluationConfig) -> float:
    pass

  @abstractmethod
  def _evaluate_batch(self, bindings: Dict[Symbol, np.ndarray], n_samples: int,
                      config: EvaluationConfig) -> np.ndarray:
    pass

  # Transformations

  def simplify(self) -> 'Node':
    """Single bottom-up simplification pass (see ExpressionSimplifier)"""
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_expression(self)

  def simplify_fully(self, config: Optional[SimplifyConfig] = None) -> 'Node':
    """Repeat simplify() until the tree stops changing"""
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_to_fixed_point(self, config or DEFAULT_SIMPLIFY_CONFIG)

  def expand(self) -> 'Node':
    """Distribute products over sums and differences (see ExpressionExpander)"""
    from ..utils.expander import ExpressionExpander
    return ExpressionExpander.expand_expression(self)

  # Operator overloads

  def pow(self, exponent: Operand) -> 'BinaryOpNode':
    other = _as_node(exponent)
    if other is None:
      raise TypeError(f"Unsupported exponent type: {type(exponent).__name__}")
    return BinaryOpNode('^', self, other)

  def _binary(self, operator: str, other: Any, reflected: bool = False):
    other_node = _as_node(other)
    if other_node is None:
      return NotImplemented
    if reflected:
      return BinaryOpNode(operator, other_node, self)
    return BinaryOpNode(operator, self, other_node)

  def __add__(self, other):
    return self._binary('+', other)

  def __radd__(self, other):
    return self._binary('+', other, reflected=True)

  def __sub__(self, other):
    return self._binary('-', other)

  def __rsub__(self, other):
    return self._binary('-', other, reflected=True)

  def __mul__(self, other):
    return self._binary('*', other)

  def __rmul__(self, other):
    return self._binary('*', other, reflected=True)

  def __truediv__(self, other):
    return self._binary('/', other)

  def __rtruediv__(self, other):
    return self._binary('/', other, reflected=True)

  def __pow__(self, other):
    return self._binary('^', other)

  def __rpow__(self, other):
    return self._binary('^', other, reflected=True)

  def __neg__(self) -> 'NegNode':
    return NegNode(self)


class VariableNode(Node):
  __slots__ = ('symbol',)

  node_type = NodeType.VARIABLE

  def __init__(self, symbol: Union[Symbol, str]):
    super().__init__()
    if isinstance(symbol, str):
      symbol = Symbol(symbol)
    if not isinstance(symbol, Symbol):
      raise TypeError(f"VariableNode expects a Symbol or str, got {type(symbol).__name__}")
    object.__setattr__(self, 'symbol', symbol)

  @property
  def name(self) -> str:
    return self.symbol.name

  def children(self) -> Tuple[Node, ...]:
    return ()

  def symbol_if_variable(self) -> Optional[Symbol]:
    return self.symbol

  def variables(self) -> Set[Symbol]:
    return {self.symbol}

  def to_display_string(self) -> str:
    return self.symbol.name

  def __repr__(self) -> str:
    return f"VariableNode({self.symbol.name!r})"

  def _evaluate(self, bindings, config):
    try:
      return bindings[self.symbol]
    except KeyError:
      raise SymbolNotFound(self.symbol) from None

  def _evaluate_batch(self, bindings, n_samples, config):
    try:
      return bindings[self.symbol]
    except KeyError:
      raise SymbolNotFound(self.symbol) from None

  def _structurally_equal(self, other) -> bool:
    return self.symbol == other.symbol

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.symbol))


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    if isinstance(value, bool) or not isinstance(value, Real):
      raise TypeError(f"ConstantNode expects a real number, got {type(value).__name__}")
    object.__setattr__(self, 'value', float(value))

  def children(self) -> Tuple[Node, ...]:
    return ()

  def is_constant(self) -> bool:
    return True

  def constant_value(self) -> float:
    return self.value

  def to_display_string(self) -> str:
    return format_number(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"

  def _evaluate(self, bindings, config):
    return self.value

  def _evaluate_batch(self, bindings, n_samples, config):
    return evaluate_constant(n_samples, self.value)

  def _structurally_equal(self, other) -> bool:
    return self.value == other.value

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))


class BinaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    object.__setattr__(self, 'operator', operator)
    object.__setattr__(self, 'op_type', BINARY_OP_MAP[operator])
    object.__setattr__(self, 'left', _require_node(left, 'left operand'))
    object.__setattr__(self, 'right', _require_node(right, 'right operand'))

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def to_display_string(self) -> str:
    return f"({self.left.to_display_string()} {OP_SYMBOLS[self.op_type]} {self.right.to_display_string()})"

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.operator!r}, {self.left!r}, {self.right!r})"

  def _evaluate(self, bindings, config):
    left_val = self.left._evaluate(bindings, config)
    right_val = self.right._evaluate(bindings, config)
    result = apply_binary_op(left_val, right_val, self.op_type)
    if self.op_type == OpType.POW and not is_finite(result):
      raise UndefinedOperation(left_val, right_val)
    return round_significant(result, config.significant_digits)

  def _evaluate_batch(self, bindings, n_samples, config):
    left_val = self.left._evaluate_batch(bindings, n_samples, config)
    right_val = self.right._evaluate_batch(bindings, n_samples, config)
    result = evaluate_binary_op(left_val, right_val, self.op_type)
    if self.op_type == OpType.POW and not is_finite(result):
      bad = ~np.isfinite(result)
      raise UndefinedOperation(left_val[bad], right_val[bad])
    return round_significant(result, config.significant_digits)

  def _structurally_equal(self, other) -> bool:
    return (self.op_type == other.op_type and
            self.left == other.left and
            self.right == other.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))


class NegNode(Node):
  __slots__ = ('operand',)

  node_type = NodeType.UNARY_OP
  operator = 'neg'

  def __init__(self, operand: Node):
    super().__init__()
    object.__setattr__(self, 'operand', _require_node(operand, 'operand'))

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def to_display_string(self) -> str:
    return f"-{self.operand.to_display_string()}"

  def __repr__(self) -> str:
    return f"NegNode({self.operand!r})"

  def _evaluate(self, bindings, config):
    return apply_unary_op(self.operand._evaluate(bindings, config), OpType.NEG)

  def _evaluate_batch(self, bindings, n_samples, config):
    return evaluate_unary_op(self.operand._evaluate_batch(bindings, n_samples, config), OpType.NEG)

  def _structurally_equal(self, other) -> bool:
    return self.operand == other.operand

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, OpType.NEG, hash(self.operand)))
