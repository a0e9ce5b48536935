from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Symbol:
  """Name of a variable. Two symbols with the same name are interchangeable."""

  name: str

  def __post_init__(self):
    if not isinstance(self.name, str):
      raise TypeError(f"Symbol name must be a str, got {type(self.name).__name__}")
    if not self.name:
      raise ValueError("Symbol name must not be empty")

  def __str__(self) -> str:
    return self.name


def as_symbol(key: Union['Symbol', str]) -> Symbol:
  if isinstance(key, Symbol):
    return key
  if isinstance(key, str):
    return Symbol(key)
  raise TypeError(f"Binding keys must be Symbol or str, got {type(key).__name__}")


def normalize_bindings(bindings: Optional[Mapping[Union[Symbol, str], Any]]) -> Dict[Symbol, Any]:
  """
  Build a Symbol-keyed copy of a binding environment.

  Plain string keys are accepted and turned into symbols. The caller's mapping
  is never modified.

  Raises:
      ValueError: if two keys name the same symbol (e.g. 'x' and Symbol('x'))
  """
  if not bindings:
    return {}
  normalized: Dict[Symbol, Any] = {}
  for key, value in bindings.items():
    symbol = as_symbol(key)
    if symbol in normalized:
      raise ValueError(f"Duplicate binding for symbol '{symbol.name}'")
    normalized[symbol] = value
  return normalized
