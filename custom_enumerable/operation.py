"""
The closed set of binary operations that reduce accepts by name,
and the table which gives each one its meaning.
"""
import operator
from enum import Enum
from typing import Any, Callable, Optional

class Operation(Enum):
	ADD = "add"
	SUBTRACT = "subtract"
	MULTIPLY = "multiply"
	DIVIDE = "divide"
	FLOOR_DIVIDE = "floor_divide"
	MODULO = "modulo"
	POWER = "power"
	MINIMUM = "minimum"
	MAXIMUM = "maximum"
	AND = "and"
	OR = "or"
	
	def apply(self, accumulator, element):
		return BINARY[self](accumulator, element)

BINARY: dict[Operation, Callable[[Any, Any], Any]] = {
	Operation.ADD          : operator.add,
	Operation.SUBTRACT     : operator.sub,
	Operation.MULTIPLY     : operator.mul,
	Operation.DIVIDE       : operator.truediv,
	Operation.FLOOR_DIVIDE : operator.floordiv,
	Operation.MODULO       : operator.mod,
	Operation.POWER        : operator.pow,
	Operation.MINIMUM      : min,
	Operation.MAXIMUM      : max,
	Operation.AND          : lambda a, b: a and b,
	Operation.OR           : lambda a, b: a or b,
}

_BY_NAME = {op.value: op for op in Operation}

def as_operation(it) -> Optional[Operation]:
	"""
	The Operation that `it` names, or None if it names none.
	Accepts a member or its name in any letter-case, so "add" and "ADD" both work,
	but "+" is not a name.
	"""
	if isinstance(it, Operation): return it
	if isinstance(it, str): return _BY_NAME.get(it.lower())
	return None
