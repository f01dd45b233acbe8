"""
Everything about reduce that is not a one-line traversal.

The loose call shapes of reduce (seed or not, function or operation-name)
resolve into one of four explicit variants, and a visitor folds each
variant over a sequence. Callers who know which shape they mean can build
the variant themselves and skip the guesswork.
"""
from typing import Any, Callable, NamedTuple, Optional, Sequence
from boozetools.support.foundation import Visitor
from .ontology import NOTHING
from .operation import Operation, as_operation

NEED_OPERATION_OR_BLOCK = "you must provide an operation or a block"
NOT_BOTH = "you must provide either an operation symbol or a block, not both"
MUST_BE_SYMBOL = "the operation provided must be a symbol"

COMBINER = Callable[[Any, Any], Any]

class ArgumentError(TypeError):
	""" Raised for a combination of arguments to reduce that makes no sense. """

class SeedAndCombiner(NamedTuple):
	seed: Any
	combine: COMBINER

class CombinerOnly(NamedTuple):
	combine: COMBINER

class SeedAndOperation(NamedTuple):
	seed: Any
	operation: Operation

class OperationOnly(NamedTuple):
	operation: Operation

REDUCE_CALL = SeedAndCombiner | CombinerOnly | SeedAndOperation | OperationOnly

def _operation(it) -> Operation:
	op = as_operation(it)
	if op is None: raise ArgumentError(MUST_BE_SYMBOL)
	return op

def resolve_reduce_call(args: Sequence, combine: Optional[COMBINER] = None) -> REDUCE_CALL:
	"""
	Work out which variant a reduce(*args, combine=...) call means.
	
	With a combining function, a lone positional argument is the seed.
	Without one, a lone positional argument is the operation,
	or else the combining function itself if it is callable.
	"""
	if len(args) > 2:
		raise TypeError("reduce takes at most 2 positional arguments (%d given)"%len(args))
	if not args and combine is None:
		raise ArgumentError(NEED_OPERATION_OR_BLOCK)
	if len(args) == 2:
		seed, operation = args
		has_seed, has_operation = True, True
	elif len(args) == 1 and combine is not None:
		if as_operation(args[0]) is not None: raise ArgumentError(NOT_BOTH)
		seed, operation = args[0], None
		has_seed, has_operation = True, False
	elif len(args) == 1:
		seed, operation = None, args[0]
		has_seed, has_operation = False, True
	else:
		seed, operation = None, None
		has_seed, has_operation = False, False
	
	if has_operation and combine is not None:
		raise ArgumentError(NOT_BOTH)
	if has_operation:
		op = as_operation(operation)
		if op is not None:
			return SeedAndOperation(seed, op) if has_seed else OperationOnly(op)
		elif callable(operation):
			combine = operation
		else:
			raise ArgumentError(MUST_BE_SYMBOL)
	return SeedAndCombiner(seed, combine) if has_seed else CombinerOnly(combine)

def fold_from(sequence, accumulator, combine: COMBINER, skip_first=False):
	""" Thread the accumulator through every element (except maybe the first) in order. """
	skipping = skip_first
	def visit(element):
		nonlocal accumulator, skipping
		if skipping: skipping = False
		else: accumulator = combine(accumulator, element)
	sequence.for_each(visit)
	return accumulator

class Fold(Visitor):
	"""
	Folds one reduce-variant over a sequence.
	
	Without a seed, the sequence's first element seeds the accumulator
	and folding starts at the second. An empty sequence then gives NOTHING,
	and the combining function never runs.
	"""
	
	def __init__(self, sequence: "Enumerable"):
		self._sequence = sequence
	
	def __call__(self, call: REDUCE_CALL):
		return self.visit(call)
	
	def _unseeded(self, combine: COMBINER):
		accumulator = self._sequence.first()
		if accumulator is NOTHING: return NOTHING
		return fold_from(self._sequence, accumulator, combine, skip_first=True)
	
	def visit_SeedAndCombiner(self, call: SeedAndCombiner):
		return fold_from(self._sequence, call.seed, call.combine)
	
	def visit_CombinerOnly(self, call: CombinerOnly):
		return self._unseeded(call.combine)
	
	def visit_SeedAndOperation(self, call: SeedAndOperation):
		return fold_from(self._sequence, call.seed, _operation(call.operation).apply)
	
	def visit_OperationOnly(self, call: OperationOnly):
		return self._unseeded(_operation(call.operation).apply)
