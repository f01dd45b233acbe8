"""
The mixin proper. Compose it onto anything with a for_each method
and it gains the usual sequence operations, every one of which
is some traversal by way of for_each.
"""
from typing import Any, Callable, Optional
from .ontology import NOTHING, Traversable
from .reduction import COMBINER, REDUCE_CALL, Fold, resolve_reduce_call

class _Halt(BaseException):
	""" Carries a result out of a traversal that has seen enough. """
	def __init__(self, result):
		self.result = result

def _until_halted(sequence: Traversable, visit, otherwise):
	try: sequence.for_each(visit)
	except _Halt as halt: return halt.result
	return otherwise

def _lesser(accumulator, element):
	return element if accumulator > element else accumulator

def _greater(accumulator, element):
	return element if accumulator < element else accumulator

class Enumerable[T](Traversable[T]):
	
	def map[U](self, transform: Callable[[T], U]) -> list[U]:
		result = []
		self.for_each(lambda element: result.append(transform(element)))
		return result
	
	def find(self, predicate: Callable[[T], Any], default=NOTHING):
		"""
		The first element satisfying the predicate, or else the default.
		The default comes back exactly as given: if it happens to be
		a callable, it is returned, not called.
		"""
		def visit(element):
			if predicate(element): raise _Halt(element)
		return _until_halted(self, visit, default)
	
	def find_all(self, predicate: Callable[[T], Any]) -> list[T]:
		result = []
		def visit(element):
			if predicate(element): result.append(element)
		self.for_each(visit)
		return result
	
	def first(self):
		def visit(element): raise _Halt(element)
		return _until_halted(self, visit, NOTHING)
	
	def reduce(self, *args, combine: Optional[COMBINER] = None):
		"""
		reduce(seed, fn), reduce(fn), reduce(seed, operation), or reduce(operation),
		where the function may also come as combine=fn. See resolve_reduce_call.
		"""
		return self.fold(resolve_reduce_call(args, combine))
	
	def fold(self, call: REDUCE_CALL):
		return Fold(self)(call)
	
	def min(self):
		return self.reduce(combine=_lesser)
	
	def max(self):
		return self.reduce(combine=_greater)
