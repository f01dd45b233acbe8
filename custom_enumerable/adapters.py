"""
Ready-made sequences for the Enumerable mixin:
one over any Python iterable, one over a chain of cons cells.
"""
from types import MappingProxyType
from typing import Iterable, Reversible, Mapping
from .enumerable import Enumerable

class Listing[T](Enumerable[T]):
	""" The items of any iterable, captured once and visited in order. """
	
	def __init__(self, items: Iterable[T] = ()):
		self._items = tuple(items)
	
	def __repr__(self): return "Listing(%r)" % (list(self._items),)
	def __len__(self): return len(self._items)
	
	def __eq__(self, other):
		if isinstance(other, Listing): return self._items == other._items
		if isinstance(other, (list, tuple)): return self._items == tuple(other)
		return NotImplemented
	
	def for_each(self, visit):
		for item in self._items:
			visit(item)

CONS = "cons"
NIL_TAG = "nil"
NIL = MappingProxyType({"": NIL_TAG})

class ConsList[T](Enumerable[T]):
	"""
	A singly-linked list made of tagged dictionaries:
	{"":"cons", "head":..., "tail":...} ending in {"":"nil"}.
	"""
	
	def __init__(self, cells: Mapping = None):
		self._cells = NIL if cells is None else cells
	
	@classmethod
	def of(cls, items: Reversible[T]) -> "ConsList[T]":
		cells = NIL
		for head in reversed(items):
			cells = {"": CONS, "head": head, "tail": cells}
		return cls(cells)
	
	def for_each(self, visit):
		cells = self._cells
		while cells[""] == CONS:
			visit(cells["head"])
			cells = cells["tail"]
		assert cells[""] == NIL_TAG, cells
