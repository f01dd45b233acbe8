"""
The two most-fundamental notions here live apart from the rest
to avoid circular imports: the distinguished absent value,
and the one capability a sequence must offer.
"""
from abc import ABC, abstractmethod
from typing import Callable

class _Nothing:
	"""
	The distinguished absent result. Distinct from every element value,
	and in particular from None, which is a perfectly good element.
	"""
	_instance = None
	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance
	def __repr__(self): return "NOTHING"
	def __bool__(self): return False
	def __reduce__(self): return (_Nothing, ())

NOTHING = _Nothing()

class Traversable[T](ABC):
	@abstractmethod
	def for_each(self, visit: Callable[[T], object]) -> None:
		""" Call visit(element) once per element, in order, then return. """
		raise NotImplementedError(type(self))
