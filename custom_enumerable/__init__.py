"""
Generic sequence operations for anything that can visit its own elements in order.
"""
from .ontology import NOTHING, Traversable
from .operation import Operation, as_operation
from .reduction import (
	ArgumentError, SeedAndCombiner, CombinerOnly, SeedAndOperation, OperationOnly,
	resolve_reduce_call,
)
from .enumerable import Enumerable
from .adapters import Listing, ConsList
