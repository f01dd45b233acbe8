import unittest

from custom_enumerable import Enumerable, Listing, ConsList, NOTHING

class Counted(Enumerable):
	""" Remembers how many elements a traversal actually visited. """
	def __init__(self, *items):
		self.items = items
		self.visited = 0
	def for_each(self, visit):
		for item in self.items:
			self.visited += 1
			visit(item)

class Careless(Enumerable):
	""" Guards every visit with a broad handler and carries on regardless. """
	def __init__(self, *items):
		self.items = items
	def for_each(self, visit):
		for item in self.items:
			try: visit(item)
			except Exception: pass

class Weighed:
	""" Compares by weight alone, so equal-weight instances are distinguishable by identity. """
	def __init__(self, weight): self.weight = weight
	def __lt__(self, other): return self.weight < other.weight
	def __gt__(self, other): return self.weight > other.weight

class Boom(Exception):
	pass

def explode(*args):
	raise Boom(args)

class MapTests(unittest.TestCase):
	
	def test_doubles(self):
		self.assertEqual([2, 4, 6, 8], Listing([1, 2, 3, 4]).map(lambda n: n * 2))
	
	def test_empty(self):
		self.assertEqual([], Listing().map(lambda n: n * 2))
	
	def test_exception_propagates(self):
		with self.assertRaises(Boom):
			Listing([1, 2]).map(explode)

class FindTests(unittest.TestCase):
	
	def test_finds_by_predicate(self):
		self.assertEqual(3, Listing([1, 2, 3, 4]).find(lambda e: e == 3))
	
	def test_default_when_nothing_matches(self):
		self.assertEqual(0, Listing([1, 2, 3, 4]).find(lambda e: e < 1, 0))
	
	def test_nothing_when_nothing_matches(self):
		self.assertIs(NOTHING, Listing([1, 2, 3, 4]).find(lambda e: e == 10))
	
	def test_nothing_when_empty(self):
		self.assertIs(NOTHING, Listing().find(lambda e: e == 10))
	
	def test_finds_none(self):
		items = Listing([True, False, None, 10])
		self.assertIsNone(items.find(lambda e: e is None, True))
	
	def test_callable_default_is_not_called(self):
		default = lambda: 0
		self.assertIs(default, Listing([1, 2, 3, 4]).find(lambda e: e < 1, default))
	
	def test_stops_at_first_match(self):
		items = Counted(1, 2, 3, 4)
		items.find(lambda e: e == 2)
		self.assertEqual(2, items.visited)
	
	def test_exception_propagates(self):
		items = Counted(1, 2, 3)
		with self.assertRaises(Boom):
			items.find(explode)
		self.assertEqual(1, items.visited)

class FindAllTests(unittest.TestCase):
	
	def test_greater_than_two(self):
		self.assertEqual([3, 4], Listing([1, 2, 3, 4]).find_all(lambda e: e > 2))
	
	def test_finds_nothing(self):
		self.assertEqual([], Listing([1, 2, 3, 4]).find_all(lambda e: e > 4))

class FirstTests(unittest.TestCase):
	
	def test_first(self):
		self.assertEqual(1, Listing([1, 2, 3, 4]).first())
	
	def test_empty(self):
		self.assertIs(NOTHING, Listing().first())
	
	def test_none_is_an_element(self):
		self.assertIsNone(Listing([None, 1]).first())
	
	def test_early_exit_survives_a_broad_handler(self):
		self.assertEqual(1, Careless(1, 2, 3).first())
		self.assertEqual(2, Careless(1, 2, 3).find(lambda e: e == 2))
	
	def test_visits_only_one(self):
		items = Counted(1, 2, 3, 4)
		items.first()
		self.assertEqual(1, items.visited)

class MinMaxTests(unittest.TestCase):
	
	def test_max(self):
		self.assertEqual(4, Listing([1, 2, 3, 4, -1, -4, -10]).max())
		self.assertEqual(1, Listing([1]).max())
		self.assertIs(NOTHING, Listing().max())
	
	def test_min(self):
		self.assertEqual(-10, Listing([1, 2, 3, 4, -1, -4, -10]).min())
		self.assertEqual(1, Listing([1]).min())
		self.assertIs(NOTHING, Listing().min())
	
	def test_earliest_of_equals_wins(self):
		a, b, c = Weighed(5), Weighed(5), Weighed(1)
		self.assertIs(a, Listing([a, b, c]).max())
		self.assertIs(c, Listing([a, b, c]).min())
		d, e = Weighed(1), Weighed(9)
		self.assertIs(c, Listing([c, d, e]).min())

	def test_none_alone_is_its_own_min_and_max(self):
		self.assertIsNone(Listing([None]).min())
		self.assertIsNone(Listing([None]).max())

class NothingTests(unittest.TestCase):
	
	def test_is_falsy_and_distinct_from_none(self):
		self.assertFalse(NOTHING)
		self.assertIsNot(None, NOTHING)
		self.assertEqual("NOTHING", repr(NOTHING))
	
	def test_is_a_singleton(self):
		self.assertIs(NOTHING, type(NOTHING)())

class AdapterTests(unittest.TestCase):
	
	def test_cons_list_agrees_with_listing(self):
		items = [1, 2, 3, 4, -1, -4, -10]
		cons, listing = ConsList.of(items), Listing(items)
		for name in ("first", "min", "max"):
			with self.subTest(name):
				self.assertEqual(getattr(listing, name)(), getattr(cons, name)())
		self.assertEqual(listing.map(abs), cons.map(abs))
		self.assertEqual(listing.find_all(lambda e: e < 0), cons.find_all(lambda e: e < 0))
		self.assertEqual(listing.reduce("add"), cons.reduce("add"))
	
	def test_empty_cons_list(self):
		self.assertIs(NOTHING, ConsList().first())
		self.assertEqual([], ConsList.of([]).map(str))
	
	def test_empty_cons_list_terminator_is_read_only(self):
		a, b = ConsList(), ConsList()
		with self.assertRaises(TypeError):
			a._cells[""] = "cons"
		self.assertIs(NOTHING, b.first())
		self.assertIs(NOTHING, ConsList.of([]).first())
	
	def test_listing_equality(self):
		self.assertEqual(Listing([1, 2]), [1, 2])
		self.assertEqual(Listing([1, 2]), Listing((1, 2)))
		self.assertNotEqual(Listing([1, 2]), [2, 1])
		self.assertEqual(2, len(Listing(iter([1, 2]))))

if __name__ == '__main__':
	unittest.main()
