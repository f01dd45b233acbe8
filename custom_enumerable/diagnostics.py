import sys
from typing import Any

class Report:
	""" Collects whatever went wrong, and says so on stderr when asked. """
	_issues : list[str]
	
	def __init__(self, *, verbose:int = 0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self): return tuple(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(str(it))
	
	def info(self, *args, level=1):
		if self._verbose >= level:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for text in self._issues:
			print(text, file=sys.stderr)
	
	# Methods the command line calls:
	def not_a_number(self, text:str):
		self.issue("This does not look like a number: %r" % text)
	
	def bad_reduction(self, ex:Exception):
		self.issue("Reduce could not make sense of its arguments: %s" % ex)
