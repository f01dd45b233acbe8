"""
Apply one sequence operation to the numbers on the command line.

{0}

For example:

    custom-enumerable max 1 2 3 4 -1 -4 -10

prints 4, and

    custom-enumerable reduce -o multiply -s 1 2 3 4

prints 24.
"""
import sys, argparse
from .diagnostics import Report

OPERATIONS = ("first", "min", "max", "reduce")

parser = argparse.ArgumentParser(
	prog="custom-enumerable",
	description="Apply a sequence operation to some numbers.",
)
parser.add_argument("operation", choices=OPERATIONS, help="which operation to apply.")
parser.add_argument("numbers", nargs="*", help="the elements of the sequence, in order.")
parser.add_argument('-s', "--seed", help="Initial accumulator for reduce. Without one, the first number is used.")
parser.add_argument('-o', "--operation-name", default="add", help="Binary operation for reduce, such as add or multiply. (Default: add)")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on. Repeat for even more.")

def parse_number(text:str):
	try: return int(text)
	except ValueError: return float(text)

def _parse_all(texts, report:Report) -> list:
	numbers = []
	for text in texts:
		try: numbers.append(parse_number(text))
		except ValueError: report.not_a_number(text)
	return numbers

def run(args):
	from .adapters import Listing
	from .reduction import ArgumentError
	report = Report(verbose=args.verbose)
	items = Listing(_parse_all(args.numbers, report))
	seed = _parse_all([args.seed], report) if args.seed is not None else []
	if report.sick():
		report.complain_to_console()
		return 1
	report.info("Sequence:", items)
	if args.operation == "reduce":
		report.info("Reducing with", args.operation_name, "from seed", seed[0] if seed else "(first element)")
		try: result = items.reduce(*seed, args.operation_name)
		except ArgumentError as ex:
			report.bad_reduction(ex)
			report.complain_to_console()
			return 1
	else:
		result = getattr(items, args.operation)()
	print(result)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_intermixed_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
