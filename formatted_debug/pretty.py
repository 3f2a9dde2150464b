""" Sometimes you just need to see what's going on. """
from itertools import zip_longest

from .tables.string_grid import generate_string_grid
from .tables.adapters import nested_table

def _emit(lines, file):
	for line in lines: print(line, file=file)

def print_table(value, *, sort_keys=False, file=None):
	""" Draw any old value as a table, nested containers and all. """
	_emit(nested_table(value, sort_keys=sort_keys), file)

def print_grid(grid, *, file=None):
	""" Rows of anything at all; the cells get str() applied. """
	_emit(generate_string_grid([[str(cell) for cell in row] for row in grid]), file)

def print_columnar(*columns, file=None):
	""" Columns side by side, with row numbers down the left. Short columns get blank cells. """
	margin = range(max(map(len, columns), default=0))
	print_grid(zip_longest(margin, *columns, fillvalue=''), file=file)
