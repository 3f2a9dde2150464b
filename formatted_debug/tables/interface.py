"""
This file aggregates the constants, the abstract base class, and the exception types
which the table machinery deals in.

The glyphs are fixed. There is exactly one look, the heavy-line box-drawing set, and
nothing about it is configurable. If you want a different look, you want a different
library; they are plentiful.

A word on the exceptions: everything the engine raises descends from TableError,
which is a ValueError because in every case somebody handed over data that can't
be drawn. The coordinate error is also an IndexError, since that's what it would
have been if Python strings complained about out-of-range slices. (They don't. They
silently truncate, which would corrupt the picture without telling anyone.)
"""

from abc import ABC, abstractmethod

TOP_LEFT, TOP_TEE, TOP_RIGHT = '\u250f', '\u2533', '\u2513'  # ┏ ┳ ┓
LEFT_TEE, CROSS, RIGHT_TEE = '\u2523', '\u254b', '\u252b'  # ┣ ╋ ┫
BOTTOM_LEFT, BOTTOM_TEE, BOTTOM_RIGHT = '\u2517', '\u253b', '\u251b'  # ┗ ┻ ┛
VERTICAL = '\u2503'  # ┃
HORIZONTAL = '\u2501'  # ━
BLANK = ' '

MINIMUM_SIZE = 2 # One unit of border on either side; no room for content.
LINE_BREAK = '\n'

EMPTY_TABLE = (TOP_LEFT+TOP_RIGHT, BOTTOM_LEFT+BOTTOM_RIGHT)


class TableError(ValueError):
	""" Base class of all exceptions arising from the table machinery. """

class GridSizeError(TableError):
	"""
	Raised if a grid is asked to draw a column or row too small to hold its own borders,
	or an axis with nothing on it at all.
	Parameters are:
		the axis ('widths' or 'heights'),
		the index of the offending entry (None when the axis is empty),
		the offending value.
	"""
	def __init__(self, axis, index, value):
		super().__init__(axis, index, value)
		self.axis, self.index, self.value = axis, index, value

	def __str__(self):
		if self.index is None: return "%s must not be empty"%self.axis
		return "%s[%d] is %r, but every size must be an integer of at least %d"%(self.axis, self.index, self.value, MINIMUM_SIZE)

class RaggedTableError(TableError):
	"""
	Raised when the rows of a table disagree about how many cells they have.
	Parameters are:
		the index of the first row that disagrees,
		the arity established by the first row,
		the arity actually found.
	"""
	def __init__(self, row, expected, found):
		super().__init__(row, expected, found)
		self.row, self.expected, self.found = row, expected, found

	def __str__(self):
		return "row %d has %d cells, but the table has %d columns"%(self.row, self.found, self.expected)

class GridCoordinateError(TableError, IndexError):
	"""
	Something asked to write outside the interior of the grid.
	This cannot happen through the public entry point; if it does, the offset arithmetic is broken.
	"""


class StringTable(ABC):
	"""
	Anything which knows how to present itself as a list of printable lines.
	All the lines in a proper table are the same length, so they stack into a neat rectangle.
	"""

	@abstractmethod
	def to_table(self) -> list:
		""" Return the list of lines. Joining them with line breaks makes a suitable cell for another table. """
