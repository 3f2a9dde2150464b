"""
Generates a formatted grid containing strings.

	>>> for line in generate_string_grid([
	... 	["Operation", "Values", "Result"],
	... 	["Addition", "4, 12", str(4 + 12)],
	... 	["Division", "10, 5", str(10 // 5)],
	... ]): print(line)
	┏━━━━━━━━━┳━━━━━━┳━━━━━━┓
	┃Operation┃Values┃Result┃
	┣━━━━━━━━━╋━━━━━━╋━━━━━━┫
	┃Addition ┃4, 12 ┃16    ┃
	┣━━━━━━━━━╋━━━━━━╋━━━━━━┫
	┃Division ┃10, 5 ┃2     ┃
	┗━━━━━━━━━┻━━━━━━┻━━━━━━┛

The plan is simple: Measure every cell, size each column to its widest cell and each
row to its tallest, draw the empty skeleton, and then stamp each cell's text into place.

Sizes are counted in code points, not bytes and not terminal columns. Python strings
index by code point, so the character offset within a line IS the storage offset;
there is no separate translation step that could go stale between lines. Anything that
draws in more or fewer than one terminal column per code point (wide CJK glyphs,
combining marks, ANSI escapes) will line up by count, not necessarily by eye. Strip the
styling before you measure; see `styling.strip_style`.

A cell holding the joined lines of another table is nothing special: it's just a tall,
wide cell. Nesting is done bottom-up by whoever builds the rows.
"""

import sys
from typing import Iterable, Sequence

from .interface import StringTable, RaggedTableError, GridCoordinateError, EMPTY_TABLE, LINE_BREAK, BLANK
from .skeleton import GridSizes, start_of

VERBOSE = False

def text_width(text:str) -> int:
	""" The longest line, in code points. """
	return max(len(line) for line in text.split(LINE_BREAK))

def text_height(text:str) -> int:
	return text.count(LINE_BREAK) + 1


class CellTable(StringTable):
	"""
	A rectangle of text cells: rows of equal arity, checked once, here, on the way in.
	After that, the rest of the machinery just trusts the shape.
	"""
	def __init__(self, rows:Iterable[Sequence[str]]):
		rows = list(rows)
		for r, row in enumerate(rows):
			if isinstance(row, str): raise TypeError('row %d should be a sequence of cells, not a string'%r)
		self.rows = [tuple(row) for row in rows]
		self.arity = len(self.rows[0]) if self.rows else 0
		for r, row in enumerate(self.rows):
			if len(row) != self.arity: raise RaggedTableError(r, self.arity, len(row))
			for cell in row:
				if not isinstance(cell, str): raise TypeError('cell at row %d should be a string, not %s'%(r, type(cell).__name__))

	def __len__(self): return len(self.rows)

	def widths(self) -> list:
		""" Each column is as wide as its widest cell, plus borders. """
		return [2 + max(map(text_width, column)) for column in zip(*self.rows)]

	def heights(self) -> list:
		""" Each row is as tall as its tallest cell, plus borders. """
		return [2 + max(map(text_height, row), default=0) for row in self.rows]

	def grid_sizes(self) -> GridSizes:
		grid = GridSizes(self.widths(), self.heights())
		if VERBOSE: print("Grid of %d rows by %d columns: widths=%r heights=%r"%(len(self.rows), self.arity, grid.widths, grid.heights), file=sys.stderr)
		return grid

	def to_table(self) -> list:
		if not self.rows: return list(EMPTY_TABLE)
		grid = self.grid_sizes()
		lines = grid.to_table()
		for y, row in enumerate(self.rows):
			for x, cell in enumerate(row):
				insert_text(cell, lines, grid, x, y)
		return lines


def insert_text(text:str, lines:list, grid:GridSizes, x:int, y:int):
	"""
	Stamp `text` into the cell at column `x`, row `y` of a skeleton previously drawn from `grid`.
	Modifies `lines` in place. Each line of text is left-justified and only as wide as
	itself; whatever is left of the cell keeps the skeleton's blank padding.

	The bounds are checked against the cell's own rectangle, because slicing past the end
	of a Python string just quietly does less than you asked. Every slot written must still
	hold skeleton padding, so nothing already drawn gets painted over. Nothing is modified
	unless the whole text fits.
	"""
	top, left = start_of(grid.heights, y), start_of(grid.widths, x)
	room_down, room_across = grid.heights[y] - 2, grid.widths[x] - 2
	pieces = text.split(LINE_BREAK)
	if len(pieces) > room_down or top + len(pieces) > len(lines):
		raise GridCoordinateError("text of %d lines does not fit row %d, which has room for %d"%(len(pieces), y, room_down))
	for offset, piece in enumerate(pieces):
		line = lines[top + offset]
		right = left + len(piece)
		if len(piece) > room_across or right >= len(line):
			raise GridCoordinateError("text %r does not fit column %d, which has room for %d"%(piece, x, room_across))
		if line[left:right].strip(BLANK):
			raise GridCoordinateError("cell at column %d, row %d already holds %r"%(x, y, line[left:right]))
	for offset, piece in enumerate(pieces):
		line = lines[top + offset]
		lines[top + offset] = line[:left] + piece + line[left + len(piece):]

def generate_string_grid(contents:Iterable[Sequence[str]]) -> list:
	"""
	The entry point: rows of strings in, printable lines out.
	Every row must have the same number of cells. No rows at all gives the minimal empty box.
	"""
	return CellTable(contents).to_table()
