"""
The grid skeleton: borders and blank interior, sized but not yet filled.

Every width and height here is a TOTAL extent, counting one unit of border on each side.
Neighbours share a border, so a column of width w contributes w-1 characters to the line
(plus the one closing border at the far end), and likewise for rows.

Picture widths=[3, 4, 2] and heights=[3, 5]:

	┏━┳━━┳┓
	┃ ┃  ┃┃
	┣━╋━━╋┫
	┃ ┃  ┃┃
	┃ ┃  ┃┃
	┃ ┃  ┃┃
	┗━┻━━┻┛

"""

from typing import Sequence

from .interface import (
	StringTable, GridSizeError, GridCoordinateError, MINIMUM_SIZE,
	TOP_LEFT, TOP_TEE, TOP_RIGHT, LEFT_TEE, CROSS, RIGHT_TEE,
	BOTTOM_LEFT, BOTTOM_TEE, BOTTOM_RIGHT, VERTICAL, HORIZONTAL, BLANK,
)


def check_sizes(axis:str, sizes:Sequence[int]):
	""" Sizes below the minimum are a contract violation. Fail loudly; never clamp. """
	if not len(sizes): raise GridSizeError(axis, None, sizes)
	for index, size in enumerate(sizes):
		if isinstance(size, bool) or not isinstance(size, int) or size < MINIMUM_SIZE:
			raise GridSizeError(axis, index, size)

def start_of(sizes:Sequence[int], index:int) -> int:
	"""
	Where does the interior of element `index` begin along this axis?
	Start at 1 to step over the outer border, then each earlier element
	contributes its size less the one unit of border it shares with the next.
	"""
	if not 0 <= index < len(sizes): raise GridCoordinateError("coordinate %r could not be reached along an axis of %d"%(index, len(sizes)))
	return 1 + sum(size - 1 for size in sizes[:index])

def extent(sizes:Sequence[int]) -> int:
	""" Total characters (or lines) covered by an axis, shared borders counted once. """
	return 1 + sum(size - 1 for size in sizes)


class GridSizes(StringTable):
	"""
	Holds widths of the columns and heights of the rows that form a grid.
	Sizes are checked when the picture is drawn, not when the object is built,
	so you can tinker with the lists in between if you like.
	"""
	def __init__(self, widths:Sequence[int], heights:Sequence[int]):
		self.widths = list(widths)
		self.heights = list(heights)

	def __repr__(self): return "GridSizes(widths=%r, heights=%r)"%(self.widths, self.heights)

	def __eq__(self, other):
		return isinstance(other, GridSizes) and self.widths == other.widths and self.heights == other.heights

	def line_width(self) -> int: return extent(self.widths)
	def line_count(self) -> int: return extent(self.heights)

	def to_table(self) -> list:
		check_sizes('widths', self.widths)
		check_sizes('heights', self.heights)
		blank = self._blank_line()
		separator = self._rule(LEFT_TEE, CROSS, RIGHT_TEE)
		result = [self._rule(TOP_LEFT, TOP_TEE, TOP_RIGHT)]
		for r, height in enumerate(self.heights):
			if r: result.append(separator)
			result.extend([blank] * (height - 2))
		result.append(self._rule(BOTTOM_LEFT, BOTTOM_TEE, BOTTOM_RIGHT))
		return result

	def _rule(self, left, tee, right) -> str:
		""" Any of the horizontal lines: looks like "┣━━━━━━━━━━╋━━━━━╋━━━━━━━┫" """
		return left + tee.join(HORIZONTAL * (w - 2) for w in self.widths) + right

	def _blank_line(self) -> str:
		""" One line of empty interior, at full width: "┃          ┃     ┃       ┃" """
		return VERTICAL + VERTICAL.join(BLANK * (w - 2) for w in self.widths) + VERTICAL
