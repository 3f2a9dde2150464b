"""
Ways to turn ordinary Python data into rows for the grid generator.

None of this is clever. Every value gets formatted with `str()` on the way in,
and the shape of the data decides the shape of the table:

	a string                 -> one cell, line breaks and all
	a mapping                -> two columns under a "Keys:" / "Values:" header
	any other iterable       -> one column, one row per item
	anything else            -> one cell holding str(value)

A note on order: rows come out in whatever order the container iterates. For a `dict`
that's insertion order, which is usually what you meant. For a `set` it's whatever
Python feels like today, and the picture will vary accordingly; that's not a bug,
it's a set. Pass `sort_keys=True` if you'd rather have a canonical order. Mapping rows
then sort by key (falling back to the text of the key when keys don't compare), and
set members sort by their text.
"""

from collections.abc import Mapping, Set
from typing import Iterable

from .interface import LINE_BREAK
from .string_grid import generate_string_grid

HEADER = ("Keys:", "Values:")

def _in_order(keys, sort_keys:bool) -> list:
	keys = list(keys)
	if not sort_keys: return keys
	try: return sorted(keys)
	except TypeError: return sorted(keys, key=str)

def _members(items:Iterable, sort_keys:bool) -> Iterable:
	""" Only sets get sorted. Lists and tuples already have an order of their own. """
	return sorted(items, key=str) if sort_keys and isinstance(items, Set) else items

def string_table(text:str) -> list:
	""" One box around the whole text. Multi-line text makes a tall box. """
	return generate_string_grid([(text,)])

def sequence_table(items:Iterable, *, sort_keys=False) -> list:
	""" One column, one row per item. """
	return generate_string_grid((str(item),) for item in _members(items, sort_keys))

def mapping_table(mapping:Mapping, *, sort_keys=False) -> list:
	""" Two columns: keys on the left, values on the right, under a header row. """
	rows = [HEADER]
	rows.extend((str(key), str(mapping[key])) for key in _in_order(mapping.keys(), sort_keys))
	return generate_string_grid(rows)

def to_table(value, *, sort_keys=False) -> list:
	""" Pick an adapter by the shape of the value. Nested containers are just formatted with str(). """
	if isinstance(value, str): return string_table(value)
	if isinstance(value, Mapping): return mapping_table(value, sort_keys=sort_keys)
	if _is_collection(value): return sequence_table(value, sort_keys=sort_keys)
	return string_table(str(value))

def nested_table(value, *, sort_keys=False) -> list:
	"""
	Like `to_table`, except that containers inside containers are drawn as tables too.
	The innermost tables are drawn first, and each is then joined into one multi-line
	cell of the table around it.
	"""
	def cell(item) -> str:
		if isinstance(item, Mapping) or _is_collection(item):
			return LINE_BREAK.join(nested_table(item, sort_keys=sort_keys))
		return str(item)
	if isinstance(value, Mapping):
		rows = [HEADER]
		rows.extend((cell(key), cell(value[key])) for key in _in_order(value.keys(), sort_keys))
		return generate_string_grid(rows)
	if _is_collection(value):
		return generate_string_grid([(cell(item),) for item in _members(value, sort_keys)])
	return to_table(value, sort_keys=sort_keys)

def _is_collection(value) -> bool:
	""" Strings are iterable, but nobody wants a table of their letters. Same for bytes. """
	if isinstance(value, (str, bytes, bytearray, memoryview)): return False
	try: iter(value)
	except TypeError: return False
	return True
