"""
Formatted Debug: values drawn as box-drawing tables, to make debugging and printing easier.

	>>> from formatted_debug import to_table
	>>> print('\\n'.join(to_table([0, 1])))
	┏━┓
	┃0┃
	┣━┫
	┃1┃
	┗━┛

"""

from .tables.string_grid import generate_string_grid
from .tables.adapters import to_table, nested_table

__all__ = ['generate_string_grid', 'to_table', 'nested_table']
