"""
Printed strings are stylized using ANSI escape code SGR (Select Graphic Rendition) parameters,
as described at https://en.wikipedia.org/wiki/ANSI_escape_code#SGR_(Select_Graphic_Rendition)_parameters

A StringStyle is an immutable bundle of attributes. Each `set_foo` method gives back a new
style with just that one attribute changed, so you can chain them, and the last word on any
given attribute is the one that counts:

	>>> style = StringStyle().set_text_color(StringColor.BLUE).set_bold(True).set_blink_speed(BlinkSpeed.SLOW)
	>>> format_string("hello!", style)
	'\\x1b[1;5;34mhello!\\x1b[0m'

The codes always come out in the same order (bold, faint, italic, underline, strikethrough,
blink, foreground, background) no matter what order you set them in.

This module knows nothing about tables, and the tables know nothing about it. If you style
text before putting it in a cell, the escape codes count toward the width of the cell.
Measure the `strip_style` version of the text if that matters to you.
"""

import re
from enum import Enum
from typing import NamedTuple

ESCAPE = '\x1b['
RESET = ESCAPE + '0m'
SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

class StringColor(Enum):
	"""
	All basic colors as defined by SGR. The value is the foreground code;
	the background code is always ten more.
	"""
	BLACK = 30
	RED = 31
	GREEN = 32
	YELLOW = 33
	BLUE = 34
	MAGENTA = 35
	CYAN = 36
	WHITE = 37
	GRAY = 90
	PINK = 91
	LIME = 92
	BRIGHT_YELLOW = 93
	LIGHT_BLUE = 94
	LIGHT_MAGENTA = 95
	LIGHT_CYAN = 96
	BRIGHT_WHITE = 97
	NONE = None

class BlinkSpeed(Enum):
	NONE = None
	SLOW = 5
	FAST = 6 # Not widely supported.

class StringStyle(NamedTuple):
	"""
	The default style has nothing set, and applying it to a string leaves the string alone.
	"""
	bold: bool = False
	faint: bool = False
	italicized: bool = False
	underline: bool = False
	strikethrough: bool = False
	blink: BlinkSpeed = BlinkSpeed.NONE
	color: StringColor = StringColor.NONE
	background_color: StringColor = StringColor.NONE

	def set_bold(self, bold:bool) -> "StringStyle": return self._replace(bold=bold)
	def set_faint(self, faint:bool) -> "StringStyle": return self._replace(faint=faint)
	def set_italicized(self, italicized:bool) -> "StringStyle": return self._replace(italicized=italicized)
	def set_underline(self, underline:bool) -> "StringStyle": return self._replace(underline=underline)
	def set_strikethrough(self, strikethrough:bool) -> "StringStyle": return self._replace(strikethrough=strikethrough)
	def set_blink_speed(self, blink:BlinkSpeed) -> "StringStyle": return self._replace(blink=blink)
	def set_text_color(self, color:StringColor) -> "StringStyle": return self._replace(color=color)
	def set_background_color(self, color:StringColor) -> "StringStyle": return self._replace(background_color=color)

	def codes(self) -> list:
		""" The SGR parameters for this style, in their fixed order. Empty for the default style. """
		flags = [(self.bold, 1), (self.faint, 2), (self.italicized, 3), (self.underline, 4), (self.strikethrough, 9)]
		result = [code for flag, code in flags if flag]
		if self.blink.value is not None: result.append(self.blink.value)
		if self.color.value is not None: result.append(self.color.value)
		if self.background_color.value is not None: result.append(self.background_color.value + 10)
		return result


def format_string(text:str, style:StringStyle) -> str:
	""" Wrap the text in the escape codes for the style, and a reset after. """
	codes = style.codes()
	if not codes: return text
	return ESCAPE + ';'.join(map(str, codes)) + 'm' + text + RESET

def strip_style(text:str) -> str:
	""" What's left for the eye to see once the SGR sequences are gone. """
	return SGR_PATTERN.sub('', text)
