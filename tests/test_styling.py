import unittest
from formatted_debug.styling import StringStyle, StringColor, BlinkSpeed, format_string, strip_style
from formatted_debug.tables.string_grid import generate_string_grid


class TestStringFormatting(unittest.TestCase):
	def test_00_default_is_passthrough(self):
		self.assertEqual("hello!", format_string("hello!", StringStyle()))
		self.assertEqual([], StringStyle().codes())

	def test_01_simple(self):
		result = format_string("hello!", StringStyle().set_text_color(StringColor.RED))
		self.assertEqual("\x1b[31mhello!\x1b[0m", result)

	def test_02_multiple(self):
		style = (StringStyle()
			.set_text_color(StringColor.BLUE)
			.set_bold(True)
			.set_strikethrough(True)
			.set_blink_speed(BlinkSpeed.SLOW))
		self.assertEqual("\x1b[1;9;5;34mhello!\x1b[0m", format_string("hello!", style))

	def test_03_last_write_wins(self):
		style = (StringStyle()
			.set_text_color(StringColor.BLUE)
			.set_bold(False)
			.set_bold(True)
			.set_italicized(True)
			.set_strikethrough(True)
			.set_italicized(False)
			.set_blink_speed(BlinkSpeed.SLOW))
		self.assertEqual("\x1b[1;9;5;34mhello!\x1b[0m", format_string("hello!", style))

	def test_04_fixed_order(self):
		style = (StringStyle()
			.set_background_color(StringColor.BRIGHT_WHITE)
			.set_text_color(StringColor.GRAY)
			.set_blink_speed(BlinkSpeed.FAST)
			.set_strikethrough(True)
			.set_underline(True)
			.set_italicized(True)
			.set_faint(True)
			.set_bold(True))
		self.assertEqual("\x1b[1;2;3;4;9;6;90;107mx\x1b[0m", format_string("x", style))

	def test_05_background_codes(self):
		for color, code in [(StringColor.BLACK, 40), (StringColor.WHITE, 47), (StringColor.PINK, 101), (StringColor.LIGHT_CYAN, 106)]:
			with self.subTest(color=color):
				self.assertEqual("\x1b[%dmx\x1b[0m"%code, format_string("x", StringStyle().set_background_color(color)))

	def test_06_unset_returns_to_default(self):
		style = StringStyle().set_underline(True).set_text_color(StringColor.CYAN)
		style = style.set_underline(False).set_text_color(StringColor.NONE)
		self.assertEqual(StringStyle(), style)
		self.assertEqual("plain", format_string("plain", style))

	def test_07_immutable(self):
		base = StringStyle()
		bold = base.set_bold(True)
		self.assertFalse(base.bold)
		self.assertTrue(bold.bold)


class TestStripStyle(unittest.TestCase):
	def test_00_round_trip(self):
		style = StringStyle().set_bold(True).set_text_color(StringColor.LIME)
		self.assertEqual("hello!", strip_style(format_string("hello!", style)))
		self.assertEqual("untouched", strip_style("untouched"))

	def test_01_escapes_count_toward_width(self):
		# The grid has no idea about escape codes; measure the stripped text if it matters.
		styled = format_string("ab", StringStyle().set_bold(True))
		lines = generate_string_grid([[styled]])
		self.assertEqual(len(styled) + 2, len(lines[0]))
		self.assertEqual(4, len(generate_string_grid([[strip_style(styled)]])[0]))


if __name__ == '__main__':
	unittest.main()
