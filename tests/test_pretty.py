import unittest, io
from formatted_debug import pretty


class TestPretty(unittest.TestCase):
	def setUp(self) -> None:
		self.out = io.StringIO()

	def lines(self):
		return self.out.getvalue().splitlines()

	def test_00_print_grid(self):
		pretty.print_grid([[1, 2], [3, 4]], file=self.out)
		self.assertEqual(["┏━┳━┓", "┃1┃2┃", "┣━╋━┫", "┃3┃4┃", "┗━┻━┛"], self.lines())

	def test_01_print_columnar(self):
		pretty.print_columnar(["a", "b"], ["c"], file=self.out)
		self.assertEqual([
			"┏━┳━┳━┓",
			"┃0┃a┃c┃",
			"┣━╋━╋━┫",
			"┃1┃b┃ ┃",
			"┗━┻━┻━┛",
		], self.lines())

	def test_02_print_table(self):
		pretty.print_table({"k": [1]}, file=self.out)
		self.assertEqual([
			"┏━━━━━┳━━━━━━━┓",
			"┃Keys:┃Values:┃",
			"┣━━━━━╋━━━━━━━┫",
			"┃k    ┃┏━┓    ┃",
			"┃     ┃┃1┃    ┃",
			"┃     ┃┗━┛    ┃",
			"┗━━━━━┻━━━━━━━┛",
		], self.lines())

	def test_03_nothing_to_show(self):
		pretty.print_columnar(file=self.out)
		self.assertEqual(["┏┓", "┗┛"], self.lines())


if __name__ == '__main__':
	unittest.main()
