"""
Draw the contents of a JSON, CSV, or plain-text document as a box-drawing table.

JSON objects become key/value tables, arrays become single-column tables, and
anything nested inside is drawn as a table within a table. CSV rows are drawn as
they stand; every row must have the same number of fields. Plain text goes in one box.
"""

import sys, os, argparse, json, csv, io

from formatted_debug.tables import string_grid
from formatted_debug.tables.adapters import nested_table, to_table, string_table
from formatted_debug.tables.interface import TableError

FORMATS = {'.json': 'json', '.csv': 'csv'}

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m formatted_debug', description=__doc__,)
	parser.add_argument('source_path', help='path to input file, or - for standard input')
	parser.add_argument('--format', choices=['json', 'csv', 'text'], help='how to read the input; by default, guess from the file extension.')
	parser.add_argument('--sort-keys', action='store_true', dest='sort_keys', help='put mapping keys (and set members) in order.')
	parser.add_argument('--flat', action='store_true', help='draw nested JSON containers as plain text instead of as tables within tables.')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-o', '--output', help='path to output file; by default, write to STDOUT.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about the measured grid sizes on STDERR.")
	return parser.parse_args(argv)

def guess_format(source_path:str) -> str:
	stem, extension = os.path.splitext(source_path)
	return FORMATS.get(extension.lower(), 'text')

def read_document(source_path:str) -> str:
	if source_path == '-': return sys.stdin.read()
	with open(source_path, encoding='utf-8') as fh: return fh.read()

JSON_WORDS = {None: "null", True: "true", False: "false"}

def json_spelling(data):
	""" Put null, true and false back the way the document spelled them, instead of as None, True and False. """
	if isinstance(data, dict): return {key: json_spelling(value) for key, value in data.items()}
	if isinstance(data, list): return [json_spelling(item) for item in data]
	if data is None or isinstance(data, bool): return JSON_WORDS[data]
	return data

def render(document:str, fmt:str, *, sort_keys=False, flat=False) -> list:
	if fmt == 'json':
		data = json_spelling(json.loads(document))
		return to_table(data, sort_keys=sort_keys) if flat else nested_table(data, sort_keys=sort_keys)
	if fmt == 'csv':
		return string_grid.generate_string_grid(csv.reader(io.StringIO(document)))
	return string_table(document.rstrip('\n'))

def main(args):
	if args.verbose: string_grid.VERBOSE = True
	fmt = args.format or guess_format(args.source_path)
	if args.output and os.path.exists(args.output) and not args.force:
		print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
		sys.exit(1)
	try:
		lines = render(read_document(args.source_path), fmt, sort_keys=args.sort_keys, flat=args.flat)
	except (OSError, UnicodeDecodeError, TableError, json.JSONDecodeError, csv.Error) as e:
		print('%s: %s'%(type(e).__name__, e), file=sys.stderr)
		sys.exit(1)
	text = '\n'.join(lines) + '\n'
	if args.output:
		try:
			with open(args.output, 'w', encoding='utf-8') as fh: fh.write(text)
		except OSError as e:
			print('%s: %s'%(type(e).__name__, e), file=sys.stderr)
			sys.exit(1)
		print('Wrote table to:', file=sys.stderr)
		print('\t'+args.output, file=sys.stderr)
	else:
		sys.stdout.write(text)

if __name__ == '__main__': main(parse_arguments())
