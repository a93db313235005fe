#!/usr/bin/env python


###########
# Imports #
###########

import enum
import logging
import numpy as np

from collections import deque


##############
# Parameters #
##############

DIGITS = frozenset(range(1, 10))
BLANK = '*'

log = logging.getLogger(__name__)


###########
# Classes #
###########

class Status(enum.Enum):
	EMPTY_CELLS = 'empty cells'
	DUPLICATE_VALUE = 'duplicate value'
	SOLVED = 'solved'


class Cell:
	'''View on one of the 81 positions of a board.'''

	def __init__(self, board, index):
		self.board = board
		self.index = index

		self.row = index // 9
		self.col = index % 9
		self.box = (self.row // 3) * 3 + self.col // 3

		self.candidates = set()

	def __repr__(self):
		return 'Cell({}, value={})'.format(self.index, self.value)

	@property
	def value(self):
		value = self.board.grid[self.index]
		return None if value == 0 else int(value)

	@property
	def locked(self):
		return bool(self.board.locked[self.index])

	def empty(self):
		'''State if cell is empty.'''
		return bool(self.board.grid[self.index] == 0)


class Group:
	'''Nine cells that must hold each digit exactly once.'''

	def __init__(self, indices):
		self.indices = tuple(indices)
		self.unused = set(DIGITS)

	def __repr__(self):
		return '{}({})'.format(type(self).__name__, list(self.indices))

	def values(self, grid):
		'''Get member values, None for blanks.'''
		return [None if grid[i] == 0 else int(grid[i]) for i in self.indices]

	def status(self, grid):
		'''Tri-state validity of the group.'''
		values = grid[list(self.indices)]
		filled = values[values != 0]

		if len(filled) < len(values):
			return Status.EMPTY_CELLS
		elif len(np.unique(filled)) < len(filled):
			return Status.DUPLICATE_VALUE

		return Status.SOLVED


class Row(Group):
	pass


class Column(Group):
	pass


class Box(Group):
	pass


class Board:
	def __init__(self, grid=None):
		self.grid = np.zeros(81, dtype=int)
		self.locked = np.zeros(81, dtype=bool)

		self.cells = [Cell(self, i) for i in range(81)]

		self.rows = [Row(range(i * 9, (i + 1) * 9)) for i in range(9)]
		self.columns = [Column(range(i, 81, 9)) for i in range(9)]
		self.boxes = [
			Box(
				(i // 3) * 27 + (i % 3) * 3 + j * 9 + k
				for j in range(3)
				for k in range(3)
			)
			for i in range(9)
		]

		self.pending = deque()
		self.attempted = []
		self.steps = 0

		if grid is None:
			grid = np.zeros((9, 9), dtype=int)

		grid = np.asarray(grid, dtype=int)

		if grid.shape != (9, 9):
			raise ValueError('Invalid grid shape {}'.format(grid.shape))
		elif np.any((grid < 0) | (grid > 9)):
			raise ValueError('Grid values must lie in 0..9')

		for (i, j), value in np.ndenumerate(grid):
			cell = self.cells[i * 9 + j]

			if value == 0:
				self.pending.append(cell)
				continue

			self.grid[cell.index] = value
			self.locked[cell.index] = True

			for group in self.groups(cell):
				group.unused.discard(int(value))

	def __len__(self):
		return len(self.cells)

	def __iter__(self):
		return iter(self.cells)

	def __getitem__(self, key):
		'''Get cell by index or (row, col).'''
		if isinstance(key, tuple):
			i, j = key
			key = i * 9 + j

		return self.cells[key]

	def __str__(self):
		lines = []

		for i in range(9):
			lines.append('+===' * 9 + '+' if i % 3 == 0 else '+---' * 9 + '+')

			line = '/'

			for j in range(9):
				value = self.grid[i * 9 + j]
				line += ' {} {}'.format(value if value else ' ', '/' if j % 3 == 2 else '|')

			lines.append(line)

		lines.append('+---' * 9 + '+')

		return '\n'.join(lines)

	def groups(self, cell):
		'''Get cell's row, column and box.'''
		return self.rows[cell.row], self.columns[cell.col], self.boxes[cell.box]

	def candidates(self, cell):
		'''Get values unused by cell's row, column and box.'''
		row, column, box = self.groups(cell)
		return row.unused & column.unused & box.unused

	def assign(self, cell, value):
		'''Set a searched value and mark it used.'''
		assert not cell.locked, 'cannot assign locked {}'.format(cell)

		groups = self.groups(cell)

		for group in groups:
			assert value in group.unused, '{} already used in {}'.format(value, group)

		self.grid[cell.index] = value

		for group in groups:
			group.unused.remove(value)

	def unassign(self, cell, value):
		'''Clear a searched value and mark it unused again.'''
		for group in self.groups(cell):
			assert value not in group.unused, '{} not used in {}'.format(value, group)
			group.unused.add(value)

		self.grid[cell.index] = 0

	def status(self):
		if self.pending:
			return Status.EMPTY_CELLS

		for group in self.rows + self.columns + self.boxes:
			status = group.status(self.grid)

			if status != Status.SOLVED:
				return status

		return Status.SOLVED

	def check(self):
		'''Verify unused-sets and pending list against cell values.'''
		for group in self.rows + self.columns + self.boxes:
			used = {v for v in group.values(self.grid) if v is not None}

			if group.unused != DIGITS - used:
				raise AssertionError('{} unused {} disagrees with values {}'.format(
					group, sorted(group.unused), group.values(self.grid)
				))

		active = {cell.index for cell in self.attempted}
		blanks = [i for i in range(81) if self.grid[i] == 0 and i not in active]
		pending = [cell.index for cell in self.pending]

		if pending != blanks:
			raise AssertionError('Pending cells {} differ from blanks {}'.format(pending, blanks))

	def values(self):
		'''Get a 9x9 copy of the grid.'''
		return self.grid.reshape(9, 9).copy()

	def dump(self, kind='rows'):
		'''List member values of rows, columns or boxes.'''
		groups = getattr(self, kind)

		return '\n'.join(str(group.values(self.grid)) for group in groups)


#############
# Functions #
#############

def parse(lines, blank=BLANK):
	'''Read 9 lines of 9 digits or blanks into a 9x9 grid.'''
	if isinstance(lines, str):
		lines = lines.splitlines()

	lines = [line.strip() for line in lines]
	lines = [line for line in lines if line]

	if len(lines) != 9:
		raise ValueError('Expected 9 rows, got {}'.format(len(lines)))

	grid = np.zeros((9, 9), dtype=int)

	for i, line in enumerate(lines):
		grid[i] = parse_row(line, blank, i)

	return grid


def parse_row(line, blank=BLANK, i=0):
	if len(line) != 9:
		raise ValueError('Row {} has {} cells instead of 9'.format(i + 1, len(line)))

	row = []

	for char in line:
		if char == blank:
			row.append(0)
		elif char in '123456789':
			row.append(int(char))
		else:
			raise ValueError('Row {} has invalid cell {!r}'.format(i + 1, char))

	return row


def prompt(ask=input, say=print, blank=BLANK):
	'''Ask for the grid row by row until each row is valid.'''
	grid = np.zeros((9, 9), dtype=int)

	for i in range(9):
		say("Row {}: Please enter the numbers from (L -> R). Mark unknown cells as '{}'.".format(i + 1, blank))

		while True:
			line = ask('-> ').strip()

			try:
				grid[i] = parse_row(line, blank, i)
				break
			except ValueError:
				say('You must enter 1-9 or {} for each cell in the row.'.format(blank))

	return grid


def solve(board, shuffle=False, rng=None):
	'''Fill board's pending cells by backtracking.

	Parameters
	----------
	board : Board
		board to solve in place
	shuffle : bool
		whether candidates are tried in random order instead of ascending
	rng : numpy.random.Generator
		random generator used when shuffling

	Returns
	-------
	bool
		whether a solution was found
	'''

	if shuffle:
		rng = np.random.default_rng() if rng is None else rng
		order = lambda values: [int(v) for v in rng.permutation(sorted(values))]
	else:
		order = sorted

	log.debug('Solving %d pending cells', len(board.pending))

	if board.pending:
		solved = _search(board, order)
	else:
		solved = board.status() == Status.SOLVED

	log.debug('%s after %d steps', 'Solved' if solved else 'No solution', board.steps)

	return solved


def _search(board, order):
	cell = board.pending.popleft()
	board.attempted.append(cell)
	board.steps += 1

	solved = False

	try:
		cell.candidates = board.candidates(cell)

		for value in order(cell.candidates):
			board.assign(cell, value)

			try:
				if board.pending:
					solved = _search(board, order)
				else:
					solved = board.status() == Status.SOLVED
			finally:
				if not solved:
					board.unassign(cell, value)

			if solved:
				return True
	finally:
		# Exhausted or interrupted
		if not solved:
			cell.candidates = set()
			board.grid[cell.index] = 0
			board.attempted.pop()
			board.pending.appendleft(cell)

	return False


########
# Main #
########

if __name__ == '__main__':
	# Imports
	import argparse
	import sys

	# Parser
	parser = argparse.ArgumentParser(description='Sudoku Solver')
	parser.add_argument('-f', '--file', default=None, help='puzzle file, - for stdin')
	parser.add_argument('-o', '--output', default=None, help='text output file')
	parser.add_argument('-d', '--dat', default=None, help='digits output file')
	parser.add_argument('-i', '--image', default=None, help='PNG output file')
	parser.add_argument('--shuffle', default=False, action='store_true', help='random candidate order')
	parser.add_argument('--seed', type=int, default=None, help='random seed')
	parser.add_argument('-v', '--verbose', default=False, action='store_true')
	args = parser.parse_args()

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format='%(asctime)s %(name)s %(levelname)s %(message)s'
	)

	# Load
	try:
		if args.file is None:
			grid = prompt()
		elif args.file == '-':
			grid = parse(sys.stdin.read())
		else:
			with open(args.file) as f:
				grid = parse(f.read())
	except (ValueError, EOFError, OSError) as e:
		log.error('Invalid puzzle: %s', str(e) or type(e).__name__)
		sys.exit(2)

	board = Board(grid)

	# Solve
	solved = solve(board, shuffle=args.shuffle, rng=np.random.default_rng(args.seed))

	if args.output is not None:
		sys.stdout = open(args.output, 'w')

	print(board)

	if solved:
		log.info('Solved in %d steps', board.steps)
	else:
		log.info('No solution found after %d steps', board.steps)

	if args.dat is not None:
		np.savetxt(args.dat, board.values(), fmt='%d')

	if args.image is not None:
		from drawing import draw

		draw(board).save(args.image)

	sys.exit(0 if solved else 1)
