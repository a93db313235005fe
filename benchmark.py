#!/usr/bin/env python


###########
# Imports #
###########

import logging
import numpy as np
import time

from solver import Board, solve


log = logging.getLogger(__name__)


#############
# Functions #
#############

def run(grid, number=10, shuffle=False, seed=None):
	'''Time repeated solves of a puzzle.

	Each run builds its own board from `grid`.

	Parameters
	----------
	grid : array_like
		9x9 puzzle, 0 for blanks
	number : int
		number of runs
	shuffle : bool
		whether candidates are tried in random order
	seed : int
		seed of the random generator shared by the runs

	Returns
	-------
	tuple of numpy.ndarray
		elapsed seconds, search steps and success flags of each run
	'''

	if number < 1:
		raise ValueError('Invalid number of runs {}'.format(number))

	rng = np.random.default_rng(seed)

	times = np.zeros(number)
	steps = np.zeros(number, dtype=int)
	solved = np.zeros(number, dtype=bool)

	for i in range(number):
		board = Board(grid)

		start = time.perf_counter()
		solved[i] = solve(board, shuffle=shuffle, rng=rng)
		times[i] = time.perf_counter() - start

		steps[i] = board.steps

		log.debug('Run %d: %.4fs, %d steps', i + 1, times[i], steps[i])

	return times, steps, solved


def summary(times, steps):
	return {
		'runs': len(times),
		'mean': float(times.mean()),
		'std': float(times.std()),
		'min': float(times.min()),
		'max': float(times.max()),
		'steps': float(steps.mean()),
	}


########
# Main #
########

if __name__ == '__main__':
	# Imports
	import argparse
	import sys

	from solver import parse

	# Parser
	parser = argparse.ArgumentParser(description='Sudoku Solver Benchmark')
	parser.add_argument('-f', '--file', default=None, help='puzzle file, stdin if omitted')
	parser.add_argument('-n', '--number', type=int, default=10)
	parser.add_argument('--shuffle', default=False, action='store_true')
	parser.add_argument('--seed', type=int, default=None)
	parser.add_argument('-v', '--verbose', default=False, action='store_true')
	args = parser.parse_args()

	if args.number < 1:
		parser.error('number of runs must be positive')

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	# Load
	try:
		if args.file is None:
			grid = parse(sys.stdin.read())
		else:
			with open(args.file) as f:
				grid = parse(f.read())
	except (ValueError, OSError) as e:
		log.error('Invalid puzzle: %s', e)
		sys.exit(2)

	# Runs
	times, steps, solved = run(grid, args.number, args.shuffle, args.seed)
	stats = summary(times, steps)

	print('-' * 10)
	print('{} runs, {} solved'.format(stats['runs'], int(solved.sum())))
	print('Average {:.4f}s (std {:.4f}s)'.format(stats['mean'], stats['std']))
	print('Fastest {:.4f}s, slowest {:.4f}s'.format(stats['min'], stats['max']))
	print('Average {:.0f} steps'.format(stats['steps']))
