# tests/test_cli.py
import subprocess
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]


def run(*args, stdin=None):
	return subprocess.run(
		[sys.executable, *args],
		cwd=ROOT,
		input=stdin,
		capture_output=True,
		text=True,
	)


def test_solver_cli_from_file(tmp_path, puzzle, solution):
	path = tmp_path / 'puzzle.txt'
	path.write_text(puzzle)
	dat = tmp_path / 'solution.dat'

	proc = run('solver.py', '-f', str(path), '-d', str(dat))

	assert proc.returncode == 0
	assert '/ 5 | 3 | 4 / 6 | 7 | 8 / 9 | 1 | 2 /' in proc.stdout
	assert 'Solved' in proc.stderr
	assert np.loadtxt(dat, dtype=int).tolist() == solution


def test_solver_cli_from_stdin(puzzle):
	proc = run('solver.py', '-f', '-', '--shuffle', '--seed', '7', stdin=puzzle)

	assert proc.returncode == 0
	assert '/ 3 | 4 | 5 / 2 | 8 | 6 / 1 | 7 | 9 /' in proc.stdout


def test_solver_cli_prompt(puzzle):
	proc = run('solver.py', stdin='123\n' + puzzle.strip() + '\n')

	assert proc.returncode == 0
	assert "Row 1: Please enter the numbers from (L -> R). Mark unknown cells as '*'." in proc.stdout
	assert 'You must enter 1-9 or * for each cell in the row.' in proc.stdout


def test_solver_cli_malformed(tmp_path):
	path = tmp_path / 'puzzle.txt'
	path.write_text('*********\n' * 8)

	proc = run('solver.py', '-f', str(path))

	assert proc.returncode == 2
	assert 'Expected 9 rows' in proc.stderr


def test_solver_cli_no_solution(tmp_path, solution):
	solution[0][7] = 0
	solution[0][8] = 5
	path = tmp_path / 'puzzle.txt'
	path.write_text('\n'.join(''.join(str(v) if v else '*' for v in row) for row in solution))

	proc = run('solver.py', '-f', str(path))

	assert proc.returncode == 1
	assert 'No solution found' in proc.stderr


def test_benchmark_cli(puzzle):
	proc = run('benchmark.py', '-n', '2', stdin=puzzle)

	assert proc.returncode == 0
	assert '2 runs, 2 solved' in proc.stdout


def test_solver_cli_truncated_prompt(puzzle):
	proc = run('solver.py', stdin=puzzle.strip().splitlines()[0] + '\n')

	assert proc.returncode == 2
	assert 'Invalid puzzle: EOF' in proc.stderr


def test_solver_cli_missing_file(tmp_path):
	proc = run('solver.py', '-f', str(tmp_path / 'nope.txt'))

	assert proc.returncode == 2
	assert 'No such file' in proc.stderr


def test_benchmark_cli_missing_file(tmp_path):
	proc = run('benchmark.py', '-f', str(tmp_path / 'nope.txt'))

	assert proc.returncode == 2
	assert 'No such file' in proc.stderr


def test_benchmark_cli_no_runs(puzzle):
	proc = run('benchmark.py', '-n', '0', stdin=puzzle)

	assert proc.returncode == 2
	assert 'number of runs must be positive' in proc.stderr
