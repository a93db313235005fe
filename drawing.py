#!/usr/bin/env python


###########
# Imports #
###########

import cairo
import io
import numpy as np

from PIL import Image


##############
# Parameters #
##############

FONT = 'Sans'

GIVEN = (0, 0, 0)
SEARCHED = (0.1, 0.3, 0.8)


#############
# Functions #
#############

def draw(board, size=1024, font=FONT):
	'''Draw a board, given digits in black and searched ones in blue.

	Parameters
	----------
	board : solver.Board
		board to draw
	size : int
		image width and height in pixels
	font : str
		font family

	Returns
	-------
	PIL.Image
		RGB image of the grid
	'''

	grid = board.values()
	locked = board.locked.reshape(9, 9)

	with cairo.ImageSurface(cairo.Format.RGB24, size, size) as surface:
		ctx = cairo.Context(surface)
		ctx.scale(size, size)

		# Parameters
		n = 3

		start = 0.05
		end = 0.95

		step = (end - start) / n ** 2

		# Background
		ctx.rectangle(0, 0, 1, 1)
		ctx.set_source_rgb(1, 1, 1)
		ctx.fill()

		# Grid
		ctx.rectangle(start, start, end - start, end - start)
		ctx.set_source_rgb(0, 0, 0)
		ctx.set_line_width(0.008)
		ctx.stroke()

		for i in range(1, n ** 2):
			x = start + i * step

			if i % n == 0:
				ctx.set_line_width(0.008)
			else:
				ctx.set_line_width(0.003)

			ctx.move_to(start, x)
			ctx.line_to(end, x)
			ctx.stroke()

			ctx.move_to(x, start)
			ctx.line_to(x, end)
			ctx.stroke()

		# Numbers
		ctx.select_font_face(
			font,
			cairo.FONT_SLANT_NORMAL,
			cairo.FONT_WEIGHT_NORMAL
		)
		ctx.set_font_size(0.07 * (end - start))

		for (i, j), number in np.ndenumerate(grid):
			if number == 0:
				continue

			ctx.set_source_rgb(*(GIVEN if locked[i, j] else SEARCHED))

			_, _, width, height, _, _ = ctx.text_extents(str(number))

			ctx.move_to(start + (j + 1 / 2) * step - width / 2, start + (i + 1 / 2) * step + height / 2)
			ctx.show_text(str(number))

		f = io.BytesIO()
		surface.write_to_png(f)

	f.seek(0)

	return Image.open(f).convert('RGB')


########
# Main #
########

if __name__ == '__main__':
	# Imports
	import argparse

	from solver import Board, parse, solve

	# Parser
	parser = argparse.ArgumentParser(description='Draw Sudoku')
	parser.add_argument('file', help='puzzle file')
	parser.add_argument('-o', '--output', default='sudoku.png')
	parser.add_argument('-s', '--size', type=int, default=1024)
	parser.add_argument('-u', '--unsolved', default=False, action='store_true', help='draw the puzzle as given')
	args = parser.parse_args()

	with open(args.file) as f:
		board = Board(parse(f.read()))

	if not args.unsolved:
		solve(board)

	draw(board, size=args.size).save(args.output)
