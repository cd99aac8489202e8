from lightsoff.algebra import find_min_weight_solution, gf2_gauss
from lightsoff.bitmatrix import BitMatrix, MalformedInputError
from lightsoff.bitvector import WORD_BITS, BitVector, word_count
from lightsoff.board import apply_solution, create_field, press
from lightsoff.solver import LightsOffSolver, build_system, solve
