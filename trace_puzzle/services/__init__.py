from trace_puzzle.services.puzzle_services import PuzzleServices
from trace_puzzle.services.puzzle_validator import is_unique_solution, is_valid_puzzle
from trace_puzzle.services.solution_checker import check_solution
from trace_puzzle.services.line_manager import add_lines_from_cells, remove_lines_from_cell, is_valid_cell
from trace_puzzle.services.path_counter import count_paths, is_unique, MULTIPLE_PATHS
from trace_puzzle.services.walk_builders import (
    generate_primary_puzzle, generate_unique_primary_puzzle, GenerationAbandoned
)
