"""Game logic for the sliding puzzle, memory match and tic-tac-toe."""
