from backend.engine.tictactoe.game import WIN_LINES, Outcome, TicTacToe

__all__ = ["WIN_LINES", "Outcome", "TicTacToe"]
