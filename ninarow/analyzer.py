# ninarow/analyzer.py
from typing import Any, Dict, List

from ninarow.core.board import Board, GameOver
from ninarow.core.types import GameResult, Player

# Labels by how many lattice steps a move gives away relative to the best move.
# 0 => "Best move", 1 => "Mistake" (win -> draw, draw -> loss), 2 => "Blunder" (win -> loss)
LABELS = {0: "Best move", 1: "Mistake", 2: "Blunder"}


class Analyzer:
    def __init__(self, search_engine):
        self.search_engine = search_engine

    def _from_player_pov(self, result: GameResult, player: Player) -> int:
        """
        Turn a GameResult into a rank from the moving player's POV:
          +1 = player wins, 0 = draw, -1 = player loses
        """
        return result.rank if player is Player.FIRST else -result.rank

    def _child_result(self, board: Board, index: int) -> GameResult:
        board.apply_move(index)
        try:
            return self.search_engine.search(board).result
        finally:
            board.undo_move()

    def analyze_position(self, board: Board) -> List[Dict[str, Any]]:
        """
        Outcome of every legal move for the side to move, with the two
        ordering heuristics for reference. The board is left unchanged.
        """
        player = board.turn
        evaluator = self.search_engine.evaluator
        report = []
        if board.is_game_over():
            return report
        for index in board.legal_moves():
            board.apply_move(index)
            line_potential = evaluator.line_potential(board, player)
            near_win = evaluator.near_win(board, player)
            board.undo_move()
            result = self._child_result(board, index)
            report.append({
                "index": index,
                "result": result.value,
                "pov": self._from_player_pov(result, player),
                "line_potential": line_potential,
                "near_win": near_win,
            })
        return report

    def classify_move(self, board: Board, index: int) -> Dict[str, Any]:
        """
        Classify a single move.
        - board: position BEFORE the move (unchanged by this function).
        - index: the move the player chose.
        Raises MoveError if the move is not legal, GameOver if the game has ended.
        """
        if board.is_game_over():
            raise GameOver(f"Game is already over ({board.classify_result().value})")
        player = board.turn
        best_index, best_stats = self.search_engine.search_best_move(board.copy())
        best_pov = self._from_player_pov(best_stats.result, player)

        board.apply_move(index)
        try:
            finished = board.classify_result()
            if finished.is_terminal:
                result = finished
            else:
                result = self.search_engine.search(board).result
        finally:
            board.undo_move()
        pov = self._from_player_pov(result, player)

        if finished.winner is player:
            label = "Winning move"
        else:
            label = LABELS[max(0, best_pov - pov)]

        return {
            "index": index,
            "result": result.value,
            "best_move": best_index,
            "best_result": best_stats.result.value,
            "delta_vs_best": best_pov - pov,
            "label": label,
            "player": player.symbol,
        }

    def analyze_game(self, size: int, moves: List[int]) -> List[Dict[str, Any]]:
        """
        Analyze a list of moves from the empty board. Returns a report per move.
        """
        board = Board(size)
        report = []
        for index in moves:
            report.append(self.classify_move(board, index))
            board.apply_move(index)
        return report
