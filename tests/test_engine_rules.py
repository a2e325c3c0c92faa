from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.board import Board  # noqa: E402
from checkers.game import Game, GameState, apply_move  # noqa: E402
from checkers.pieces import Cell, Rank, Side  # noqa: E402


def empty_game() -> Game:
    return Game(GameState(board=Board.empty()))


class RejectedMoveTests(unittest.TestCase):
    def assertUntouched(self, game: Game, before: Board) -> None:
        self.assertEqual(game.board, before)
        self.assertEqual(game.redScore(), 0)
        self.assertEqual(game.blackScore(), 0)
        self.assertEqual(len(game.history), 0)
        self.assertIsNone(game.mostRecentByPriority())

    def test_out_of_bounds_has_no_side_effects(self) -> None:
        game = Game()
        before = game.board.copy()
        for coords in ((2, 1, -1, 0), (2, 1, 8, 2), (-3, 0, 0, 0), (7, 8, 6, 7)):
            with self.subTest(coords=coords):
                self.assertFalse(game.applyMove("R", *coords))
        self.assertUntouched(game, before)

    def test_opponent_piece_is_rejected(self) -> None:
        game = Game()
        before = game.board.copy()
        self.assertFalse(game.applyMove("B", 2, 1, 3, 2))
        self.assertFalse(game.applyMove(Side.RED, 5, 0, 4, 1))
        self.assertUntouched(game, before)

    def test_empty_source_is_rejected(self) -> None:
        game = Game()
        before = game.board.copy()
        self.assertFalse(game.applyMove("R", 3, 0, 4, 1))
        self.assertUntouched(game, before)

    def test_occupied_destination_is_rejected(self) -> None:
        game = Game()
        before = game.board.copy()
        self.assertFalse(game.applyMove("R", 1, 0, 2, 1))
        self.assertUntouched(game, before)

    def test_unknown_player_symbol_raises(self) -> None:
        game = Game()
        with self.assertRaises(ValueError):
            game.applyMove("X", 2, 1, 3, 2)


class AppliedMoveTests(unittest.TestCase):
    def test_simple_move(self) -> None:
        game = Game()
        self.assertTrue(game.applyMove("R", 2, 1, 3, 2))
        self.assertIsNone(game.board.getPiece(2, 1))
        self.assertEqual(game.board.getPiece(3, 2), Cell(Side.RED))
        self.assertEqual(game.redScore(), 0)
        self.assertEqual(game.blackScore(), 0)
        self.assertEqual(game.lastMove(), "R(2,1)->(3,2)")

    def test_jump_captures_midpoint_and_scores(self) -> None:
        game = Game()
        game.board.setPiece(3, 2, Cell(Side.BLACK))

        self.assertTrue(game.applyMove("R", 2, 1, 4, 3))
        self.assertIsNone(game.board.getPiece(2, 1))
        self.assertIsNone(game.board.getPiece(3, 2))
        self.assertEqual(game.board.getPiece(4, 3), Cell(Side.RED))
        self.assertEqual(game.redScore(), 1)
        self.assertEqual(game.blackScore(), 0)
        self.assertEqual(game.mostRecentByPriority(), "R(2,1)->(4,3)")

    def test_black_jump_scores_for_black(self) -> None:
        game = Game()
        game.board.setPiece(4, 1, Cell(Side.RED))

        self.assertTrue(game.applyMove("B", 5, 0, 3, 2))
        self.assertIsNone(game.board.getPiece(4, 1))
        self.assertEqual(game.board.getPiece(3, 2), Cell(Side.BLACK))
        self.assertEqual(game.blackScore(), 1)
        self.assertEqual(game.redScore(), 0)

    def test_scores_accumulate(self) -> None:
        game = empty_game()
        game.board.setPiece(2, 1, Cell(Side.RED))
        game.board.setPiece(3, 2, Cell(Side.BLACK))
        game.board.setPiece(5, 4, Cell(Side.BLACK))

        self.assertTrue(game.applyMove("R", 2, 1, 4, 3))
        self.assertTrue(game.applyMove("R", 4, 3, 6, 5))
        self.assertEqual(game.redScore(), 2)
        self.assertEqual(game.board.countPieces(Side.BLACK), 0)

    def test_repeating_a_move_is_rejected(self) -> None:
        game = Game()
        self.assertTrue(game.applyMove("R", 2, 1, 3, 2))
        snapshot = game.boardSnapshot()
        self.assertFalse(game.applyMove("R", 2, 1, 3, 2))
        self.assertEqual(game.boardSnapshot(), snapshot)
        self.assertEqual(len(game.history), 1)

    def test_explicit_state_function(self) -> None:
        state = GameState()
        self.assertTrue(apply_move(state, Side.BLACK, 5, 2, 4, 3))
        self.assertEqual(state.board.getPiece(4, 3), Cell(Side.BLACK))
        self.assertEqual([str(move) for move in state.history], ["B(5,2)->(4,3)"])


class PromotionTests(unittest.TestCase):
    def test_red_man_crowned_on_row_zero(self) -> None:
        game = empty_game()
        game.board.setPiece(1, 2, Cell(Side.RED))
        self.assertTrue(game.applyMove("R", 1, 2, 0, 1))
        self.assertEqual(game.board.getPiece(0, 1), Cell(Side.RED, Rank.KING))
        self.assertEqual(game.boardSnapshot()[0][1], "K")

    def test_black_man_crowned_on_row_seven(self) -> None:
        game = empty_game()
        game.board.setPiece(6, 1, Cell(Side.BLACK))
        self.assertTrue(game.applyMove("B", 6, 1, 7, 0))
        self.assertTrue(game.board.getPiece(7, 0).is_king)

    def test_no_promotion_on_own_back_row(self) -> None:
        game = empty_game()
        game.board.setPiece(1, 2, Cell(Side.BLACK))
        self.assertTrue(game.applyMove("B", 1, 2, 0, 1))
        self.assertFalse(game.board.getPiece(0, 1).is_king)

    def test_jump_into_promotion_row(self) -> None:
        game = empty_game()
        game.board.setPiece(2, 3, Cell(Side.RED))
        game.board.setPiece(1, 2, Cell(Side.BLACK))
        self.assertTrue(game.applyMove("R", 2, 3, 0, 1))
        self.assertIsNone(game.board.getPiece(1, 2))
        self.assertEqual(game.board.getPiece(0, 1), Cell(Side.RED, Rank.KING))
        self.assertEqual(game.redScore(), 1)

    def test_moving_a_king_keeps_it_a_king(self) -> None:
        game = empty_game()
        game.board.setPiece(6, 1, Cell(Side.BLACK))
        self.assertTrue(game.applyMove("B", 6, 1, 7, 0))
        self.assertTrue(game.applyMove("B", 7, 0, 6, 1))
        self.assertEqual(game.board.getPiece(6, 1), Cell(Side.BLACK, Rank.KING))
        self.assertTrue(game.applyMove("B", 6, 1, 7, 2))
        self.assertEqual(game.board.getPiece(7, 2), Cell(Side.BLACK, Rank.KING))


class ResetTests(unittest.TestCase):
    def test_reset_restores_board_scores_and_history(self) -> None:
        game = Game()
        game.board.setPiece(3, 2, Cell(Side.BLACK))
        self.assertTrue(game.applyMove("R", 2, 1, 4, 3))

        game.reset()
        self.assertEqual(game.board, Board())
        self.assertEqual(game.redScore(), 0)
        self.assertEqual(len(game.history), 0)
        self.assertIsNone(game.mostRecentByPriority())
        self.assertIsNone(game.lastMove())


if __name__ == "__main__":
    unittest.main()
