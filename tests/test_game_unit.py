import unittest

from game import (
    Coord,
    Game,
    GameOptions,
    InvalidBoardSize,
    MovePawn,
    PlayerOutOfRange,
    UnsupportedPlayerCount,
    WallType,
)


class TestGameSetup(unittest.TestCase):
    def test_given_defaults_when_constructed_then_nine_by_nine_two_players(self):
        g = Game()
        self.assertEqual(g.num_columns(), 9)
        self.assertEqual(g.num_rows(), 9)
        self.assertEqual(g.num_players(), 2)
        self.assertEqual(g.get_player_to_move(), 1)
        self.assertEqual(g.get_move_number(), 1)
        self.assertEqual(g.get_walls_remaining(1), 10)
        self.assertEqual(g.get_walls_remaining(2), 10)
        self.assertEqual(g.get_player_position(1), Coord('e', 1))
        self.assertEqual(g.get_player_position(2), Coord('e', 9))
        self.assertEqual(g.get_walls(), [])

    def test_given_four_players_when_constructed_then_side_midpoints_used(self):
        g = Game(num_players=4)
        self.assertEqual(g.get_player_position(3), Coord('a', 5))
        self.assertEqual(g.get_player_position(4), Coord('i', 5))

    def test_given_even_board_when_constructed_then_midpoint_rounds_down(self):
        g = Game(num_cols=8, num_rows=6, num_players=4, walls_per_player=5)
        self.assertEqual(g.get_player_position(1), Coord('d', 1))
        self.assertEqual(g.get_player_position(2), Coord('d', 6))
        self.assertEqual(g.get_player_position(3), Coord('a', 3))
        self.assertEqual(g.get_player_position(4), Coord('h', 3))
        self.assertEqual(g.get_walls_remaining(4), 5)

    def test_given_more_than_four_players_when_constructed_then_extra_players_unplaced(self):
        g = Game(num_players=6)
        self.assertIsNone(g.get_player_position(5))
        self.assertIsNone(g.get_player_position(6))

    def test_given_bad_configuration_when_constructed_then_fails_fast(self):
        with self.assertRaises(UnsupportedPlayerCount):
            Game(num_players=0)
        with self.assertRaises(InvalidBoardSize):
            Game(num_cols=1)
        with self.assertRaises(InvalidBoardSize):
            Game(num_cols=27)

    def test_given_options_when_building_then_same_as_keywords(self):
        g = Game.from_options(GameOptions(num_cols=7, num_rows=7, num_players=3, walls_per_player=6))
        self.assertEqual(g.num_columns(), 7)
        self.assertEqual(g.num_players(), 3)
        self.assertEqual(g.get_walls_remaining(3), 6)
        self.assertEqual(g.get_player_position(1), Coord('d', 1))


class TestGameAccessors(unittest.TestCase):
    def setUp(self):
        self.game = Game()

    def test_given_walls_remaining_when_set_then_read_back(self):
        self.game.set_walls_remaining(1, 8)
        self.assertEqual(self.game.get_walls_remaining(1), 8)
        self.assertEqual(self.game.get_walls_remaining(2), 10)

    def test_given_player_to_move_when_set_then_read_back(self):
        self.game.set_player_to_move(2)
        self.assertEqual(self.game.get_player_to_move(), 2)

    def test_given_move_number_when_set_then_read_back(self):
        self.game.set_move_number(7)
        self.assertEqual(self.game.get_move_number(), 7)

    def test_given_position_as_text_or_coord_when_set_then_read_back(self):
        self.game.set_player_position(1, 'c3')
        self.assertEqual(self.game.get_player_position(1), Coord('c', 3))
        self.game.set_player_position(2, Coord('d', 7))
        self.assertEqual(self.game.get_player_position(2), Coord('d', 7))

    def test_given_out_of_range_player_when_accessing_then_player_out_of_range(self):
        for bad in (0, 3, -1):
            with self.assertRaises(PlayerOutOfRange):
                self.game.get_walls_remaining(bad)
            with self.assertRaises(PlayerOutOfRange):
                self.game.get_player_position(bad)
            with self.assertRaises(PlayerOutOfRange):
                self.game.set_player_to_move(bad)
        with self.assertRaises(PlayerOutOfRange):
            self.game.set_walls_remaining(3, 1)

    def test_given_walls_when_bulk_set_then_replaced_and_sorted(self):
        self.game.take_action('a1h')
        self.game.set_walls([
            (WallType.VERTICAL, 'c4'),
            (WallType.HORIZONTAL, Coord('e', 2)),
            (WallType.HORIZONTAL, 'a7'),
        ])
        self.assertEqual(self.game.get_walls(), [
            (WallType.HORIZONTAL, Coord('a', 7)),
            (WallType.HORIZONTAL, Coord('e', 2)),
            (WallType.VERTICAL, Coord('c', 4)),
        ])

    def test_given_players_when_checking_goal_then_edges_match(self):
        g = Game(num_players=4)
        self.assertTrue(g.is_goal(1, 'c9'))
        self.assertFalse(g.is_goal(1, 'c8'))
        self.assertTrue(g.is_goal(2, 'h1'))
        self.assertTrue(g.is_goal(3, 'i4'))
        self.assertFalse(g.is_goal(3, 'a4'))
        self.assertTrue(g.is_goal(4, 'a4'))


class TestTakeAction(unittest.TestCase):
    def test_given_n_players_when_each_moves_once_then_turn_returns_to_player_one(self):
        for num_players in range(1, 11):
            with self.subTest(num_players=num_players):
                g = Game(num_players=num_players)
                for i in range(1, num_players + 1):
                    self.assertEqual(g.get_player_to_move(), i)
                    self.assertEqual(g.get_move_number(), 1)
                    g.take_action(MovePawn(Coord('a', 0)))
                self.assertEqual(g.get_player_to_move(), 1)
                self.assertEqual(g.get_move_number(), 2)

    def test_given_pawn_move_when_applied_then_position_overwritten_without_checks(self):
        g = Game()
        g.take_action('e5')  # not a legal step; applied anyway
        self.assertEqual(g.get_player_position(1), Coord('e', 5))
        self.assertEqual(g.get_player_to_move(), 2)

    def test_given_wall_when_applied_then_stored_and_budget_decremented(self):
        g = Game()
        g.take_action('e2h')
        g.take_action('c4v')
        self.assertEqual(g.get_walls(), [
            (WallType.HORIZONTAL, Coord('e', 2)),
            (WallType.VERTICAL, Coord('c', 4)),
        ])
        self.assertEqual(g.get_walls_remaining(1), 9)
        self.assertEqual(g.get_walls_remaining(2), 9)
        self.assertEqual(g.get_move_number(), 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
