import unittest

from game import Coord, Game, InvalidSnapshot, WallType, game_to_json, json_to_game


class TestJsonSnapshots(unittest.TestCase):
    def test_given_fresh_game_when_serialising_then_camel_case_snapshot(self):
        obj = game_to_json(Game())
        self.assertEqual(obj, {
            "numCols": 9,
            "numRows": 9,
            "numPlayers": 2,
            "playerToMove": 1,
            "moveNumber": 1,
            "wallsRemaining": [10, 10],
            "playerPositions": ["e1", "e9"],
            "walls": [],
        })

    def test_given_played_game_when_roundtrip_then_state_preserved(self):
        g = Game(num_players=4)
        for action in ['e2', 'e2h', 'b5', 'c4v', 'e3']:
            g.take_action(action)
        restored = json_to_game(game_to_json(g))
        self.assertEqual(game_to_json(restored), game_to_json(g))
        self.assertEqual(restored.get_player_to_move(), 2)
        self.assertEqual(restored.get_move_number(), 2)
        self.assertEqual(restored.get_walls(), [(WallType.HORIZONTAL, Coord('e', 2)), (WallType.VERTICAL, Coord('c', 4))])
        self.assertEqual(restored.valid_actions(), g.valid_actions())

    def test_given_unplaced_players_when_serialising_then_null_positions(self):
        obj = game_to_json(Game(num_players=5))
        self.assertIsNone(obj["playerPositions"][4])
        self.assertIsNone(json_to_game(obj).get_player_position(5))

    def test_given_partial_snapshot_when_loading_then_defaults_fill_in(self):
        g = json_to_game({"numCols": 7, "numRows": 7})
        self.assertEqual(g.get_player_position(1), Coord('d', 1))
        self.assertEqual(g.get_walls_remaining(2), 10)

    def test_given_malformed_snapshots_when_loading_then_invalid_snapshot(self):
        good = game_to_json(Game())
        bad_cases = [
            None,
            [],
            dict(good, numPlayers=0),
            dict(good, wallsRemaining=[10]),
            dict(good, playerPositions=["e1", "zz"]),
            dict(good, walls=["e2"]),
            dict(good, walls=["e2x"]),
            dict(good, playerToMove=3),
            dict(good, moveNumber="x"),
        ]
        for obj in bad_cases:
            with self.subTest(obj=obj):
                with self.assertRaises(InvalidSnapshot):
                    json_to_game(obj)


if __name__ == '__main__':
    unittest.main(verbosity=2)
