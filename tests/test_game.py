"""
Tests for SnakeGame - the per-tick update, fruit placement and drawing.
"""

import random
from unittest.mock import Mock

import pytest

from termsnake.domain.board import Board
from termsnake.domain.constants import BODY, FLOOR, FRUIT, HEAD, LEFT, LOST, RIGHT, RUNNING, WALL
from termsnake.domain.errors import GameOver
from termsnake.domain.game_state import GameState
from termsnake.domain.snake import Snake
from termsnake.game import SnakeGame
from termsnake.services.canvas import TextCanvas


class TestBoard:
    """Tests for the Board entity."""

    def test_contains(self):
        board = Board(20, 20)
        assert board.contains((0, 0))
        assert board.contains((19, 19))
        assert not board.contains((20, 0))
        assert not board.contains((0, -1))

    def test_cells_cover_board(self):
        board = Board(3, 2)
        assert list(board.cells()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_random_cell_in_bounds(self):
        board = Board(4, 3)
        rng = random.Random(1)
        for _ in range(100):
            assert board.contains(board.random_cell(rng))

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_size_raises(self, width, height):
        with pytest.raises(ValueError):
            Board(width, height)


class TestSnakeGameInitialization:
    """Tests for a new game."""

    def test_defaults(self):
        game = SnakeGame()
        assert game.width == 20
        assert game.height == 20
        assert game.status == RUNNING
        assert game.game_over is False
        assert game.score == 0
        assert game.tick == 0
        assert game.snake.positions == [(2, 0), (1, 0), (0, 0)]

    def test_fruit_starts_in_the_middle(self):
        game = SnakeGame()
        assert game.fruit == (10, 10)

    def test_fruit_moves_when_middle_is_taken(self):
        snake = Snake([(2, 1), (1, 1), (0, 1)])
        game = SnakeGame(width=4, height=3, snake=snake, seed=0)
        assert not snake.has_segment_at(game.fruit)
        assert game.board.contains(game.fruit)

    @pytest.mark.parametrize("width,height", [(1, 5), (2, 2), (3, 1)])
    def test_board_too_small_for_starting_snake(self, width, height):
        with pytest.raises(ValueError):
            SnakeGame(width=width, height=height)

    def test_smallest_board_starts_on_board(self):
        game = SnakeGame(width=3, height=2)
        assert all(game.board.contains(pos) for pos in game.snake.positions)
        assert not game.snake.has_segment_at(game.fruit)

    def test_snake_rules_win_over_arguments(self):
        snake = Snake(edge_policy=WALL)
        game = SnakeGame(snake=snake)
        assert game.edge_policy == WALL


class TestUpdate:
    """Tests for SnakeGame.update()."""

    def test_plain_move(self):
        """Without fruit ahead, one update is one advance."""
        game = SnakeGame()
        game.update()

        assert game.snake.positions == [(3, 0), (2, 0), (1, 0)]
        assert game.score == 0
        assert game.tick == 1
        assert game.fruit == (10, 10)

    def test_eating_fruit_grows_snake(self):
        """Fruit at (3, 0): one update eats it, grows and respawns it."""
        game = SnakeGame(seed=42)
        game.set_fruit((3, 0))

        game.update()

        assert game.snake.fruits_eaten == 1
        assert len(game.snake) == 4
        assert game.snake.positions == [(3, 0), (2, 0), (1, 0), (0, 0)]
        assert [s.kind for s in game.snake.segments] == [HEAD, BODY, BODY, BODY]
        assert game.fruit != (3, 0)
        assert not game.snake.has_segment_at(game.fruit)

    def test_fruit_under_head_is_eaten(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        game = SnakeGame(snake=snake, seed=1)
        game.fruit = (5, 5)

        game.update()

        assert game.score == 1
        assert game.snake.positions == [(6, 5), (5, 5), (4, 5), (3, 5)]

    def test_length_tracks_fruits_eaten(self):
        """Length is always the initial length plus fruits eaten."""
        game = SnakeGame(seed=7)
        for step in range(30):
            if step % 3 == 0:
                game.set_fruit(game.snake.next_head(game.board))
            game.update()
            assert len(game.snake) == 3 + game.score

        assert game.score >= 10

    def test_self_collision_ends_game(self):
        """A head on the body loses and leaves the snake where it was."""
        snake = Snake([(2, 2), (3, 2), (3, 3), (2, 3), (2, 2)])
        game = SnakeGame(snake=snake)
        before = snake.positions

        with pytest.raises(GameOver) as exc_info:
            game.update()

        assert exc_info.value.reason == "self"
        assert str(exc_info.value) == "Snake ate itself"
        assert game.status == LOST
        assert game.game_over is True
        assert game.death_reason == "self"
        assert game.snake.positions == before
        assert game.tick == 0

    def test_lost_game_stays_lost(self):
        snake = Snake([(2, 2), (3, 2), (3, 3), (2, 3), (2, 2)])
        game = SnakeGame(snake=snake)
        with pytest.raises(GameOver):
            game.update()

        before = game.snake.positions
        with pytest.raises(GameOver):
            game.update()
        assert game.snake.positions == before
        assert game.tick == 0

    def test_reversal_without_guard_loses_next_tick(self):
        game = SnakeGame(reversal_guard=False)
        game.snake.set_direction(LEFT)

        game.update()
        assert game.snake.head == (1, 0)

        with pytest.raises(GameOver) as exc_info:
            game.update()
        assert exc_info.value.reason == "self"

    def test_reversal_with_guard_keeps_going(self):
        game = SnakeGame()
        game.snake.set_direction(LEFT)
        game.update()
        assert game.snake.direction == RIGHT
        assert game.snake.head == (3, 0)

    def test_wall_hit_ends_game(self):
        snake = Snake([(19, 5), (18, 5), (17, 5)], direction=RIGHT, edge_policy=WALL)
        game = SnakeGame(snake=snake)

        game.update()
        assert game.snake.head == (20, 5)

        with pytest.raises(GameOver) as exc_info:
            game.update()
        assert exc_info.value.reason == "wall"
        assert game.death_reason == "wall"

    def test_wall_hit_at_zero(self):
        snake = Snake([(0, 5), (1, 5), (2, 5)], direction=LEFT, edge_policy=WALL)
        game = SnakeGame(snake=snake)

        game.update()
        with pytest.raises(GameOver) as exc_info:
            game.update()
        assert exc_info.value.reason == "wall"

    def test_wrap_never_hits_wall(self):
        game = SnakeGame(seed=3)
        for _ in range(45):
            game.update()
        assert game.status == RUNNING
        assert game.snake.head == (7, 0)

    def test_game_over_carries_score(self):
        game = SnakeGame(reversal_guard=False, seed=5)
        game.set_fruit((3, 0))
        game.update()
        game.snake.set_direction(LEFT)
        game.update()

        with pytest.raises(GameOver) as exc_info:
            game.update()
        assert exc_info.value.score == 1
        assert exc_info.value.ticks == 2


class TestFruit:
    """Tests for fruit placement."""

    def test_respawn_avoids_snake(self):
        snake = Snake([(x, 0) for x in range(9, -1, -1)])
        game = SnakeGame(width=10, height=3, snake=snake, seed=11)
        for _ in range(200):
            game.respawn_fruit()
            assert not snake.has_segment_at(game.fruit)
            assert game.board.contains(game.fruit)

    def test_respawn_uses_injected_rng(self):
        first = SnakeGame(rng=random.Random(99))
        second = SnakeGame(rng=random.Random(99))
        first.respawn_fruit()
        second.respawn_fruit()
        assert first.fruit == second.fruit

    def test_full_board_ends_game(self):
        snake = Snake([(2, 0), (1, 0), (0, 0)])
        game = SnakeGame(width=4, height=1, snake=snake, seed=0)
        assert game.fruit == (3, 0)

        with pytest.raises(GameOver) as exc_info:
            game.update()
        assert exc_info.value.reason == "board_full"
        assert len(game.snake) == 4

    def test_overlapping_segments_leave_a_free_cell(self):
        """Six segments on a 3x2 board, two sharing a cell: (0, 1) is still free."""
        snake = Snake([(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 0)])
        game = SnakeGame(width=3, height=2, snake=snake, seed=0)
        assert game.fruit == (0, 1)

        game.respawn_fruit()
        assert game.fruit == (0, 1)
        assert game.status == RUNNING

    def test_set_fruit_out_of_bounds(self):
        game = SnakeGame()
        with pytest.raises(ValueError):
            game.set_fruit((20, 0))

    def test_set_fruit_on_snake(self):
        game = SnakeGame()
        with pytest.raises(ValueError):
            game.set_fruit((1, 0))


class TestDraw:
    """Tests for SnakeGame.draw()."""

    def test_draw_order(self):
        """Floor first, then fruit, then score, then the snake, then flush."""
        game = SnakeGame()
        canvas = Mock()

        game.draw(canvas)

        names = [c[0] for c in canvas.method_calls]
        assert names[-1] == "flush"
        floor_calls = [c for c in canvas.method_calls if c[0] == "draw_cell" and c[1][1] == FLOOR]
        assert len(floor_calls) == 20 * 20 - 3 - 1

        tail = canvas.method_calls[len(floor_calls):]
        assert tail[0][0] == "draw_cell" and tail[0][1] == ((10, 10), FRUIT)
        assert tail[1][0] == "draw_score" and tail[1][1] == (0,)
        assert [c[1] for c in tail[2:5]] == [((2, 0), HEAD), ((1, 0), BODY), ((0, 0), BODY)]

    def test_floor_skips_fruit_and_snake(self):
        game = SnakeGame()
        canvas = Mock()
        game.draw(canvas)

        floor_cells = {
            c[1][0] for c in canvas.method_calls if c[0] == "draw_cell" and c[1][1] == FLOOR
        }
        assert (10, 10) not in floor_cells
        assert (2, 0) not in floor_cells
        assert (3, 0) in floor_cells

    def test_draw_to_text_canvas(self):
        game = SnakeGame(width=6, height=3)
        canvas = TextCanvas(6, 3)

        game.draw(canvas)

        assert canvas.grid[0] == list("ooO...")
        assert canvas.grid[1] == list("...F..")
        assert canvas.score == 0
        assert canvas.frames == 1


class TestGameState:
    """Tests for GameState snapshots."""

    def test_get_current_state(self):
        game = SnakeGame()
        state = game.get_current_state()

        assert isinstance(state, GameState)
        assert state.tick == 0
        assert state.snake_positions == [(2, 0), (1, 0), (0, 0)]
        assert state.head == (2, 0)
        assert state.fruit == (10, 10)
        assert state.direction == RIGHT
        assert state.status == RUNNING

    def test_state_is_a_snapshot(self):
        game = SnakeGame()
        state = game.get_current_state()
        game.update()
        assert state.snake_positions == [(2, 0), (1, 0), (0, 0)]

    def test_print_board(self):
        game = SnakeGame(width=5, height=3)
        assert game.print_board() == "ooO..\n..F..\n....."

    def test_repr(self):
        state = SnakeGame().get_current_state()
        assert "tick=0" in repr(state)
        assert "score=0" in repr(state)
