"""Tests for the movement resolver."""
from __future__ import annotations

from depot_field import Direction, Field, Move, Rect, intent_vector, parse_directions, resolve_move

FIELD = Field(800, 600)
HALF = 15.0
SPEED = 5.0


class TestIntentVector:
    def test_single_direction(self) -> None:
        assert intent_vector({Direction.RIGHT}, SPEED) == (5.0, 0.0)
        assert intent_vector({Direction.UP}, SPEED) == (0.0, -5.0)

    def test_diagonal_not_normalized(self) -> None:
        assert intent_vector({Direction.DOWN, Direction.LEFT}, SPEED) == (-5.0, 5.0)

    def test_opposites_cancel(self) -> None:
        assert intent_vector({Direction.LEFT, Direction.RIGHT}, SPEED) == (0.0, 0.0)

    def test_none_held(self) -> None:
        assert intent_vector(set(), SPEED) == (0.0, 0.0)


class TestParseDirections:
    def test_strings_and_members(self) -> None:
        held = parse_directions(["up", Direction.LEFT])
        assert held == frozenset({Direction.UP, Direction.LEFT})

    def test_unknown_names_dropped(self) -> None:
        assert parse_directions(["up", "jump"]) == frozenset({Direction.UP})


class TestResolveMove:
    def test_moves_freely(self) -> None:
        move = resolve_move((400.0, 300.0), {Direction.RIGHT}, FIELD, HALF, SPEED)
        assert move == Move((405.0, 300.0))

    def test_no_intent_stays(self) -> None:
        move = resolve_move((400.0, 300.0), set(), FIELD, HALF, SPEED)
        assert move == Move((400.0, 300.0))

    def test_at_min_boundary_moving_outward_stays(self) -> None:
        move = resolve_move((HALF, HALF), {Direction.LEFT, Direction.UP}, FIELD, HALF, SPEED)
        assert move.position == (HALF, HALF)
        assert not move.blocked

    def test_clamped_to_max_boundary(self) -> None:
        move = resolve_move((783.0, 300.0), {Direction.RIGHT}, FIELD, HALF, SPEED)
        assert move.position == (785.0, 300.0)

    def test_clamp_is_per_axis(self) -> None:
        move = resolve_move((HALF, 300.0), {Direction.LEFT, Direction.DOWN}, FIELD, HALF, SPEED)
        assert move.position == (HALF, 305.0)

    def test_overlap_rejects_move(self) -> None:
        wall = Rect(415, 250, 100, 100)
        move = resolve_move((400.0, 300.0), {Direction.RIGHT}, FIELD, HALF, SPEED, [wall])
        assert move.position == (400.0, 300.0)
        assert move.blocked

    def test_no_axis_sliding(self) -> None:
        """Diagonal into a wall is rejected whole, not reduced to the free axis."""
        wall = Rect(418, 0, 100, 600)
        move = resolve_move(
            (400.0, 300.0), {Direction.RIGHT, Direction.DOWN}, FIELD, HALF, SPEED, [wall]
        )
        assert move.position == (400.0, 300.0)
        assert move.blocked

    def test_touching_wall_is_allowed(self) -> None:
        wall = Rect(420, 250, 100, 100)
        move = resolve_move((400.0, 300.0), {Direction.RIGHT}, FIELD, HALF, 5.0, [wall])
        assert move.position == (405.0, 300.0)
        assert not move.blocked

    def test_moving_away_from_wall(self) -> None:
        wall = Rect(420, 250, 100, 100)
        move = resolve_move((405.0, 300.0), {Direction.LEFT}, FIELD, HALF, SPEED, [wall])
        assert move.position == (400.0, 300.0)
