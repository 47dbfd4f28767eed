"""
tests/test_puzzles.py — puzzle solvers on small hand-written Intcode programs
============================================================================

Run
---
    pytest tests/test_puzzles.py -v
"""
from __future__ import annotations

import pytest

from intcode.program import ParseError, format_program
from intcode.puzzles import SOLVERS, SolverError, UnknownPuzzle, solve
from intcode.puzzles import day01, day02, day05, day09, day11, day13, day15
from intcode.puzzles.arcade import Game, Joystick, Screen, Tile
from intcode.puzzles.geometry import Direction, Point


# ── Programs ─────────────────────────────────────────────────────────────────

# Writes noun + verb to address 0.
SUM_NOUN_VERB = "1101,0,0,0,99"

QUINE = "109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99"

# Paint white/right, black/right, white/right, then halt.
ROBOT = "3,100,104,1,104,1,3,100,104,0,104,1,3,100,104,1,104,1,99"

# Address 0 survives being patched to 2 (MUL of zero cells).
ARCADE = format_program([
    1, 50, 50, 50,
    104, 1, 104, 1, 104, 2,        # block  (1,1)
    104, 0, 104, 2, 104, 3,        # paddle (0,2)
    104, 2, 104, 2, 104, 4,        # ball   (2,2)
    3, 51,                         # joystick
    104, 1, 104, 1, 104, 0,        # block (1,1) destroyed
    104, -1, 104, 0, 104, 42,      # score 42
    99,
])

ARCADE_LOSING = format_program([
    1, 50, 50, 50,
    104, 1, 104, 1, 104, 2,
    104, 0, 104, 2, 104, 3,
    104, 2, 104, 2, 104, 4,
    3, 51,
    104, -1, 104, 0, 104, 7,
    99,
])

# Corridor x = 0..4 along y = 0, oxygen system at x = 1, walls everywhere else.
# [100] command, [101] scratch flag, [102] droid x.
CORRIDOR = format_program([
    3, 100,
    1008, 100, 4, 101,  1005, 101, 21,      # east?
    1008, 100, 3, 101,  1005, 101, 35,      # west?
    104, 0,  1105, 1, 0,                    # north/south: wall
    1008, 102, 4, 101,  1005, 101, 61,      # 21 east
    1001, 102, 1, 102,  1105, 1, 49,
    1008, 102, 0, 101,  1005, 101, 61,      # 35 west
    1001, 102, -1, 102,  1105, 1, 49,
    1008, 102, 1, 101,  1005, 101, 66,      # 49 arrived
    104, 1,  1105, 1, 0,
    104, 0,  1105, 1, 0,                    # 61 wall
    104, 2,  1105, 1, 0,                    # 66 oxygen
    99,
])

ALL_WALLS = "3,10,104,0,1105,1,0"


# ── Registry ─────────────────────────────────────────────────────────────────

class TestRegistry:
    def test_days(self):
        assert sorted(SOLVERS) == [1, 2, 5, 9, 11, 13, 15]

    def test_solve_dispatches(self):
        assert solve(1, 1, "12") == "2"
        assert solve(1, 2, "1969") == "966"

    @pytest.mark.parametrize("day, part", [(3, 1), (1, 3)])
    def test_unknown(self, day, part):
        with pytest.raises(UnknownPuzzle):
            solve(day, part, "1")

    def test_unknown_is_solver_error(self):
        assert issubclass(UnknownPuzzle, SolverError)
        assert not issubclass(UnknownPuzzle, KeyError)


# ── Geometry ─────────────────────────────────────────────────────────────────

class TestGeometry:
    def test_point_add(self):
        assert Point(1, 2) + Point(-3, 4) == Point(-2, 6)

    def test_rotation(self):
        assert Direction.NORTH.rotate_left() is Direction.WEST
        assert Direction.NORTH.rotate_right() is Direction.EAST
        assert Direction.WEST.rotate_right() is Direction.NORTH

    def test_four_turns_return(self):
        d = Direction.SOUTH
        for _ in range(4):
            d = d.rotate_left()
        assert d is Direction.SOUTH


# ── Day 1 ────────────────────────────────────────────────────────────────────

class TestDay01:
    MASSES = "12\n14\n1969\n100756\n"

    @pytest.mark.parametrize("mass, fuel", [(12, 2), (14, 2), (1969, 654), (100756, 33583)])
    def test_fuel(self, mass, fuel):
        assert day01.fuel(mass) == fuel

    @pytest.mark.parametrize("mass, fuel", [(14, 2), (1969, 966), (100756, 50346), (2, 0)])
    def test_fuel_with_fuel(self, mass, fuel):
        assert day01.fuel_with_fuel(mass) == fuel

    def test_parts(self):
        assert day01.part1(self.MASSES) == "34241"
        assert day01.part2(self.MASSES) == "51316"

    def test_bad_line(self):
        with pytest.raises(ParseError):
            day01.part1("12\nabc\n")

    @pytest.mark.parametrize("line", ["\u00b2", "-5", "1.5"])
    def test_non_decimal_line(self, line):
        with pytest.raises(ParseError) as exc:
            day01.part1(f"12\n{line}\n")
        assert exc.value.token == line
        assert exc.value.index == 1


# ── Day 2 ────────────────────────────────────────────────────────────────────

class TestDay02:
    def test_part1_patches_noun_and_verb(self):
        assert day02.part1(SUM_NOUN_VERB) == "14"

    def test_reference_program(self):
        assert day02.run_with([1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50], 9, 10) == 3500

    def test_part2_search_order(self):
        assert day02.part2(SUM_NOUN_VERB, target=150) == "5199"

    def test_part2_no_solution(self):
        with pytest.raises(SolverError):
            day02.part2(SUM_NOUN_VERB, target=1000)


# ── Day 5 / Day 9 ────────────────────────────────────────────────────────────

class TestDiagnostics:
    def test_day05_system_ids(self):
        equals_five = "3,9,8,9,10,9,4,9,99,-1,5"
        assert day05.part1(equals_five) == "[0]"
        assert day05.part2(equals_five) == "[1]"

    def test_day05_output_list(self):
        assert day05.part1("3,0,4,0,104,7,99") == "[1, 7]"

    def test_day09_quine(self):
        assert day09.part1(QUINE) == "[" + QUINE.replace(",", ", ") + "]"

    def test_day09_boost_mode(self):
        assert day09.part2("3,9,4,9,99") == "[2]"


# ── Day 11 ───────────────────────────────────────────────────────────────────

class TestDay11:
    def test_painter_events(self):
        events = list(day11.HullPainter(ROBOT))
        assert events == [
            (Point(0, 0), day11.WHITE),
            (Point(1, 0), day11.BLACK),
            (Point(1, -1), day11.WHITE),
        ]

    def test_part1_counts_panels(self):
        assert day11.part1(ROBOT) == "3"

    def test_part2_renders_north_up(self):
        assert day11.part2(ROBOT) == "# \n #"

    def test_render_empty(self):
        assert day11.render(set()) == ""

    def test_bad_turn(self):
        with pytest.raises(SolverError):
            list(day11.HullPainter("3,100,104,1,104,5,99"))

    def test_blocked_without_painting(self):
        with pytest.raises(SolverError, match="without painting"):
            list(day11.HullPainter("3,100,3,100,99"))

    def test_halt_without_painting_is_empty(self):
        assert list(day11.HullPainter("3,100,99")) == []
        assert day11.part1("3,100,99") == "0"


# ── Day 13 ───────────────────────────────────────────────────────────────────

class TestArcade:
    def test_screen_update(self):
        screen = Screen()
        screen.update([0, 0, 2, 1, 0, 2, 2, 0, 3, -1, 0, 9])
        assert screen.remaining_blocks == 2
        assert screen.paddle == Point(2, 0)
        assert screen.score == 9
        screen.update([0, 0, 0])
        assert screen.remaining_blocks == 1
        assert screen.tiles[Point(0, 0)] == Tile.EMPTY

    def test_screen_rejects_partial_triple(self):
        with pytest.raises(SolverError):
            Screen().update([1, 2])

    def test_screen_rejects_unknown_tile(self):
        with pytest.raises(SolverError):
            Screen().update([1, 2, 9])

    def test_screen_render(self):
        screen = Screen()
        screen.update([0, 0, 1, 1, 0, 4])
        assert str(screen) == "█■\nScore: 0"

    def test_game_follows_ball(self):
        game = Game(ARCADE, has_credits=True)
        assert not game.halted
        assert game.screen.ball == Point(2, 2)
        assert game.follow_ball() is Joystick.RIGHT

    def test_credits_written_to_address_zero(self):
        assert Game(ARCADE, has_credits=True).computer.get_memory_value(0) == 2
        assert Game(ARCADE).computer.get_memory_value(0) == 1

    def test_part1_counts_blocks(self):
        program = "104,1,104,1,104,2,104,2,104,1,104,2,104,0,104,0,104,1,99"
        assert day13.part1(program) == "2"

    def test_part2_returns_final_score(self):
        assert day13.part2(ARCADE) == "42"

    def test_part2_game_over(self):
        with pytest.raises(SolverError, match="blocks left"):
            day13.part2(ARCADE_LOSING)


# ── Day 15 ───────────────────────────────────────────────────────────────────

class TestDay15:
    def test_maze_visits_corridor(self):
        nodes = list(day15.Maze.from_text(CORRIDOR))
        assert [n.point for n in nodes] == [Point(x, 0) for x in range(5)]
        assert [n.distance for n in nodes] == [0, 1, 2, 3, 4]
        assert [n.oxygen for n in nodes] == [False, True, False, False, False]

    def test_frontier_computers_are_independent(self):
        nodes = list(day15.Maze.from_text(CORRIDOR))
        assert [n.computer.get_memory_value(102) for n in nodes] == [0, 1, 2, 3, 4]

    def test_part1_distance_to_oxygen(self):
        assert day15.part1(CORRIDOR) == "1"

    def test_part2_fill_time(self):
        assert day15.part2(CORRIDOR) == "3"

    def test_no_oxygen(self):
        with pytest.raises(SolverError):
            day15.part1(ALL_WALLS)
