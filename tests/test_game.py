import pytest

from snakegame import (
    CFG,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    BoardFullError,
    Config,
    FoodPlacer,
    GameState,
    StepOutcome,
    new_game_state,
    step_game,
    try_turn,
)


def make_state(snake, direction, food=(0, 0), base=150, running=True) -> GameState:
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=0,
        tick_period_ms=base,
        base_tick_period_ms=base,
        running=running,
    )


@pytest.fixture
def placer() -> FoodPlacer:
    return FoodPlacer.seeded(7)


def test_new_game_state_defaults():
    state = new_game_state(150)
    assert state.snake == [(10, 10)]
    assert state.food == (15, 15)
    assert state.direction == UP
    assert state.score == 0
    assert not state.running and not state.over
    assert state.tick_period_ms == state.base_tick_period_ms == 150


def test_eat_grows_and_scores(placer):
    state = make_state([(10, 10)], UP, food=(10, 9))

    outcome = step_game(state, placer)

    assert outcome is StepOutcome.ATE
    assert state.head == (10, 9)
    assert state.score == 10
    assert len(state.snake) == 2
    assert state.food not in state.snake


def test_wall_collision_leaves_snake_untouched(placer):
    state = make_state([(0, 5)], LEFT, food=(3, 3))

    outcome = step_game(state, placer)

    assert outcome is StepOutcome.COLLIDED
    assert state.over is True
    assert state.running is False
    assert state.snake == [(0, 5)]
    assert state.food == (3, 3)


def test_moving_back_into_neck_collides(placer):
    state = make_state([(5, 5), (5, 6), (5, 7)], DOWN)

    assert step_game(state, placer) is StepOutcome.COLLIDED
    assert state.over
    assert state.snake == [(5, 5), (5, 6), (5, 7)]


def test_tail_cell_still_counts_as_occupied(placer):
    # head at (5,5), tail at (5,6): stepping down hits the tail before it moves
    state = make_state([(5, 5), (6, 5), (6, 6), (5, 6)], DOWN, food=(0, 0))

    assert step_game(state, placer) is StepOutcome.COLLIDED


def test_moves_preserve_length(placer):
    snake = [(10, 10), (10, 11), (10, 12)]
    state = make_state(snake, UP, food=(0, 0))

    for _ in range(8):
        assert step_game(state, placer) is StepOutcome.MOVED

    assert len(state.snake) == 3
    assert state.head == (10, 2)
    assert state.snake[-1] == (10, 4)


def test_pending_direction_committed_on_tick(placer):
    state = make_state([(10, 10)], UP, food=(0, 0))

    assert try_turn(state, RIGHT)
    assert state.direction == UP
    step_game(state, placer)
    assert state.direction == RIGHT
    assert state.head == (11, 10)


def test_reverse_turn_is_rejected():
    state = make_state([(10, 10), (10, 11)], UP)

    assert try_turn(state, DOWN) is False
    assert state.pending == UP
    assert state.direction == UP


def test_reverse_checked_against_committed_direction():
    state = make_state([(10, 10), (10, 11)], UP)

    assert try_turn(state, LEFT)
    # judged against the committed UP, not the queued LEFT
    assert try_turn(state, RIGHT)
    assert try_turn(state, DOWN) is False
    assert state.pending == RIGHT


def test_repeated_turn_is_noop():
    state = make_state([(10, 10)], UP)

    assert try_turn(state, UP) is False
    assert try_turn(state, LEFT) is True
    assert try_turn(state, LEFT) is False
    assert state.pending == LEFT


def test_turn_ignored_unless_running():
    paused = make_state([(10, 10)], UP, running=False)
    assert try_turn(paused, LEFT) is False

    over = make_state([(10, 10)], UP)
    over.over = True
    over.running = False
    assert try_turn(over, LEFT) is False


def eat_once(state: GameState, placer: FoodPlacer) -> None:
    state.snake = [(10, 10)]
    state.direction = state.pending = UP
    state.food = (10, 9)
    assert step_game(state, placer) is StepOutcome.ATE


@pytest.mark.parametrize("base", [200, 150, 100, 70])
def test_speed_up_every_fifty_points_with_floor(placer, base):
    state = make_state([(10, 10)], UP, base=base)
    periods = {}

    for _ in range(40):
        eat_once(state, placer)
        periods[state.score] = state.tick_period_ms

    assert periods[40] == base
    assert periods[50] == base - 10
    assert periods[90] == base - 10
    assert periods[100] == base - 20
    assert periods[150] == base - 30
    assert periods[250] == base - 50
    assert periods[300] == base - 50
    assert min(periods.values()) == base - 50


def test_speed_up_once_per_threshold_with_uneven_points(placer):
    cfg = Config(points_per_food=30)
    state = make_state([(10, 10)], UP, base=150)

    for _ in range(4):  # 30, 60, 90, 120
        state.snake = [(10, 10)]
        state.food = (10, 9)
        step_game(state, placer, cfg)

    assert state.score == 120
    assert state.tick_period_ms == 130


def test_board_full_raises():
    cfg = Config(board_size=2)
    placer = FoodPlacer.seeded(0, board_size=2)
    state = make_state([(0, 1), (1, 1), (1, 0)], UP, food=(0, 0))

    with pytest.raises(BoardFullError):
        step_game(state, placer, cfg)
    assert state.score == 10
    assert len(state.snake) == 4


def test_default_config_board():
    assert CFG.board_size == 20
