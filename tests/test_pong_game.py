import pytest

from fancyweb.dom import Canvas, Document
from fancyweb.pong_game import BALL_COLOR, COURT_COLOR, SCORE_MAX, Game, Glass
from fancyweb.pong_physics import CANVAS_SIZE, VIRTUAL_SIZE, Direction, PointF64, State, distance
from fancyweb.pong_pieces import PADDLE_SIZE


def _spans(root, class_name):
    return [e for e in root.walk() if e.class_name == class_name]


def test_same_seed_same_game():
    a, b = Game.from_seed(42), Game.from_seed(42)
    assert a.ball.velocity == b.ball.velocity
    assert a.ball.top_left == b.ball.top_left


@pytest.mark.parametrize("seed", [0, 1, 7, 123456, 0xFFFF_FFFF])
def test_initial_velocity_bounds(seed):
    v = Game.from_seed(seed).ball.velocity
    assert abs(v.dx) == 100.0
    assert abs(v.dy) < 50


def test_ball_starts_centred():
    ball = Game.from_seed(3).ball
    assert ball.top_left.x * 2 + 5.0 == VIRTUAL_SIZE.width
    assert ball.top_left.y * 2 + 5.0 == VIRTUAL_SIZE.height


def test_paddles_start_in_opposite_corners():
    left, right = Game.from_seed(0).paddles
    assert left.top_left == PointF64(PADDLE_SIZE.width, PADDLE_SIZE.height)
    assert right.top_left == PointF64(
        VIRTUAL_SIZE.width - 2 * PADDLE_SIZE.width,
        VIRTUAL_SIZE.height - 2 * PADDLE_SIZE.height,
    )


def test_start_only_once():
    game = Game.from_seed(0)
    assert game.state() is State.START
    assert game.start() is True
    assert game.start() is False
    assert game.state() is State.PLAY


def test_size_is_virtual_size():
    assert Game.from_seed(0).size() == VIRTUAL_SIZE


def test_scores_count_up():
    game = Game.from_seed(0)
    assert game.score() == (0, 0)
    game.player1_score()
    game.player2_score()
    game.player2_score()
    assert game.score() == (1, 2)


def test_score_overflow_raises():
    game = Game.from_seed(0)
    for _ in range(SCORE_MAX):
        game.player1_score()
    with pytest.raises(OverflowError):
        game.player1_score()
    assert game.score() == (SCORE_MAX, 0)


def test_update_without_delta_does_nothing():
    game = Game.from_seed(0)
    game.start()
    game.player1_move(Direction.DOWN)
    before = (game.ball.top_left.x, game.paddles[0].top_left.y)
    game.update(None)
    assert (game.ball.top_left.x, game.paddles[0].top_left.y) == before


def test_ball_waits_for_start_but_paddles_move():
    game = Game.from_seed(0)
    game.player1_move(Direction.UP)
    before = (game.ball.top_left.x, game.ball.top_left.y)
    game.update(1000.0)
    assert (game.ball.top_left.x, game.ball.top_left.y) == before
    assert game.paddles[0].top_left.y == 0.0


def test_ball_moves_once_started():
    game = Game.from_seed(5)
    game.start()
    x0 = game.ball.top_left.x
    game.update(1000.0)
    assert game.ball.top_left.x == pytest.approx(x0 + distance(game.ball.velocity.dx, 1000.0))


def test_player2_moves_second_paddle():
    game = Game.from_seed(0)
    game.player2_move(Direction.DOWN)
    game.update(1000.0)
    assert game.paddles[1].top_left.y == VIRTUAL_SIZE.height - PADDLE_SIZE.height
    assert game.paddles[0].top_left.y == PADDLE_SIZE.height


def test_render_draws_court_then_pieces():
    ctx = Canvas(CANVAS_SIZE.width, CANVAS_SIZE.height).get_context()
    Game.from_seed(0).render(ctx)
    names = [op.name for op in ctx.operations]
    assert names == ["begin_path"] + ["fill_rect"] * 4 + ["stroke"]
    court = ctx.operations[1]
    assert court.rect == (0.0, 0.0, float(CANVAS_SIZE.width), float(CANVAS_SIZE.height))
    assert court.fill_style == COURT_COLOR
    assert all(op.fill_style == BALL_COLOR for op in ctx.operations[2:5])


def test_glass_shows_state():
    glass = Glass(Document())
    glass.set_state(State.START)
    (hello,) = _spans(glass.root(), "pong-hello")
    assert hello.text_content == "Hello, Start state."
    glass.set_state(State.PLAY)
    assert hello.text_content == "Hello, Play state."


def test_glass_shows_score():
    glass = Glass(Document())
    glass.set_score((3, 11))
    spans = _spans(glass.root(), "pong-score__span")
    assert [s.text_content for s in spans] == ["3", "11"]
    assert glass.root().class_name == "pong-glass"