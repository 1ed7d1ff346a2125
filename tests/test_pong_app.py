from fancyweb.dom import Document
from fancyweb.pong_app import PongApp, main, random_game
from fancyweb.pong_game import Game
from fancyweb.pong_physics import CANVAS_SIZE, State
from fancyweb.pong_pieces import PADDLE_SIZE


class FakeClock:
    def __init__(self, start=1.0):
        self.now = start

    def __call__(self):
        return self.now


def _by_class(root, class_name):
    return [e for e in root.walk() if e.class_name == class_name]


def _caption(app):
    (caption,) = [e for e in app.root().walk() if e.tag == "caption"]
    return caption


def test_random_game_without_clock_uses_seed_zero():
    assert random_game(None).ball.velocity == Game.from_seed(0).ball.velocity


def test_random_game_seeds_from_clock():
    assert random_game(lambda: 7.9).ball.velocity == Game.from_seed(7).ball.velocity


def test_app_starts_playing_on_sized_canvas():
    app = PongApp(Document(), FakeClock())
    assert not app.easel.is_paused()
    (canvas,) = [e for e in app.root().walk() if e.tag == "canvas"]
    assert (canvas.width, canvas.height) == (CANVAS_SIZE.width, CANVAS_SIZE.height)
    assert app.root().class_name == "pong"


def test_glass_shows_initial_state():
    app = PongApp(Document(), FakeClock())
    (hello,) = _by_class(app.root(), "pong-hello")
    assert hello.text_content == "Hello, Start state."


def test_frame_sets_caption():
    app = PongApp(Document(), FakeClock())
    assert app.frame() is True
    assert _caption(app).text_content == "426x240 @ 1"


def test_p_toggles_pause_and_blocks_game_keys():
    app = PongApp(Document(), FakeClock())
    assert app.keydown("p") is True
    assert app.easel.is_paused()
    assert app.keydown("1") is False
    assert app.game.score() == (0, 0)
    assert app.keydown("p") is True
    assert not app.easel.is_paused()


def test_b_starts_then_restarts():
    app = PongApp(Document(), FakeClock())
    assert app.keydown("b") is True
    assert app.game.state() is State.PLAY
    first = app.game
    app.keydown("b")
    assert app.game is not first
    assert app.game.state() is State.START


def test_score_keys_show_on_glass_after_frame():
    app = PongApp(Document(), FakeClock())
    app.keydown("1")
    app.keydown("2")
    app.keydown("2")
    app.frame()
    assert app.game.score() == (1, 2)
    spans = _by_class(app.root(), "pong-score__span")
    assert [s.text_content for s in spans] == ["1", "2"]


def test_unknown_keys_are_ignored():
    app = PongApp(Document(), FakeClock())
    assert app.keydown("x") is False
    assert app.keyup("x") is False


def test_held_key_moves_paddle_until_released():
    clock = FakeClock()
    app = PongApp(Document(), clock)
    app.frame()
    app.keydown("w")
    clock.now += 50.0
    app.frame()
    y = app.game.paddles[0].top_left.y
    assert y < PADDLE_SIZE.height
    assert app.keyup("w") is True
    clock.now += 50.0
    app.frame()
    assert app.game.paddles[0].top_left.y == y


def test_arrow_keys_move_second_paddle():
    clock = FakeClock()
    app = PongApp(Document(), clock)
    app.frame()
    start = app.game.paddles[1].top_left.y
    app.keydown("ArrowUp")
    clock.now += 50.0
    app.frame()
    assert app.game.paddles[1].top_left.y < start


def test_main_prints_page(capsys):
    assert main(["--frames", "2", "--keys", "1"]) == 0
    out = capsys.readouterr().out
    assert "pong-glass" in out
    assert "Pong" in out