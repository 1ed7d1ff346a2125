import ast
from math import prod

from fancyweb.dom import Document
from fancyweb.primes_chart import Chart, main


class FakeClock:
    def __init__(self):
        self.now = 1.0

    def __call__(self):
        self.now += 16.0
        return self.now


def _caption(chart):
    (caption,) = [e for e in chart.root().walk() if e.tag == "caption"]
    return caption


def _canvas_context(chart):
    (canvas,) = [e for e in chart.root().walk() if e.tag == "canvas"]
    return canvas.get_context()


def test_chart_waits_until_played():
    chart = Chart(Document(), FakeClock())
    assert chart.frame() is False
    assert chart.histogram.value() == 1


def test_first_frame_shows_two():
    chart = Chart(Document(), FakeClock())
    chart.play()
    assert chart.frame() is True
    assert _caption(chart).text_content == "2: [2]"


def test_captions_list_factors_of_each_value():
    chart = Chart(Document(), FakeClock())
    chart.play()
    for expected in range(2, 40):
        chart.frame()
        value_text, factors_text = _caption(chart).text_content.split(": ")
        factors = ast.literal_eval(factors_text)
        assert int(value_text) == expected == chart.histogram.value()
        assert prod(factors) == expected
        assert factors == sorted(factors)


def test_frame_draws_bricks():
    chart = Chart(Document(), FakeClock())
    chart.play()
    chart.frame()
    chart.frame()
    ops = _canvas_context(chart).operations
    assert any(op.name == "fill_rect" for op in ops)
    assert any(op.name == "clear_rect" for op in ops)


def test_pausing_stops_counting():
    chart = Chart(Document(), FakeClock())
    chart.play()
    chart.frame()
    chart.play()
    chart.frame()
    assert chart.histogram.value() == 2


def test_main_prints_page(capsys):
    assert main(["--frames", "3"]) == 0
    out = capsys.readouterr().out
    assert "Factorization" in out
    assert "4: [2, 2]" in out