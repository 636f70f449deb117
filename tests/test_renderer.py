import pytest

from sparkplot.api import GAUSSIAN
from sparkplot.core.binning import InvalidConfiguration
from sparkplot.core.glyphs import ASCII, UNICODE
from sparkplot.core.models import RenderConfig
from sparkplot.renderer import render, resolve_range, resolve_width

GAUSSIAN_PLOT = "\n".join([
    "╭──────Gaussian───────╮",
    "│        ▁▄▅▄▁        ├ max: 0.15",
    "│      ▁▅█████▅▁      ├      0.0782609",
    "│▁▁▁▂▃▆█████████▆▃▂▁▁▁├ min: 0",
    "╰┬─────┬─────┬───────┬╯",
    " 0     5     10      21",
])


def _gaussian_config(**overrides) -> RenderConfig:
    options = dict(rows=3, box=True, color=False, title="Gaussian",
                   min_value=0.0, max_value=0.15)
    options.update(overrides)
    return RenderConfig(**options)


def test_render_gaussian_example() -> None:
    assert render(GAUSSIAN, _gaussian_config(columns=21), terminal_width=200) == GAUSSIAN_PLOT


def test_render_gaussian_shape() -> None:
    lines = render(GAUSSIAN, _gaussian_config(), terminal_width=80).splitlines()
    top, bottom = lines[1][1:22], lines[3][1:22]
    assert top[10] == max(top, key=lambda g: UNICODE.levels.index(g) if g != " " else -1)
    assert top[0] == " " and top[-1] == " "
    assert bottom[0] == "▁" and bottom[-1] == "▁"
    labels = lines[-1].split()
    assert labels[0] == "0"
    assert labels[-1] == "21"


def test_render_identity_width_reproduces_samples() -> None:
    data = [0.5, 1.5, 2.5, 3.5, 4.5, 5.5, 6.5, 7.0]
    config = RenderConfig(color=False, min_value=0.0, max_value=7.0)
    assert render(data, config, terminal_width=80) == "▁▂▃▄▅▆▇█"


def test_render_clamps_width_to_terminal() -> None:
    data = list(range(200))
    out = render(data, RenderConfig(columns=1000, box=True, color=False), terminal_width=80)
    top = out.splitlines()[0]
    assert top.count("─") == 80 - 20
    assert len(top) <= 80


def test_render_without_box_uses_full_terminal_width() -> None:
    out = render(list(range(200)), RenderConfig(color=False), terminal_width=80)
    assert len(out) == 80


def test_render_queries_terminal_when_width_not_given(monkeypatch) -> None:
    monkeypatch.setattr("sparkplot.renderer.detect_terminal_width", lambda: 30)
    out = render(list(range(100)), RenderConfig(color=False))
    assert len(out) == 30


def test_render_narrow_terminal_drops_box() -> None:
    out = render(list(range(10)), RenderConfig(box=True, title="t", color=False),
                 terminal_width=22)
    assert out
    assert not set(out) & UNICODE.border_chars


def test_render_zero_width_is_empty() -> None:
    assert render([1.0, 2.0, 3.0], RenderConfig(rows=2), terminal_width=0) == "\n"


def test_render_flat_range_draws_full_blocks() -> None:
    assert render([2.0, 2.0, 2.0], RenderConfig(rows=2, color=False),
                  terminal_width=80) == "███\n███"


def test_render_fills_in_missing_limit_from_data() -> None:
    out = render([0.0, 5.0, 10.0], RenderConfig(min_value=0.0, color=False),
                 terminal_width=80)
    assert out == "▁▄█"


def test_render_range_wider_than_float_max() -> None:
    data = [-1e308, 0.0, 1e308]
    assert render(data, RenderConfig(color=False), terminal_width=80) == "▁▄█"

    wide = [-1e308, -5e307, 0.0, 5e307, 1e308]
    boxed = render(wide, RenderConfig(rows=3, box=True, color=False), terminal_width=80)
    assert "max: 1e+308" in boxed
    assert "inf" not in boxed and "nan" not in boxed


def test_render_ascii_glyphs() -> None:
    out = render([0.0, 0.5, 1.0], RenderConfig(rows=2, color=False),
                 terminal_width=80, glyphs=ASCII)
    assert out == "  O\n.OO"


def test_render_with_color_emits_escapes() -> None:
    colored = render([1.0, 2.0, 3.0], RenderConfig(box=True), terminal_width=80)
    plain = render([1.0, 2.0, 3.0], RenderConfig(box=True, color=False), terminal_width=80)
    assert "\x1b[" in colored
    assert "\x1b[" not in plain


def test_render_accepts_custom_colorizer() -> None:
    tags: list[str] = []

    def record(text: str, tag: str) -> str:
        tags.append(tag)
        return text

    render(list(range(10)), RenderConfig(box=True, rows=2, title="T"),
           terminal_width=80, colorize=record)
    assert set(tags) == {"plot-fill", "box-border", "label"}


def test_render_does_not_mutate_series() -> None:
    data = [3.0, 1.0, 2.0]
    render(data, RenderConfig(), terminal_width=80)
    assert data == [3.0, 1.0, 2.0]


def test_render_rejects_more_columns_than_samples() -> None:
    with pytest.raises(InvalidConfiguration):
        render([1.0, 2.0, 3.0], RenderConfig(columns=5), terminal_width=80)


@pytest.mark.parametrize("series, config", [
    ([], RenderConfig()),
    ([1.0, float("nan")], RenderConfig()),
    ([1.0, 2.0], RenderConfig(rows=0)),
    ([1.0, 2.0], RenderConfig(columns=-1)),
    ([1.0, 2.0], RenderConfig(min_value=5.0, max_value=1.0)),
    ([1.0, 2.0], RenderConfig(min_value=float("-inf"), max_value=float("inf"))),
    ([1.0, 2.0], RenderConfig(min_value=float("nan"))),
    ([1.0, 2.0], RenderConfig(max_value=float("inf"))),
])
def test_render_rejects_invalid_input(series, config) -> None:
    with pytest.raises(InvalidConfiguration):
        render(series, config, terminal_width=80)


def test_resolve_range() -> None:
    data = [4.0, -2.0, 9.0]
    assert resolve_range(data, RenderConfig()) == (-2.0, 9.0)
    assert resolve_range(data, RenderConfig(max_value=20.0)) == (-2.0, 20.0)
    assert resolve_range(data, RenderConfig(min_value=-5.0, max_value=5.0)) == (-5.0, 5.0)


def test_resolve_width() -> None:
    assert resolve_width(50, RenderConfig(), 80) == 50
    assert resolve_width(50, RenderConfig(columns=10), 80) == 10
    assert resolve_width(500, RenderConfig(box=True), 80) == 60
    assert resolve_width(500, RenderConfig(box=True), 10) == 0
