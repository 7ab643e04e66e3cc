import pytest

from lrukit.realtimeplot import RealTimePlot


def make_plot():
    return RealTimePlot(["a", "b"], ["red", "blue"], "Timings")


def test_mismatched_names_and_colors_raise():
    with pytest.raises(ValueError):
        RealTimePlot(["a", "b"], ["red"], "t")


def test_legend_text_format():
    assert make_plot().legend_text() == "a: red\tb: blue\t"


def test_add_data_wrong_length_raises():
    plot = make_plot()
    with pytest.raises(ValueError):
        plot.add_data([((1, 2), True)])


def test_absent_samples_are_skipped():
    plot = make_plot()
    plot.add_data([((1, 2), True), ((3, 4), False)])
    plot.add_data([((5, 6), False), ((7, 8), True)])
    assert plot.series() == [[(1.0, 2.0)], [(7.0, 8.0)]]


def test_end_input_sorts_by_x_stably():
    plot = make_plot()
    for point in [(3, 1), (1, 2), (2, 3), (1, 4)]:
        plot.add_data([(point, True), (point, False)])
    plot.end_input()
    assert plot.series()[0] == [(1.0, 2.0), (1.0, 4.0), (2.0, 3.0), (3.0, 1.0)]
    assert plot.series()[1] == []


def test_add_after_end_raises():
    plot = make_plot()
    plot.end_input()
    with pytest.raises(RuntimeError):
        plot.add_data([((1, 2), True), ((3, 4), True)])


def test_figure_before_end_raises():
    with pytest.raises(RuntimeError):
        make_plot().figure()


def test_figure_holds_one_line_per_series_with_sorted_data():
    plot = make_plot()
    plot.add_data([((2, 20), True), ((5, 50), True)])
    plot.add_data([((1, 10), True), ((4, 40), True)])
    plot.end_input()
    figure = plot.figure()
    lines = figure.axes[0].get_lines()
    assert len(lines) == 2
    assert list(lines[0].get_xdata()) == [1.0, 2.0]
    assert list(lines[0].get_ydata()) == [10.0, 20.0]
    assert list(lines[1].get_xdata()) == [4.0, 5.0]
    assert figure.axes[0].get_title() == plot.legend_text()


def test_series_returns_copies():
    plot = make_plot()
    plot.add_data([((1, 1), True), ((2, 2), True)])
    copy = plot.series()
    copy[0].append((9.0, 9.0))
    assert plot.series() == [[(1.0, 1.0)], [(2.0, 2.0)]]