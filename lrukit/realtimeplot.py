"""Collect points for several named series and draw them as line plots."""

from __future__ import annotations

from typing import Iterable, Sequence

from matplotlib.figure import Figure

__all__ = ["Point", "RealTimePlot"]

Point = tuple[float, float]


class RealTimePlot:
    """Accumulates points for a fixed set of series, then plots them.

    Points are added one row at a time, one entry per series; once input
    has ended no more points are accepted and each series is drawn sorted
    by its x coordinate.
    """

    def __init__(self, names: Sequence[str], colors: Sequence[str], title: str) -> None:
        if len(names) != len(colors):
            raise ValueError(
                f"{len(names)} names given for {len(colors)} colors"
            )
        self.names = list(names)
        self.colors = list(colors)
        self.title = title
        self._data: list[list[Point]] = [[] for _ in self.names]
        self._ended = False
        self._figure: Figure | None = None

    @property
    def ended(self) -> bool:
        """Whether input has been ended."""
        return self._ended

    def add_data(self, samples: Iterable[tuple[Point, bool]]) -> None:
        """Add one row of samples, one ``(point, present)`` pair per series.

        A pair whose ``present`` flag is false adds nothing to its series.
        """
        if self._ended:
            raise RuntimeError("input has been ended")
        row = list(samples)
        if len(row) != len(self._data):
            raise ValueError(
                f"{len(row)} samples given for {len(self._data)} series"
            )
        for series, (point, present) in zip(self._data, row):
            if present:
                x, y = point
                series.append((float(x), float(y)))

    def end_input(self) -> None:
        """Stop accepting data, sort every series by x and build the figure."""
        self._ended = True
        for series in self._data:
            series.sort(key=lambda point: point[0])

        figure = Figure()
        figure.suptitle(self.title)
        axes = figure.add_subplot()
        axes.set_title(self.legend_text())
        for series, color in zip(self._data, self.colors):
            xs = [x for x, _ in series]
            ys = [y for _, y in series]
            axes.plot(
                xs,
                ys,
                linestyle="-",
                color=color,
                marker="o",
                markersize=1,
                markerfacecolor="none",
                markeredgecolor=color,
                label="y(x)",
            )
        self._figure = figure

    def series(self) -> list[list[Point]]:
        """Copies of the collected points, one list per series."""
        return [list(series) for series in self._data]

    def legend_text(self) -> str:
        """Text naming each series with its color, separated by tabs."""
        return "".join(f"{name}: {color}\t" for name, color in zip(self.names, self.colors))

    def figure(self) -> Figure:
        """The figure built when input was ended."""
        if self._figure is None:
            raise RuntimeError("input has not been ended")
        return self._figure