"""Hand-built containers, an LRU cache on top of them, person records and a point plotter."""

__version__ = "0.1.0"