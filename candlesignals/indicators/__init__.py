"""
Indicator modules.

Each module exports a ``calculate`` function taking an ordered list of Bar
objects. See candlesignals.api.list_indicators / load_indicator.
"""
