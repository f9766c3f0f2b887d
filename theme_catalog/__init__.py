"""Searchable catalog of editor color themes with strict per-editor export plans."""

__version__ = "0.1.0"
