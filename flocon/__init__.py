"""Opération Flocon: a terminal tower-defence game on a snowy mountain."""

__version__ = "0.1.0"