"""Classic algorithms and data structures: containers, sorting, searching,
number theory, combinatorics and graph algorithms."""

__version__ = "0.1.0"