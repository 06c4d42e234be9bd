"""Classic algorithms for study: sorting, subarrays, text search, dynamic programming,
backtracking, matrices, the 15-puzzle, flows, spanning trees and shortest paths."""

__version__ = "0.1.0"