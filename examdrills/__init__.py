"""Solutions to classic exam problems on strings, numbers, lists, trees and sorting."""

__version__ = "0.1.0"