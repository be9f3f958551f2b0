"""Classic algorithm problems on heaps, lists, sorting, trees and graphs, as plain functions."""

__version__ = "0.1.0"