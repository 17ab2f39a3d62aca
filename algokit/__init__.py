"""Classic array, search, linked-list, grid and graph algorithms."""

__version__ = "0.1.0"
__all__ = ["answer_search", "arrays", "graphs", "grids", "linkedlist", "searching"]