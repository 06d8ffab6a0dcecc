"""PyQt5 host widgets for the range selector."""
