"""Elbow summaries of batch clustering runs."""

from .summary import (
    summarize_elbow,
    print_elbow_summary
)

__all__ = [
    'summarize_elbow',
    'print_elbow_summary'
]
