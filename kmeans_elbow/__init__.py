"""
K-means elbow explorer.

This package provides modules for:
- Euclidean geometry over fixed-dimension points
- K-means clustering and inertia over a range of k
- Random dataset generation
- Elbow summaries
- Cluster and elbow chart visualization
"""

from . import errors
from . import geometry
from . import clustering
from . import data
from . import evaluation
from . import pipeline

__version__ = "1.0.0"
