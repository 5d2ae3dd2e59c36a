"""
Configuration settings for the k-means elbow explorer.

This module centralizes all configurable parameters including the
dataset shape, the evaluated k range and plotting output.
"""

from pathlib import Path
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass
class DataConfig:
    """Random dataset configuration."""
    n_points: int = 120
    dim: int = 2

    # Coordinates are drawn uniformly from [low, high)
    low: float = 0.0
    high: float = 10.0

    def __post_init__(self):
        """Validate dataset parameters."""
        if self.n_points < 0:
            raise ValueError(f"n_points must be >= 0, got {self.n_points}")
        if self.dim < 1:
            raise ValueError(f"dim must be >= 1, got {self.dim}")
        if self.low >= self.high:
            raise ValueError(f"low ({self.low}) must be below high ({self.high})")


@dataclass
class ClusteringConfig:
    """Clustering configuration."""
    k_min: int = 1
    k_max: int = 10
    max_iterations: int = 100
    tolerance: float = 0.0  # 0 = exact equality
    n_jobs: int = 1
    random_seed: Optional[int] = None
    default_k: int = 2  # k shown first

    def __post_init__(self):
        """Validate clustering parameters."""
        if self.k_min < 1 or self.k_max < self.k_min:
            raise ValueError(f"Invalid k range [{self.k_min}, {self.k_max}]")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")
        if self.n_jobs < 1:
            raise ValueError(f"n_jobs must be >= 1, got {self.n_jobs}")


@dataclass
class PlotConfig:
    """Plot output configuration."""
    output_dir: Path = Path("outputs")
    dpi: int = 150
    show: bool = False

    def __post_init__(self):
        """Validate plot parameters."""
        if self.dpi < 1:
            raise ValueError(f"dpi must be >= 1, got {self.dpi}")


@dataclass
class Config:
    """Main configuration container."""
    data: DataConfig = field(default_factory=DataConfig)
    clustering: ClusteringConfig = field(default_factory=ClusteringConfig)
    plots: PlotConfig = field(default_factory=PlotConfig)

    verbose: bool = True


def get_default_config() -> Config:
    """Return default configuration."""
    return Config()


def get_config_from_args(args) -> Config:
    """Create configuration from command-line arguments."""
    config = get_default_config()

    data = config.data
    clustering = config.clustering

    # Override with args if provided
    if getattr(args, 'n_points', None) is not None:
        data.n_points = args.n_points
    if getattr(args, 'dim', None) is not None:
        data.dim = args.dim
    if getattr(args, 'k_min', None) is not None:
        clustering.k_min = args.k_min
    if getattr(args, 'k_max', None) is not None:
        clustering.k_max = args.k_max
    if getattr(args, 'max_iter', None) is not None:
        clustering.max_iterations = args.max_iter
    if getattr(args, 'tolerance', None) is not None:
        clustering.tolerance = args.tolerance
    if getattr(args, 'n_jobs', None) is not None:
        clustering.n_jobs = args.n_jobs
    if getattr(args, 'seed', None) is not None:
        clustering.random_seed = args.seed
    if getattr(args, 'select_k', None) is not None:
        clustering.default_k = args.select_k
    if getattr(args, 'output_dir', None) is not None:
        config.plots.output_dir = Path(args.output_dir)
    if getattr(args, 'dpi', None) is not None:
        config.plots.dpi = args.dpi
    if getattr(args, 'show', False):
        config.plots.show = True
    if hasattr(args, 'verbose'):
        config.verbose = args.verbose

    # Re-run validation on the overridden values
    config.data = replace(data)
    config.clustering = replace(clustering)
    config.plots = replace(config.plots)

    return config
