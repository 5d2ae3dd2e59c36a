#!/usr/bin/env python3
"""
K-Means Elbow Explorer

Main entry point. This script orchestrates:
1. Random dataset generation
2. K-means for every k in the configured range
3. Elbow summary
4. Visualization (static PNGs or an interactive window)

Usage:
    python main.py --n-points 120 --k-min 1 --k-max 10 --seed 42
    python main.py --select-k 4 --output-dir outputs/run1
    python main.py --interactive
"""

import argparse
import functools
from pathlib import Path

from config import Config, get_config_from_args
from kmeans_elbow.pipeline import compute, make_regenerator, ElbowResults
from kmeans_elbow.evaluation import print_elbow_summary


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='K-means clustering over a range of k with an elbow chart'
    )

    # Dataset
    parser.add_argument('--n-points', type=int, default=None,
                        help='Number of random points (default 120)')
    parser.add_argument('--dim', type=int, default=None,
                        help='Dimensionality of the points (default 2)')

    # Clustering
    parser.add_argument('--k-min', type=int, default=None,
                        help='Smallest number of clusters (default 1)')
    parser.add_argument('--k-max', type=int, default=None,
                        help='Largest number of clusters (default 10)')
    parser.add_argument('--max-iter', type=int, default=None,
                        help='Iteration cap per run (default 100)')
    parser.add_argument('--tolerance', type=float, default=None,
                        help='Convergence tolerance, 0 = exact equality (default 0)')
    parser.add_argument('--n-jobs', type=int, default=None,
                        help='Worker threads for the k range (default 1)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible runs')
    parser.add_argument('--select-k', type=int, default=None,
                        help='k whose clusters are plotted (default 2)')

    # Output
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for plots (default outputs)')
    parser.add_argument('--no-plots', action='store_true',
                        help='Disable plot generation')
    parser.add_argument('--interactive', action='store_true',
                        help='Open the interactive explorer window')
    parser.add_argument('--dpi', type=int, default=None,
                        help='Resolution of saved plots (default 150)')
    parser.add_argument('--show', action='store_true',
                        help='Also display the saved plots')
    parser.add_argument('--verbose', action=argparse.BooleanOptionalAction, default=True,
                        help='Verbose output')

    return parser.parse_args(argv)


def _compute_kwargs(config: Config) -> dict:
    return dict(
        n_points=config.data.n_points,
        dim=config.data.dim,
        k_min=config.clustering.k_min,
        k_max=config.clustering.k_max,
        max_iterations=config.clustering.max_iterations,
        tolerance=config.clustering.tolerance,
        n_jobs=config.clustering.n_jobs,
        low=config.data.low,
        high=config.data.high,
        verbose=config.verbose
    )


def build_compute_fn(config: Config):
    """Bind the configured parameters to ``compute``."""
    return functools.partial(
        compute,
        random_seed=config.clustering.random_seed,
        **_compute_kwargs(config)
    )


def build_regenerate_fn(config: Config):
    """Callable producing a new dataset per call, reproducible for a seed."""
    return make_regenerator(config.clustering.random_seed, **_compute_kwargs(config))


def selected_index(config: Config) -> int:
    """Index of the k to plot, clamped to the evaluated range."""
    clustering = config.clustering
    k = min(max(clustering.default_k, clustering.k_min), clustering.k_max)
    return k - clustering.k_min


def save_plots(
    results: ElbowResults,
    k_index: int,
    output_dir: Path,
    dpi: int = 150,
    show: bool = False
):
    """Write the cluster view and the elbow chart as PNGs."""
    from kmeans_elbow.visualization import plot_clusters, plot_elbow

    output_dir.mkdir(parents=True, exist_ok=True)
    view = results.clustering_view(k_index)

    plot_clusters(
        view,
        save_path=str(output_dir / f'clusters_k{view.k}.png'),
        dpi=dpi,
        show=show
    )
    plot_elbow(
        results.elbow_view(),
        selected_k=view.k,
        save_path=str(output_dir / 'elbow.png'),
        dpi=dpi,
        show=show
    )


def run_pipeline(config: Config, no_plots: bool = False) -> ElbowResults:
    """Run dataset generation, clustering and plotting once."""
    print("\n" + "="*80)
    print("K-MEANS ELBOW EXPLORER")
    print("="*80)

    results = build_compute_fn(config)()

    print_elbow_summary(results.summary())

    if not no_plots:
        save_plots(
            results, selected_index(config), Path(config.plots.output_dir),
            dpi=config.plots.dpi,
            show=config.plots.show
        )

    print("\n" + "="*80)
    print("✓ COMPLETE")
    print("="*80)
    print(f"  Points:   {len(results.points)}")
    print(f"  k range:  {config.clustering.k_min}..{config.clustering.k_max}")
    if not no_plots:
        print(f"  Plots:    {config.plots.output_dir}")

    return results


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = get_config_from_args(args)

    if args.interactive:
        from kmeans_elbow.visualization import launch_explorer
        launch_explorer(build_regenerate_fn(config), initial_index=selected_index(config))
    else:
        run_pipeline(config, no_plots=args.no_plots)


if __name__ == '__main__':
    main()
