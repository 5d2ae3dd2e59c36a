import argparse
from pathlib import Path

import pytest

from config import (
    ClusteringConfig,
    DataConfig,
    PlotConfig,
    get_config_from_args,
    get_default_config
)


def test_defaults():
    config = get_default_config()
    assert config.data.n_points == 120
    assert config.data.dim == 2
    assert config.clustering.k_min == 1
    assert config.clustering.k_max == 10
    assert config.clustering.max_iterations == 100
    assert config.clustering.tolerance == 0.0
    assert config.clustering.default_k == 2


@pytest.mark.parametrize('kwargs', [
    {'n_points': -1},
    {'dim': 0},
    {'low': 5.0, 'high': 5.0},
])
def test_invalid_data_config(kwargs):
    with pytest.raises(ValueError):
        DataConfig(**kwargs)


@pytest.mark.parametrize('kwargs', [
    {'k_min': 0},
    {'k_min': 5, 'k_max': 4},
    {'max_iterations': 0},
    {'tolerance': -0.1},
    {'n_jobs': 0},
])
def test_invalid_clustering_config(kwargs):
    with pytest.raises(ValueError):
        ClusteringConfig(**kwargs)


def test_config_from_args_overrides():
    args = argparse.Namespace(
        n_points=50, dim=3, k_min=2, k_max=6, max_iter=20, tolerance=1e-6,
        n_jobs=2, seed=7, select_k=4, output_dir='plots', verbose=False
    )
    config = get_config_from_args(args)

    assert config.data.n_points == 50
    assert config.data.dim == 3
    assert config.clustering.k_min == 2
    assert config.clustering.k_max == 6
    assert config.clustering.max_iterations == 20
    assert config.clustering.tolerance == 1e-6
    assert config.clustering.n_jobs == 2
    assert config.clustering.random_seed == 7
    assert config.clustering.default_k == 4
    assert config.plots.output_dir == Path('plots')
    assert config.verbose is False


def test_config_from_args_keeps_defaults_for_missing_values():
    config = get_config_from_args(argparse.Namespace(n_points=None, k_max=None))
    assert config.data.n_points == 120
    assert config.clustering.k_max == 10


def test_config_from_args_validates():
    with pytest.raises(ValueError):
        get_config_from_args(argparse.Namespace(k_min=8, k_max=3))


def test_plot_config_defaults_and_overrides():
    config = get_default_config()
    assert config.plots.dpi == 150
    assert config.plots.show is False

    config = get_config_from_args(argparse.Namespace(dpi=72, show=True))
    assert config.plots.dpi == 72
    assert config.plots.show is True


def test_invalid_plot_config():
    with pytest.raises(ValueError):
        PlotConfig(dpi=0)
