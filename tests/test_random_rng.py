from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from diskweave import sample_poisson_disk
from diskweave.random import resolve_rng, spawn_rngs


def test_resolve_rng_passthrough_and_seed():
    g = np.random.default_rng(0)
    assert resolve_rng(g) is g
    assert resolve_rng(5).random() == np.random.default_rng(5).random()
    assert isinstance(resolve_rng(None), np.random.Generator)
    with pytest.raises(TypeError):
        resolve_rng(True)
    with pytest.raises(TypeError):
        resolve_rng(1.5)


def test_spawned_rngs_parallel_equals_sequential():
    def run(g):
        return sample_poisson_disk(40.0, 40.0, 3.0, rng=g)

    seq = [run(g) for g in spawn_rngs(123, 4)]
    with ThreadPoolExecutor(max_workers=4) as ex:
        par = list(ex.map(run, spawn_rngs(123, 4)))
    assert par == seq
    assert seq[0] != seq[1]
    with pytest.raises(ValueError):
        spawn_rngs(0, -1)
