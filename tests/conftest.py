import logging

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def min_pairwise():
    """Smallest distance between any two rows of an (N,2) array."""
    def _fn(P):
        P = np.asarray(P, float)
        if P.shape[0] < 2:
            return np.inf
        dists = np.linalg.norm(P[None, :, :] - P[:, None, :], axis=-1)
        np.fill_diagonal(dists, np.inf)
        return float(dists.min())
    return _fn


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the stream handler ``init_logging`` puts on root and reset levels."""
    root = logging.getLogger()
    pkg = logging.getLogger("diskweave")
    levels = (root.level, pkg.level)
    yield
    for h in [h for h in root.handlers if getattr(h, "_diskweave", False)]:
        root.removeHandler(h)
    root.setLevel(levels[0])
    pkg.setLevel(levels[1])
