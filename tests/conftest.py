import os

import pytest

# run joblib batches inline, worker start-up dominates at these sizes
os.environ.setdefault("KZGFK_PARALLEL_CPU", "1")

from kzgfk import KZGFK  # noqa: E402


@pytest.fixture(scope="session")
def kzg_bn254_2():
    return KZGFK.setup(2, "BN254")


@pytest.fixture(scope="session")
def kzg_bn254_4():
    return KZGFK.setup(4, "BN254")


@pytest.fixture(scope="session")
def kzg_bn254_8():
    return KZGFK.setup(8, "BN254")


@pytest.fixture(scope="session")
def kzg_bls12_381_4():
    return KZGFK.setup(4, "BLS12_381")
