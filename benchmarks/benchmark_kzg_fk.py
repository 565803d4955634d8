import random

from kzgfk import KZGFK
from kzgfk.utils import Timer


def run(n, crv):

    time_results = []

    with Timer(f"Setup n={n}") as t:
        kzg = KZGFK.setup(n, crv)
    time_results.append(t.elapsed)

    v = [random.randint(0, kzg.order - 1) for _ in range(n)]
    index = random.randint(0, n - 1)

    with Timer(f"Commit n={n}") as t:
        commitment = kzg.commit(v)
    time_results.append(t.elapsed)

    with Timer(f"Open n={n}") as t:
        proof = kzg.open(v, index)
    time_results.append(t.elapsed)

    with Timer(f"Verify n={n}") as t:
        assert kzg.verify(index, v[index], commitment, proof)
    time_results.append(t.elapsed)

    new_value = random.randint(0, kzg.order - 1)
    with Timer(f"Update n={n}") as t:
        kzg.update(commitment, index, v[index], new_value)
        kzg.update_open_i(proof, index, v[index], new_value, open_index=(index + 1) % n)
    time_results.append(t.elapsed)

    return time_results


domain_sizes = [2**4, 2**6, 2**8, 2**10]
crvs = ["BN254", "BLS12_381"]

for n in domain_sizes:
    for crv in crvs:
        result = run(n, crv)
        print(f"Domain of size {n} with {crv} curve")
        print("=" * 50)
        print("Setup time:", result[0])
        print("Commit time:", result[1])
        print("Open time:", result[2])
        print("Verify time:", result[3])
        print("Update time:", result[4])
        print()
