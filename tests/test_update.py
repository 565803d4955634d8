import random

import pytest


def random_vector(kzg):
    return [random.randint(0, kzg.order - 1) for _ in range(kzg.n)]


def test_update_commitment(kzg_bn254_8):
    kzg = kzg_bn254_8

    v = random_vector(kzg)
    commitment = kzg.commit(v)

    new_v = v[:]
    new_v[5] = random.randint(0, kzg.order - 1)

    updated = kzg.update(commitment, 5, v[5], new_v[5])

    assert updated == kzg.commit(new_v)
    assert kzg.update(commitment, 5, v[5], v[5]) == commitment


def test_update_open_same_index(kzg_bn254_8):
    kzg = kzg_bn254_8

    v = random_vector(kzg)
    proof = kzg.open(v, 2)

    new_v = v[:]
    new_v[2] = random.randint(0, kzg.order - 1)

    updated_commitment = kzg.update(kzg.commit(v), 2, v[2], new_v[2])
    updated_proof = kzg.update_open_i(proof, 2, v[2], new_v[2])

    assert updated_proof == kzg.open(new_v, 2)
    assert kzg.verify(2, new_v[2], updated_commitment, updated_proof)


def test_update_open_other_index(kzg_bn254_8):
    kzg = kzg_bn254_8

    v = random_vector(kzg)
    commitment = kzg.commit(v)
    proofs = [kzg.open(v, j) for j in range(kzg.n)]

    new_v = v[:]
    new_v[6] = random.randint(0, kzg.order - 1)
    updated_commitment = kzg.update(commitment, 6, v[6], new_v[6])

    for j in range(kzg.n):
        updated = kzg.update_open_i(proofs[j], 6, v[6], new_v[6], open_index=j)

        assert updated == kzg.open(new_v, j)

    j = 1
    updated = kzg.update_open_i(proofs[j], 6, v[6], new_v[6], open_index=j)
    assert kzg.verify(j, new_v[j], updated_commitment, updated)
    assert not kzg.verify(j, new_v[j], commitment, updated)


def test_update_sequence(kzg_bn254_4):
    kzg = kzg_bn254_4

    v = random_vector(kzg)
    commitment = kzg.commit(v)
    proof = kzg.open(v, 0)

    for index in (1, 0, 3):
        new_value = random.randint(0, kzg.order - 1)
        commitment = kzg.update(commitment, index, v[index], new_value)
        proof = kzg.update_open_i(proof, index, v[index], new_value, open_index=0)
        v[index] = new_value

    assert commitment == kzg.commit(v)
    assert proof == kzg.open(v, 0)
    assert kzg.verify(0, v[0], commitment, proof)


def test_update_preconditions(kzg_bn254_4):
    kzg = kzg_bn254_4

    v = random_vector(kzg)
    commitment = kzg.commit(v)
    proof = kzg.open(v, 0)

    with pytest.raises(IndexError):
        kzg.update(commitment, kzg.n, 0, 1)
    with pytest.raises(IndexError):
        kzg.update_open_i(proof, kzg.n, 0, 1)
    with pytest.raises(IndexError):
        kzg.update_open_i(proof, 0, 0, 1, open_index=kzg.n)
