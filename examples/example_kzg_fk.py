"""
Commit to a vector of 8 scalars, prove a single coordinate,
then change another coordinate and refresh commitment and proof
without recomputing them from scratch
"""

import random

from kzgfk import KZGFK

kzg = KZGFK.setup(8, "BN254")

vector = [random.randint(0, kzg.order - 1) for _ in range(8)]
commitment = kzg.commit(vector)

index = 3
proof = kzg.open(vector, index)

assert kzg.verify(index, vector[index], commitment, proof)
print(f"Proof is valid: vector[{index}] = {vector[index]}")

assert not kzg.verify(index, vector[index] + 1, commitment, proof)
print(f"Proof is invalid: vector[{index}] != {vector[index] + 1}")

# change vector[5] and keep the opening at index 3 up to date
new_value = 1337
commitment = kzg.update(commitment, 5, vector[5], new_value)
proof = kzg.update_open_i(proof, 5, vector[5], new_value, open_index=index)
vector[5] = new_value

assert commitment == kzg.commit(vector)
assert kzg.verify(index, vector[index], commitment, proof)
print(f"Updated proof is valid after setting vector[5] = {new_value}")
