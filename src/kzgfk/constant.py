from py_ecc import optimized_bls12_381, optimized_bn128

BN254_SCALAR_FIELD = optimized_bn128.curve_order
BN254_MODULUS = optimized_bn128.field_modulus

BLS12_381_SCALAR_FIELD = optimized_bls12_381.curve_order
BLS12_381_MODULUS = optimized_bls12_381.field_modulus

# quadratic non-residue in both scalar fields, so generator^((p-1)/n)
# has order exactly n for every power of two n dividing p-1
MULTIPLICATIVE_GENERATOR = 5
