"""
Tests for 4×4 matrices.

Mat4f deliberately has no inverse, multiply, divide or negate; those
absences are tested too.
"""

import numpy as np
import pytest

from smallmat.core.exceptions import DimensionError
from smallmat.matrix import assert_allclose, mat2f, mat4f
from smallmat.vector import vec4f
from smallmat.vector.generic import Vec4


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_new_is_column_major(self):
        m = mat4f.new(*range(16))
        assert m.x == vec4f.new(0, 1, 2, 3)
        assert m.w == vec4f.new(12, 13, 14, 15)
        np.testing.assert_array_equal(m.to_array(), np.arange(16.0).reshape(4, 4).T)

    def test_from_cols(self):
        cols = [vec4f.new(i, i, i, i) for i in range(4)]
        m = mat4f.from_cols(*cols)
        assert m.columns == tuple(cols)

    def test_identity_and_zero(self):
        np.testing.assert_array_equal(mat4f.IDENTITY.to_array(), np.eye(4))
        np.testing.assert_array_equal(mat4f.ZERO.to_array(), np.zeros((4, 4)))

    def test_from_diagonal_and_diagonal(self):
        d = vec4f.new(2.0, 3.0, 4.0, 5.0)
        m = mat4f.from_diagonal(d)
        assert mat4f.diagonal(m) == d
        np.testing.assert_array_equal(m.to_array(), np.diag([2.0, 3.0, 4.0, 5.0]))

    def test_array_round_trip(self, rng):
        arr = rng.standard_normal((4, 4))
        np.testing.assert_array_equal(mat4f.from_array(arr).to_array(), arr)

    def test_from_array_wrong_shape(self):
        with pytest.raises(DimensionError):
            mat4f.from_array(np.eye(3))


# ═══════════════════════════════════════════════════════════════════════
# Queries
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_transpose(self):
        m = mat4f.new(*range(16))
        np.testing.assert_array_equal(mat4f.transpose(m).to_array(), m.to_array().T)

    def test_involution(self, random_mat4):
        assert mat4f.transpose(mat4f.transpose(random_mat4)) == random_mat4

    def test_diagonal_unchanged_by_transpose(self, random_mat4):
        assert mat4f.diagonal(mat4f.transpose(random_mat4)) == mat4f.diagonal(random_mat4)


class TestDeterminant:

    def test_identity_and_zero(self):
        assert mat4f.determinant(mat4f.IDENTITY) == 1.0
        assert mat4f.determinant(mat4f.ZERO) == 0.0

    def test_diagonal(self):
        m = mat4f.from_diagonal(vec4f.new(2.0, 3.0, 4.0, 5.0))
        assert mat4f.determinant(m) == 120.0

    def test_identical_columns(self, random_mat4):
        m = mat4f.from_cols(random_mat4.x, random_mat4.y, random_mat4.x, random_mat4.w)
        assert mat4f.determinant(m) == pytest.approx(0.0, abs=1e-12)

    def test_matches_numpy(self, rng):
        for _ in range(10):
            arr = rng.standard_normal((4, 4))
            np.testing.assert_allclose(
                mat4f.determinant(mat4f.from_array(arr)), np.linalg.det(arr), rtol=1e-9
            )

    def test_row_swap_flips_sign(self):
        m = mat4f.new(
            1, 2, 0, 1,
            0, 1, 3, 0,
            2, 0, 1, 4,
            1, 1, 0, 2,
        )
        # swapping columns x and y
        swapped = mat4f.from_cols(m.y, m.x, m.z, m.w)
        assert mat4f.determinant(swapped) == pytest.approx(-mat4f.determinant(m))
        assert mat4f.determinant(m) == pytest.approx(np.linalg.det(m.to_array()))


# ═══════════════════════════════════════════════════════════════════════
# Vector transforms
# ═══════════════════════════════════════════════════════════════════════


class TestVectorTransforms:

    def test_mul_vec4_matches_numpy(self, random_mat4, rng):
        v = rng.standard_normal(4)
        result = mat4f.mul_vec4(random_mat4, vec4f.from_array(v))
        np.testing.assert_allclose(
            vec4f.to_array(result), random_mat4.to_array() @ v, rtol=1e-12
        )

    def test_identity_preserves_vector(self):
        v = vec4f.new(1.0, -2.0, 3.5, 0.0)
        assert mat4f.mul_vec4(mat4f.IDENTITY, v) == v

    def test_mul_transpose_vec4_matches_numpy(self, random_mat4, rng):
        v = rng.standard_normal(4)
        result = mat4f.mul_transpose_vec4(random_mat4, vec4f.from_array(v))
        np.testing.assert_allclose(
            vec4f.to_array(result), random_mat4.to_array().T @ v, rtol=1e-12
        )

    def test_mul_transpose_equals_transpose_then_mul(self, random_mat4, rng):
        v = vec4f.from_array(rng.standard_normal(4))
        assert_allclose(
            mat4f.mul_transpose_vec4(random_mat4, v),
            mat4f.mul_vec4(mat4f.transpose(random_mat4), v),
        )

    def test_identity_transpose(self):
        v = vec4f.new(4.0, 3.0, 2.0, 1.0)
        assert mat4f.mul_transpose_vec4(mat4f.IDENTITY, v) == v

    def test_linearity(self, random_mat4, rng):
        v = vec4f.from_array(rng.standard_normal(4))
        w = vec4f.from_array(rng.standard_normal(4))
        assert_allclose(
            mat4f.mul_vec4(random_mat4, vec4f.add(v, w)),
            vec4f.add(mat4f.mul_vec4(random_mat4, v), mat4f.mul_vec4(random_mat4, w)),
        )

    def test_columns_as_vec4(self, random_mat4):
        cols = mat4f.columns(random_mat4)
        assert isinstance(cols, Vec4)
        assert cols.to_tuple() == random_mat4.columns


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_subtract(self, random_mat4):
        m = random_mat4
        assert mat4f.subtract(m, m) == mat4f.ZERO
        assert mat4f.add(m, m) == mat4f.scale(m, 2.0)
        assert mat4f.add(m, mat4f.ZERO) == m

    def test_scale(self):
        assert mat4f.scale(mat4f.IDENTITY, 2.0) == mat4f.from_diagonal(vec4f.new(2, 2, 2, 2))

    def test_operators(self, random_mat4):
        m = random_mat4
        v = vec4f.new(1.0, 0.0, -1.0, 2.0)
        assert m + m == mat4f.add(m, m)
        assert m - m == mat4f.ZERO
        assert 3.0 * m == mat4f.scale(m, 3.0)
        assert m @ v == mat4f.mul_vec4(m, v)


class TestAsymmetry:
    """The 4×4 module stops short of the fallible and product operations."""

    @pytest.mark.parametrize("name", ["inverse", "multiply", "divide", "negate"])
    def test_operation_absent(self, name):
        assert not hasattr(mat4f, name)

    def test_no_matrix_product_operator(self):
        with pytest.raises(TypeError):
            mat4f.IDENTITY @ mat4f.IDENTITY

    def test_no_unary_minus(self):
        with pytest.raises(TypeError):
            -mat4f.IDENTITY

    def test_no_elementwise_matrix_product(self):
        with pytest.raises(TypeError):
            mat4f.IDENTITY * mat4f.IDENTITY

    def test_scalar_operator_rejects_vectors(self):
        v = vec4f.new(1.0, 2.0, 3.0, 4.0)
        with pytest.raises(TypeError):
            mat4f.IDENTITY * v
        with pytest.raises(TypeError):
            v * mat4f.IDENTITY

    def test_numpy_scalar_still_scales(self):
        assert mat4f.IDENTITY * np.float64(2.0) == mat4f.scale(mat4f.IDENTITY, 2.0)

    def test_mixed_size_add_subtract(self):
        with pytest.raises(TypeError):
            mat4f.IDENTITY + mat2f.IDENTITY
        with pytest.raises(TypeError):
            mat2f.IDENTITY - mat4f.IDENTITY
