import io

import numpy as np
import pytest

from stencilbench import jacobi2d
from stencilbench.arrays import Dataset


def test_problem_sizes_follow_datasets():
    assert jacobi2d.problem_size(Dataset.MINI) == (2, 32)
    assert jacobi2d.problem_size("EXTRALARGE_DATASET") == (100, 4000)
    assert jacobi2d.problem_size() == (20, 1000)


def test_init_array_first_row():
    n = 5
    a, b = jacobi2d.init_array(n)
    assert a.shape == (n, n)
    np.testing.assert_allclose(a[0], np.full(n, 2 / n))
    np.testing.assert_allclose(b[0], np.full(n, 3 / n))


def test_boundaries_unchanged():
    a, b = jacobi2d.init_array(7)
    before = a.copy()
    jacobi2d.kernel_jacobi_2d_imper(4, 7, a, b)
    np.testing.assert_array_equal(a[0], before[0])
    np.testing.assert_array_equal(a[-1], before[-1])
    np.testing.assert_array_equal(a[:, 0], before[:, 0])
    np.testing.assert_array_equal(a[:, -1], before[:, -1])


def test_interior_copied_back():
    a, b = jacobi2d.init_array(6)
    jacobi2d.kernel_jacobi_2d_imper(2, 6, a, b)
    np.testing.assert_array_equal(a[1:-1, 1:-1], b[1:-1, 1:-1])


def test_constant_field_is_stationary():
    a = np.full((6, 6), 3.0)
    b = np.zeros((6, 6))
    jacobi2d.kernel_jacobi_2d_imper(5, 6, a, b)
    np.testing.assert_allclose(a, 3.0)


def test_zero_field_stays_zero():
    a = np.zeros((5, 5))
    b = np.zeros((5, 5))
    jacobi2d.kernel_jacobi_2d_imper(3, 5, a, b)
    assert not a.any()


def test_print_array_format():
    out = io.StringIO()
    jacobi2d.print_array(2, np.array([[0.0, 1.0], [2.0, 3.0]]), out)
    assert out.getvalue() == "0.00 \n1.00 2.00 3.00 \n"


def test_run_mini_dumps_every_value():
    out = io.StringIO()
    result = jacobi2d.run(Dataset.MINI, stream=out)
    assert result.shape == (32, 32)
    assert len(out.getvalue().split()) == 32 * 32