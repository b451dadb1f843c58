import io

import numpy as np
import pytest

from stencilbench import seidel2d
from stencilbench.arrays import Dataset


def test_problem_sizes_follow_datasets():
    assert seidel2d.problem_size(Dataset.MINI) == (2, 32)
    assert seidel2d.problem_size("large") == (20, 2000)
    assert seidel2d.problem_size() == (20, 1000)


def test_init_array_first_row_constant():
    n = 6
    a = seidel2d.init_array(n)
    assert a.shape == (n, n)
    np.testing.assert_allclose(a[0], np.full(n, 2 / n))


def test_single_interior_point_is_mean_of_neighbourhood():
    a = np.zeros((3, 3))
    a[1, 1] = 9.0
    seidel2d.kernel_seidel_2d(1, 3, a)
    assert a[1, 1] == pytest.approx(1.0)


def test_updates_use_new_left_neighbour():
    a = np.zeros((4, 4))
    a[1, 1] = 9.0
    seidel2d.kernel_seidel_2d(1, 4, a)
    assert a[1, 1] == pytest.approx(1.0)
    assert a[1, 2] == pytest.approx(1 / 9)


def test_constant_field_is_stationary():
    a = np.full((8, 8), 2.5)
    seidel2d.kernel_seidel_2d(3, 8, a)
    np.testing.assert_allclose(a, 2.5)


def test_boundaries_unchanged():
    a = seidel2d.init_array(7)
    before = a.copy()
    seidel2d.kernel_seidel_2d(2, 7, a)
    np.testing.assert_array_equal(a[0], before[0])
    np.testing.assert_array_equal(a[-1], before[-1])
    np.testing.assert_array_equal(a[:, 0], before[:, 0])
    np.testing.assert_array_equal(a[:, -1], before[:, -1])
    assert not np.array_equal(a, before)


def test_zero_steps_leave_array_alone():
    a = seidel2d.init_array(5)
    before = a.copy()
    seidel2d.kernel_seidel_2d(0, 5, a)
    np.testing.assert_array_equal(a, before)


def test_print_array_format():
    out = io.StringIO()
    seidel2d.print_array(2, np.array([[0.25, 1.0], [2.0, 3.5]]), out)
    assert out.getvalue() == "0.25 \n1.00 2.00 3.50 \n"


def test_run_mini_dumps_every_value():
    out = io.StringIO()
    result = seidel2d.run(Dataset.MINI, stream=out)
    assert result.shape == (32, 32)
    assert len(out.getvalue().split()) == 32 * 32