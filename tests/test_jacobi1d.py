import io

import numpy as np
import pytest

from stencilbench import jacobi1d
from stencilbench.arrays import Dataset


def test_problem_sizes_follow_datasets():
    assert jacobi1d.problem_size(Dataset.MINI) == (2, 500)
    assert jacobi1d.problem_size("small") == (10, 1000)
    assert jacobi1d.problem_size() == (100, 10000)


def test_unknown_dataset_rejected():
    with pytest.raises(ValueError):
        jacobi1d.problem_size("huge")


def test_init_array_values():
    n = 10
    a, b = jacobi1d.init_array(n)
    assert a.shape == (n,) and b.shape == (n,)
    assert a[0] == pytest.approx(2 / n)
    np.testing.assert_allclose(b - a, np.full(n, 1 / n))


def test_zero_steps_leave_arrays_alone():
    a, b = jacobi1d.init_array(8)
    before_a, before_b = a.copy(), b.copy()
    jacobi1d.kernel_jacobi_1d_imper(0, 8, a, b)
    np.testing.assert_array_equal(a, before_a)
    np.testing.assert_array_equal(b, before_b)


def test_boundaries_fixed_and_copy_back():
    a, b = jacobi1d.init_array(12)
    first, last = a[0], a[-1]
    jacobi1d.kernel_jacobi_1d_imper(3, 12, a, b)
    assert a[0] == first
    assert a[-1] == last
    np.testing.assert_array_equal(a[1:-1], b[1:-1])


def test_constant_field_scaled_by_weight():
    a = np.ones(6)
    b = np.zeros(6)
    jacobi1d.kernel_jacobi_1d_imper(1, 6, a, b)
    np.testing.assert_allclose(a[1:-1], 3 * jacobi1d.WEIGHT)


def test_elements_beyond_n_untouched():
    a = np.ones(10)
    b = np.zeros(10)
    jacobi1d.kernel_jacobi_1d_imper(2, 5, a, b)
    np.testing.assert_array_equal(a[5:], np.ones(5))
    np.testing.assert_array_equal(b[4:], np.zeros(6))


def test_print_array_format():
    out = io.StringIO()
    jacobi1d.print_array(3, np.array([0.5, 1.0, 1.5]), out)
    assert out.getvalue() == "0.50 \n1.00 1.50 \n"


def test_print_array_line_breaks():
    out = io.StringIO()
    jacobi1d.print_array(45, np.zeros(45), out)
    text = out.getvalue()
    assert text.count("\n") == 4
    assert len(text.split()) == 45


def test_run_mini_dumps_every_value():
    out = io.StringIO()
    result = jacobi1d.run(Dataset.MINI, stream=out)
    assert result.shape == (500,)
    assert len(out.getvalue().split()) == 500