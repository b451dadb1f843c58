import io

import numpy as np
import pytest

from stencilbench.adi import init_array, kernel_adi, print_array, problem_size, run
from stencilbench.arrays import Dataset
from stencilbench.timing import Timer, TimerMode


def test_problem_sizes():
    assert problem_size(Dataset.MINI) == (2, 32)
    assert problem_size() == (50, 1024)
    assert problem_size("large") == (50, 2000)


def test_init_values_and_shapes():
    x, a, b = init_array(4)
    assert x.shape == a.shape == b.shape == (4, 4)
    assert x.dtype == np.float64
    assert x[0, 0] == 0.25
    assert b[0, 0] == 0.75


def test_zero_steps_leave_arrays_unchanged():
    x, a, b = init_array(6)
    x0, a0, b0 = x.copy(), a.copy(), b.copy()
    kernel_adi(0, 6, x, a, b)
    assert np.array_equal(x, x0)
    assert np.array_equal(a, a0)
    assert np.array_equal(b, b0)


def test_single_element():
    x, a, b = init_array(1)
    kernel_adi(1, 1, x, a, b)
    assert x[0, 0] == pytest.approx(1 / 9)
    assert b[0, 0] == 3.0


def test_a_is_never_written():
    x, a, b = init_array(6)
    a0 = a.copy()
    kernel_adi(3, 6, x, a, b)
    assert np.array_equal(a, a0)


def test_b_evolution_independent_of_x():
    x1, a1, b1 = init_array(6)
    x2, a2, b2 = init_array(6)
    x2 *= 2
    kernel_adi(2, 6, x1, a1, b1)
    kernel_adi(2, 6, x2, a2, b2)
    assert np.array_equal(b1, b2)


def test_padding_is_untouched_and_block_matches():
    n = 5
    x, a, b = init_array(n)
    px, pa, pb = (np.zeros((n + 2, n + 2)) for _ in range(3))
    px[:n, :n], pa[:n, :n], pb[:n, :n] = x, a, b
    kernel_adi(2, n, x, a, b)
    kernel_adi(2, n, px, pa, pb)
    assert np.array_equal(px[:n, :n], x)
    assert np.array_equal(pb[:n, :n], b)
    assert np.all(px[n:, :] == 0) and np.all(px[:, n:] == 0)


def test_print_array_line_breaks():
    x, _, _ = init_array(5)
    out = io.StringIO()
    print_array(5, x, out)
    lines = out.getvalue().split("\n")
    assert len(lines[0].split()) == 1
    assert len(lines[1].split()) == 20
    assert len(lines[2].split()) == 4
    assert lines[-1] == ""


def test_run_mini_is_deterministic():
    out = io.StringIO()
    timer = Timer(mode=TimerMode.WALL, flush=False, clock=iter([1.0, 4.0]).__next__)
    first = run(Dataset.MINI, timer, out)
    second = run("mini")
    assert first.shape == (32, 32)
    assert np.array_equal(first, second, equal_nan=True)
    assert len(out.getvalue().split()) == 32 * 32
    assert timer.elapsed() == pytest.approx(3.0)