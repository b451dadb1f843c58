# stencilbench

A small suite of stencil benchmark kernels written against NumPy arrays,
with a timer for the kernel and one text dump format for the results of
every benchmark.

| Module                       | Kernel function            | What it computes                                  |
|------------------------------|----------------------------|---------------------------------------------------|
| `stencilbench.template`      | `kernel_template`          | adds 42 to every element of a square matrix       |
| `stencilbench.adi`           | `kernel_adi`               | alternating direction implicit sweeps             |
| `stencilbench.convolution2d` | `kernel_conv2d`            | 3x3 two-dimensional convolution (single precision)|
| `stencilbench.convolution3d` | `kernel_conv3d`            | three-dimensional convolution (single precision)  |
| `stencilbench.fdtd2d`        | `kernel_fdtd_2d`           | 2-D finite-difference time-domain                 |
| `stencilbench.fdtd_apml`     | `kernel_fdtd_apml`         | FDTD with an anisotropic perfectly matched layer  |
| `stencilbench.jacobi1d`      | `kernel_jacobi_1d_imper`   | 1-D Jacobi relaxation with copy-back              |
| `stencilbench.jacobi2d`      | `kernel_jacobi_2d_imper`   | 2-D Jacobi relaxation with copy-back              |
| `stencilbench.seidel2d`      | `kernel_seidel_2d`         | 2-D in-place Gauss-Seidel relaxation              |

Every benchmark module has the same shape:

- `problem_size(dataset)` gives the problem dimensions for a dataset
  (a `Dataset` member or its name; `None` means the module's default);
- `init_array(...)` builds the initial arrays;
- the kernel function updates the arrays in place;
- `print_array(..., stream)` writes the live-out data to a text stream;
- `run(dataset=None, timer=None, stream=None)` does all of the above,
  timing only the kernel call, and returns the live-out data.

`stencilbench.fdtd_apml` keeps its scalars and arrays together in an
`ApmlFields` dataclass, which `init_array` returns and the kernel updates.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
stencilbench BENCHMARK [--dataset NAME] [--timer {wall,cycles,gflops}]
             [--flops N] [--no-flush] [--cache-size-kb KB] [--dump]
```

`BENCHMARK` is one of `template`, `adi`, `convolution-2d`,
`convolution-3d`, `fdtd-2d`, `fdtd-apml`, `jacobi-1d-imper`,
`jacobi-2d-imper` and `seidel-2d`.

- `--dataset` picks the problem size: `mini`, `small`, `standard`,
  `large` or `extralarge` (case is ignored, and a `_DATASET` suffix is
  accepted). Each benchmark has its own default.
- `--timer` times the kernel and prints the result on standard output.
  Without it nothing is printed there.
- `--flops` gives the operation count used by the `gflops` timer.
- `--no-flush` skips the cache flush before timing; `--cache-size-kb`
  sets the size of the buffer touched by the flush (default 32770).
- `--dump` writes the live-out arrays to standard error.

For example:

```
stencilbench jacobi-2d-imper --dataset mini --timer wall
```

## Timing

`stencilbench.timing.Timer` is a dataclass with a `mode` from `TimerMode`:

- `WALL` (default): seconds from `time.time`, reported as `%0.6f`;
- `CYCLES`: ticks from `time.perf_counter_ns`, reported as an integer;
- `GFLOPS`: `program_flops / seconds / 1e9`, reported as `%0.2f`; when
  `program_flops` is zero a warning line is printed and the seconds are
  reported instead;
- `NONE`: every reading is zero.

Call `start()` and `stop()`, or use the timer as a context manager, then
read `elapsed()` or the text of `report()`. Unless `flush` is false,
`start()` first calls `flush_cache(cache_size_kb)`, which allocates and
sums a zero-filled buffer of that many kilobytes.

```python
from stencilbench import seidel2d
from stencilbench.timing import Timer

timer = Timer()
a = seidel2d.run("mini", timer)
print(timer.report(), end="")
```

## Arrays and dumps

`stencilbench.arrays` holds the shared pieces:

- `Dataset`, the enum of problem sizes, with `Dataset.from_name(name)`;
- `alloc_array(shape, dtype, padding)`, a zero-filled array of one to
  five dimensions, each extended by `padding` elements;
- `format_value(value)`, one value as `%0.2f` followed by a space;
- `write_dump(stream, entries)`, which writes `(values, line_break)`
  entries in order and ends the dump with a newline.

## Comparing results

`stencilbench.compare` gives `abs_val(a)` and `percent_diff(val1, val2)`,
both computed in single precision. Values whose magnitudes are both
below 0.01 count as equal:

```python
from stencilbench.compare import percent_diff

percent_diff(1.0, 1.0)   # 0.0
```

## What it does not do

The kernels run in a single Python process on NumPy arrays; nothing is
parallelised across threads. There is no support for hardware
performance counters or for switching the process to a real-time
scheduler while timing: the only measurements are the wall clock and
`time.perf_counter_ns` ticks.