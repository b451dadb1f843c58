"""Stencil benchmark kernels with a kernel timer, result dumps and a command line."""

__version__ = "0.1.0"