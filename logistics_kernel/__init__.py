"""
logistics_kernel -- shared domain values, clock, logging and errors.

The kernel has no dependency on engines, configuration, services or
reporting; every other package imports from here.
"""
