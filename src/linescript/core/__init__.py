"""
Core Subpackage.

Hosts the `TranspilerEngine` that drives a whole-file translation.
"""
