"""
Test Suite
==========

Test suite matching the compat_table/ package structure.

Test Categories:
- unit: Unit tests for individual components
"""
