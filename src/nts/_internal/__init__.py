"""Internal utilities for nts.

This module contains internal utilities that should not be used directly
by external code.
"""
