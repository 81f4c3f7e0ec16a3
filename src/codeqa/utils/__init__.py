"""Utility functions for codeqa."""

from codeqa.utils.binary import is_binary_content

__all__ = ["is_binary_content"]
