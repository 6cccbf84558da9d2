"""
CLI Command Modules
"""

from tsorganizer.cli import commands

__all__ = ['commands']
