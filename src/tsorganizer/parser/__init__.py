"""
This facade exposes the public API for the parser module.
"""
from .model_builder import ModelBuilder, parse_source
from .language_manager import create_parser, grammar_for

__all__ = ["ModelBuilder", "parse_source", "create_parser", "grammar_for"]
