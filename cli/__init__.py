"""CLI package for the Book and Topic Catalog"""
from .main import cli

__all__ = ['cli']
