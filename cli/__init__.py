"""CLI package for the book catalog"""
from .main import cli

__all__ = ['cli']
