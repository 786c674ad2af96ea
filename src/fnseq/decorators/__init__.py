"""Decorators: @requires."""

from fnseq.decorators.requires import requires

__all__ = ['requires']
