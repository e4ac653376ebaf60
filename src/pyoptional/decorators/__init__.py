"""Decorators that lift plain functions into Optional-returning ones."""

from pyoptional.decorators.optional_return import optional_return, optional_return_async

__all__ = ['optional_return', 'optional_return_async']
