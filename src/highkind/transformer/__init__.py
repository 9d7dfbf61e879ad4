"""Monad transformers."""

from highkind.transformer.error_t import ErrorT, ErrorTMu

__all__ = ['ErrorT', 'ErrorTMu']
