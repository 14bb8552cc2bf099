"""Source loaders for different file types."""

from .base import BaseLoader
from .graphql import GraphQLLoader
from .typescript import TypescriptLoader

__all__ = [
    "BaseLoader",
    "GraphQLLoader",
    "TypescriptLoader",
]
