"""Zettel identifiers, metadata, syntax tree, policies, tokens and command line."""

__version__ = "0.1.0"