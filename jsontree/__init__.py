"""A JSON document model with its own lexer, parser and serializer."""

__version__ = "0.1.0"
__all__ = ["scalars", "value", "containers", "lexer", "parser", "document"]