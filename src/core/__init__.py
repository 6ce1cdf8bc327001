"""Core de mle-cli: tokenizer, validación, registro y despacho."""

__version__ = "1.0.0"
