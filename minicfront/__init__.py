"""MiniC front end: two lexers, a recursive-descent parser and a command-line driver."""

__version__ = "1.0.1"
__all__ = ["tokens", "ast_nodes", "lexer", "parser", "flex_tokens", "flex_lexer", "executor"]