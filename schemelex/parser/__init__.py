"""Grammar classes for the lexical syntax, one module per family of tokens."""
