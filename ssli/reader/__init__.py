"""Reader: tokenizer and parser."""
