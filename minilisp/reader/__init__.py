from minilisp.reader.lexer import Token, lex, tokenize
from minilisp.reader.parser import TokenStream, parse, parse_one, read

__all__ = ["Token", "lex", "tokenize", "TokenStream", "parse", "parse_one", "read"]
