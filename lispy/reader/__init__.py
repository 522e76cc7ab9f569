from lispy.reader.parser import ParseNode, TokenStream, lex, parse
from lispy.reader.reader import read, read_forms, read_value

__all__ = ["ParseNode", "TokenStream", "lex", "parse", "read", "read_forms", "read_value"]
