"""
Tokenizing and binding of command lines
"""
from .binder import ArgBinder
from .tokenizer import QuotedTokenizer, WhitespaceTokenizer, build_tokenizer
