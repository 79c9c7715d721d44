"""
Abstract interfaces and protocols for argot
"""
from .parser import ArgBinder_i, Tokenizer_i
from .protocols import Constraint_p, Handler_p, ValueType_p
