# Core type aliases for Lispy's data model.
# Unlike a host-typed Lisp, every runtime datum is an explicit variant class
# (see lispy.types) so that S-expressions and Q-expressions stay distinct.
#
# Naming guidance:
# - LispValue: the closed union of runtime values, used by evaluator/builtin code.
# - SExpression: kept as an alias for reader code that produces forms.

from lispy.types import Value

__version__ = "0.0.1"

LispValue = Value
SExpression = LispValue
