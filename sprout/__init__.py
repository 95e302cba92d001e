# Core type aliases for Sprout's data model.
# Forms are plain Python values: int/float/str/bool/None, Symbol, Keyword and
# list for compound forms. There is no Cons type.
#
# Naming guidance:
# - SExpression: reader/grower/macro code, the parsed tree before growth.
# - HostValue:   values produced by executing emitted Python in the context.

from typing import Any, Callable

SExpression = Any
HostValue = Any

# Grow function type: passed into special forms so they can grow sub-forms
GrowFn = Callable[[SExpression], Any]
