from __future__ import annotations


class SproutError(Exception):
    """ Base class for all Sprout errors"""
    pass

class SproutSyntaxError(SproutError):
    """ Raised when the reader cannot parse a source unit"""
    pass

class SproutGrowthError(SproutError):
    """ Raised (in strict mode) when a form cannot be grown into IR"""

class SproutArityError(SproutGrowthError):
    """ Raised (in strict mode) when a fixed-arity form gets the wrong number of arguments"""

class SproutEmitError(SproutError):
    """ Raised when an IR node cannot be rendered as Python source"""

class SproutRuntimeFault(SproutError):
    """ Raised when emitted code fails inside the execution context"""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source
