class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when source text cannot be parsed"""

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at position {position}")

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class LispyTypeError(LispyError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

class LispyValueError(LispyError):
    """ Raised when an argument has the right type but an unusable value"""
