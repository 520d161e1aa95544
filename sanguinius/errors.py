from __future__ import annotations


class SanguiniusError(Exception):
    """ Base class for all Sanguinius errors"""
    pass


class SanguiniusReadError(SanguiniusError):
    """ Raised when the reader meets malformed input"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position


class SanguiniusWriteError(SanguiniusError):
    """ Raised when a value cannot be given an external representation"""


class SanguiniusEvalError(SanguiniusError):
    """ Base class for errors raised while evaluating a form"""


class SanguiniusUnboundSymbol(SanguiniusEvalError):
    """ Raised when a symbol is looked up or assigned before it is bound"""


class SanguiniusSyntaxError(SanguiniusEvalError):
    """ Raised when a special form or expression has an invalid shape"""


class SanguiniusApplicationError(SanguiniusEvalError):
    """ Raised when a non-procedure value is applied"""


class SanguiniusArityError(SanguiniusError):
    """ Raised when a compound or primitive procedure gets the wrong number of arguments"""


class SanguiniusPrimitiveError(SanguiniusError):
    """ Base class for errors signalled by primitive procedures"""


class SanguiniusTypeError(SanguiniusPrimitiveError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""


class SanguiniusValueError(SanguiniusPrimitiveError):
    """ Raised when an argument has the right type but an unusable value"""
