
class SsliError(Exception):
    """ Base class for all recoverable ssli errors"""
    pass

class SsliSyntaxError(SsliError):
    """ Raised when source text cannot be parsed"""
    pass

class SsliUnboundSymbol(SsliError):
    """ Raised when a variable is used before it is declared"""
    pass

class SsliNameError(SsliUnboundSymbol):
    """ Raised when a procedure is called that was never defined"""

class SsliTypeError(SsliError):
    """ Raised when a value cannot be converted to the shape an operation requires"""

class SsliArityError(SsliError):
    """ Raised when an operation is given fewer arguments than it requires"""

class SsliArithmeticError(SsliError):
    """ Raised on division or remainder by zero"""

class SsliImportError(SsliError):
    """ Raised when a source file cannot be found or read"""

class SsliCircularImportError(SsliImportError):
    """ Raised when a file is imported while it is still being imported"""

class SsliAssertionError(SsliError):
    """ Raised when an in-language assertion fails"""


class ProgramExit(Exception):
    """ Raised by `exit`; carries the code the host process should exit with.

    Not an SsliError: handlers catching SsliError do not stop it.
    """

    def __init__(self, code: int = 0):
        super().__init__(f"Program exited with code {code}")
        self.code = code
