class SimplyspError(Exception):
    """ Base class for all Simplysp host-level errors"""
    pass

class SimplyspSyntaxError(SimplyspError):
    """ Raised when the input text does not match the grammar"""

    def __init__(self, message: str, source_name: str = "<stdin>", line: int = 1, column: int = 1):
        super().__init__(f"{source_name}:{line}:{column}: error: {message}")
        self.source_name = source_name
        self.line = line
        self.column = column

class SimplyspReaderError(SimplyspError):
    """ Raised when the reader meets a parse node the grammar cannot produce"""

class SimplyspNestingError(SimplyspError):
    """ Raised when an expression nests deeper than the interpreter can recurse"""

    def __init__(self, source_name: str = "<stdin>"):
        super().__init__(f"{source_name}: error: expression nested too deeply")
        self.source_name = source_name
