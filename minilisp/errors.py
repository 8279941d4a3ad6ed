class MiniLispError(Exception):
    """ Base class for all MiniLisp errors"""
    pass


class LexError(MiniLispError):
    """ Raised when the source contains a character the lexer cannot accept"""


# ----------------------
# Parse errors
# ----------------------
class ParseError(MiniLispError):
    """ Raised when tokens do not form a valid expression"""


class UnbalancedParens(ParseError):
    """ Raised on a stray ')' or when input ends with '(' still open"""


class UnexpectedEof(ParseError):
    """ Raised when an expression is required but the input is exhausted"""


class MalformedSpecialForm(ParseError):
    """ Raised when a special form's operands do not have the expected shape"""


# ----------------------
# Evaluation errors
# ----------------------
class EvalError(MiniLispError):
    """ Base class for errors raised while evaluating"""


class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name):
        super().__init__(f"Unbound symbol {name}")
        self.name = str(name)


class TypeMismatch(EvalError):
    """ Raised when an operand has the wrong kind of value"""


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name, expected: int, received: int):
        super().__init__(
            f"{name} expects {expected} argument(s) but received {received}"
        )
        self.expected = expected
        self.received = received


class DivisionByZero(EvalError):
    """ Raised when a divisor evaluates to zero"""


class EmptyForm(EvalError):
    """ Raised when the empty form () is evaluated"""


class RecursionDepthExceeded(EvalError):
    """ Raised when nested function calls exceed the configured depth"""
