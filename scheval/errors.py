class SchevalError(Exception):
    """ Base class for all scheval errors"""
    pass


class SchevalUnboundVariable(SchevalError):
    """ Raised when a variable is looked up or assigned before it is bound"""

    def __init__(self, name):
        super().__init__(f"Unbound variable {name}")
        self.name = name


class SchevalArityError(SchevalError):
    """ Raised when a parameter list and an argument list differ in length"""

    def __init__(self, message: str, parameters, arguments):
        super().__init__(message)
        self.parameters = list(parameters)
        self.arguments = list(arguments)


class SchevalTooManyArguments(SchevalArityError):
    """ Raised when more arguments than parameters are supplied"""


class SchevalTooFewArguments(SchevalArityError):
    """ Raised when fewer arguments than parameters are supplied"""


class SchevalSyntaxError(SchevalError):
    """ Raised when an expression or source text is structurally malformed"""


class SchevalMalformedCond(SchevalSyntaxError):
    """ Raised when a cond has clauses after its else clause"""


class SchevalUnknownExpressionType(SchevalError):
    """ Raised when eval is handed a value that is no known expression"""

    def __init__(self, expression):
        super().__init__(f"Unknown expression type -- EVAL {expression!r}")
        self.expression = expression


class SchevalUnknownProcedureType(SchevalError):
    """ Raised when apply is handed a value that is not a procedure"""

    def __init__(self, procedure):
        super().__init__(f"Unknown procedure type -- APPLY {procedure!r}")
        self.procedure = procedure


class SchevalTypeError(SchevalError):
    """ Raised when a primitive receives arguments of the wrong type"""


class SchevalPrimitiveError(SchevalError):
    """ Raised when the host body of a primitive fails"""

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"Primitive {name} failed: {cause}")
        self.primitive = name


class SchevalConfigError(SchevalError):
    """ Raised when a configuration value is invalid"""
