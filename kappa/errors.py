class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass

class KappaTypeError(KappaError):
    """ Raised when a non-callable is passed where a function is required"""

class KappaArityError(KappaError):
    """ Raised when a curried function receives more arguments than it accepts"""

class KappaUnboundLabel(KappaError):
    """ Raised when a labelled receiver reference names no enclosing scope"""

class KappaUnboundMember(KappaError, AttributeError):
    """ Raised when no receiver in a scope chain has the requested member"""

class KappaEscapeError(KappaError):
    """ Raised when a return function is invoked after its boundary has exited"""


def require_callable(fn, role: str) -> None:
    if not callable(fn):
        raise KappaTypeError(f"{role} must be callable, got {type(fn).__name__}")
