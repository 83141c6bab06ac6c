"""
Exceptions raised by the close evaluation routines

Loss of accuracy (boundary data that is not the trace of a function in the
correct Hardy space, under-resolved quadratures, etc.) is never reported
through these; only malformed calls are.
"""

class Close_Evaluation_Error(Exception):
    """
    Base class for all errors raised by pycloseeval
    """
    pass

class Configuration_Error(Close_Evaluation_Error):
    """
    The requested scheme is missing something it needs, e.g. the
    near-singular exterior scheme without an inside point
    """
    pass

class Invalid_Argument_Error(Close_Evaluation_Error, ValueError):
    """
    Bad side, mismatched array lengths, bad delta or unknown backend
    """
    pass
