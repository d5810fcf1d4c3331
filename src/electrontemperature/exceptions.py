class DegenerateInputError(ArithmeticError):
    """
    The intensity ratio is undefined, e.g. the denominator line has no
    samples below the threshold.
    """
