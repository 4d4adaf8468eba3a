"""Q16.16 fixed-point arithmetic, 32-bit fractions, trigonometry and small matrix algebra."""

__version__ = "0.1.0"
__all__ = ["fix16", "fract32", "strconv", "trig", "number", "fixarray", "matrix"]