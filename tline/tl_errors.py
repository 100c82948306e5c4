# tline/tl_errors.py
"""Error kinds raised by the engine and the UNDEFINED marker."""


class TransmissionLineError(Exception):
    """Base class for every engine error."""


class SingularDivision(TransmissionLineError, ZeroDivisionError):
    """Complex divisor with (near) zero magnitude."""


class UndefinedLineQuantity(TransmissionLineError, ValueError):
    """A line quantity (wavelength, phase velocity) is undefined because beta is zero."""


class InvalidParameter(TransmissionLineError, ValueError):
    """Rejected input field. ``field`` names the offending key."""

    def __init__(self, field, message):
        super().__init__(f"{field}: {message}")
        self.field = field


class SaturatedReflection(TransmissionLineError, ArithmeticError):
    """|Gamma| at or above the saturation threshold."""


class _Undefined:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'UNDEFINED'

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_undefined(value) -> bool:
    return value is UNDEFINED
