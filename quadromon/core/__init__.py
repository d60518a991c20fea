from quadromon.core.binary import ByteCursor, ReportTruncatedError, be_to_int, int_to_be

__all__ = ["ByteCursor", "ReportTruncatedError", "be_to_int", "int_to_be"]
