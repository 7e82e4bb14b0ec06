class AocHelperError(Exception):
    """base exception for this package"""


class MissingSessionIdError(AocHelperError):
    """no session id was configured, but one is needed to fetch input"""


class PuzzleInFutureError(AocHelperError):
    """the requested puzzle date has not happened yet"""


class NoPuzzleOnDateError(AocHelperError):
    """there was never a puzzle released on the requested date"""


class InputIOError(AocHelperError):
    """reading, writing or fetching the puzzle input failed"""


class PuzzleLockedError(InputIOError):
    """trying to access input before the unlock"""


class NoSolversError(AocHelperError):
    """run was called without any solver functions configured"""
