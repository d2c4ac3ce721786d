"""Error taxonomy for board construction and move validation."""


class TicTacToeError(ValueError):
    """Base class; subclasses ValueError so generic move handlers still catch it."""


class InvalidSize(TicTacToeError):
    pass


class InvalidMarker(TicTacToeError):
    pass


class OutOfBounds(TicTacToeError):
    pass


class AlreadyMarked(TicTacToeError):
    pass


class GameFinished(TicTacToeError):
    """Raised when a move is attempted after a win or draw."""
