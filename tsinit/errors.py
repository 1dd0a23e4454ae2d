"""Exception types shared across tsinit."""


class TsInitError(Exception):
    """Base class for failures the CLI reports as a localized error line."""


class InitError(TsInitError):
    """Raised when the project cannot be materialized (e.g. target already exists)."""


class OperationCanceled(Exception):
    """Raised when the user types the cancel sentinel at a cancelable prompt.

    Not a ``TsInitError``: cancellation is a normal way to end a run and the
    CLI turns it into a clean exit.
    """
