"""Exception hierarchy for Shapeplot."""


class ShapeplotError(Exception):
    """Base exception for all Shapeplot errors."""

    pass


class ArgumentError(ShapeplotError):
    """Errors related to the arguments passed to an operation."""

    pass


class InvalidArgumentCountError(ArgumentError):
    """An operation received an unsupported number of arguments."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"Incorrect arguments supplied for {operation}: {detail}")


class InvalidCallbackError(InvalidArgumentCountError):
    """The action supplied to an iteration helper is not callable."""

    def __init__(self, operation: str, callback: object) -> None:
        self.callback = callback
        super().__init__(
            operation,
            f"callback must be callable, instead got {callback!r} ({type(callback).__name__})",
        )


class UnsupportedCollectionError(ArgumentError):
    """The collection passed to for_each cannot be iterated."""

    def __init__(self, collection: object) -> None:
        self.collection = collection
        super().__init__(
            "First argument of for_each must be a sequence, mapping, or string, "
            f"instead got {type(collection).__name__}"
        )


class DrawingContextError(ShapeplotError):
    """Errors related to the host drawing surface."""

    pass


class MissingDrawingContextError(DrawingContextError):
    """The drawing surface could not produce the requested context."""

    def __init__(self, context_type: str) -> None:
        self.context_type = context_type
        super().__init__(
            f"Could not get a '{context_type}' drawing context from the provided surface"
        )
