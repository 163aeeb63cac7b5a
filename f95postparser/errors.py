class ParameterError(ValueError):
    """Raised when a pipeline step receives a node it cannot operate on."""
