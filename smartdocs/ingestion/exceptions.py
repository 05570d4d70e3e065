class IngestionError(Exception):
    """Base exception for ingestion queue errors."""


class QueueBusyError(IngestionError):
    """Raised when the queue is modified or re-run while a batch is active."""
