"""Store error taxonomy shared by all repositories.

Repository implementations translate driver exceptions into these types,
so application code never depends on a specific database client.
"""


class RepositoryError(Exception):
    """Base exception for document store failures."""

    def __init__(self, message: str, collection: str = ""):
        """Initialize with message and optional collection name.

        Args:
            message: Description of the failing step
            collection: Collection involved in the failure, if known
        """
        self.collection = collection
        super().__init__(message)


class StoreConnectionError(RepositoryError):
    """Store is unreachable, misconfigured or rejected authentication."""

    pass


class QueryError(RepositoryError):
    """Query failed or result iteration broke off partway."""

    pass


class WriteError(RepositoryError):
    """Document could not be persisted."""

    pass


class ConflictError(RepositoryError):
    """Operation lost a race against a concurrent writer.

    Raised when a transaction is aborted with a transient error or when a
    store-level uniqueness guard rejects the write. Safe to retry.
    """

    pass
