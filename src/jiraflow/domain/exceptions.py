"""
Domain exceptions for workflow path discovery.

Missing or empty arguments are reported with the builtin ValueError and
TypeError; these classes cover failures coming from collaborators.
"""


class OracleError(Exception):
    """
    Raised by tracker adapters when a query or transition fails.

    During discovery this marks a dead end for one search branch; during
    execution it aborts the remaining steps.
    """

    def __init__(self, message: str, issue_id: str = ""):
        """
        Args:
            message: Human-readable error message
            issue_id: Issue the failing call was made for
        """
        super().__init__(message)
        self.issue_id = issue_id


class CacheDocumentError(Exception):
    """
    Raised when a persisted path-cache document is malformed.

    Cache adapters treat this like any other read error: log it and start
    from an empty document.
    """
