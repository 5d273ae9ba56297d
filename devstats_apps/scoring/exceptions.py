class StatsError(Exception):
    """Base class for errors computing repository statistics"""


class NotFound(StatsError):
    """A project, repository or developer could not be resolved"""


class LedgerUnavailable(StatsError):
    """The commit ledger could not be queried"""
