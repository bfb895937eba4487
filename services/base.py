"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    Tests build it with an in-memory database manager; the CLI builds it from
    the loaded config.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If None, one is
            created from config.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.expenses import ExpenseService

        self.expenses = ExpenseService(self.db_manager, config.storage_key)
