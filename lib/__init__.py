# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: SQLAlchemy engine/session singleton and schema setup
# - utils.py: Shared utilities (error base class, actor id parsing)
#
# lib.store is imported directly (from lib.store import EntityStore); it
# depends on the ORM tables in core/models.
# =============================================================================

from lib.database import Base, Database, DatabaseError, init_schema
from lib.utils import ApplicationError, parse_actor_ids

__all__ = [
    # Database
    "Base",
    "Database",
    "DatabaseError",
    "init_schema",
    # Utils
    "ApplicationError",
    "parse_actor_ids",
]
