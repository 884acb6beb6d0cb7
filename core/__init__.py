# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the movie catalogue logic:
# - models/: ORM tables and Pydantic schemas
# - services/: CRUD services per resource and the startup seeder
#
# Code in this package should NOT import from FastAPI routers or middleware.
# This keeps the logic testable and reusable.
# =============================================================================
