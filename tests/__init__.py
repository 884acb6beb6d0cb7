# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Movie API:
# - test_models.py: Pydantic schema parsing and serialization
# - test_store.py: Entity store writes, conflicts, cascade and join
# - test_seed.py: Startup seeding and schema creation
# - test_api_token.py: Token gate middleware
# - test_*_api.py: HTTP contract of each resource
# - test_health.py: Health endpoints and application lifespan
#
# Run tests with: pytest
# =============================================================================
