# =============================================================================
# core/models/base.py - Shared Schema Configuration
# =============================================================================
# All API schemas speak camelCase JSON ("movieId", "actorIds") while the
# Python side keeps snake_case attribute names.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base class for request and response schemas.

    - camelCase aliases on the wire, snake_case in Python
    - accepts either spelling on input
    - can be built straight from ORM rows
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
