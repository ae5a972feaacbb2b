from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base for mutable domain entities with identity."""

    model_config = ConfigDict(validate_assignment=True)
