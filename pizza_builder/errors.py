"""
Exceptions raised at the catalog and configuration boundaries.

Structural problems with a pizza selection are never raised; they are
reported as a list of violations by pizza_builder.pizza.validators.
"""


class PizzaBuilderError(Exception):
    """Base class for pizza builder errors."""


class NotFound(PizzaBuilderError):
    """An unknown product or customization id was requested."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")


class InvalidConfig(PizzaBuilderError):
    """Negative economic parameters were given for a pizza configuration."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
