from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    DateTime,
    Numeric,
    Text,
    Index,
    func,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PizzaCustomization(Base):
    """A flavor or ingredient offered on pizza products."""
    __tablename__ = "pizza_customizations"

    id = Column(String, primary_key=True)  # e.g. "PZ-F-001"
    name = Column(String, nullable=False)
    kind = Column(String, nullable=False, index=True)  # 'FLAVOR' or 'INGREDIENT'
    base_ingredients = Column(Text, nullable=True)  # free-text recipe, flavors only
    topping_value = Column(Integer, nullable=False, default=1)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)  # soft delete

    __table_args__ = (
        Index("ix_pizza_customizations_kind_sort", "kind", "sort_order"),
    )


class PizzaConfiguration(Base):
    """Topping allowance and extra cost for one pizza product (1:1)."""
    __tablename__ = "pizza_configurations"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(String, unique=True, nullable=False, index=True)
    included_topping_units = Column(Integer, nullable=False)
    extra_unit_cost = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
