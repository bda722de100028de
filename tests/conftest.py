from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import pizza_builder.db as db
import pizza_builder.config as config_mod
import pizza_builder.routes.pizza as pizza_routes
from pizza_builder.main import app
from pizza_builder.models import Base, PizzaCustomization
from pizza_builder.pizza import Catalog, Customization, CustomizationKind, PizzaConfig

# Test admin credentials
TEST_ADMIN_USERNAME = "testadmin"
TEST_ADMIN_PASSWORD = "testpassword123"

# Catalog ids used across the tests
PEPPERONI = "PZ-F-001"
HAWAIANA = "PZ-F-002"
MEXICANA = "PZ-F-003"
CUATRO_QUESOS = "PZ-F-004"     # inactive
TOCINO = "PZ-I-001"
CEBOLLA = "PZ-I-002"
CHAMPINONES = "PZ-I-003"
ANCHOAS = "PZ-I-004"           # inactive

SEED_CUSTOMIZATIONS = [
    dict(id=PEPPERONI, name="Pepperoni", kind="FLAVOR",
         base_ingredients="Pepperoni, Queso", topping_value=4, sort_order=1),
    dict(id=HAWAIANA, name="Hawaiana", kind="FLAVOR",
         base_ingredients="Jamón, Piña", topping_value=3, sort_order=2),
    dict(id=MEXICANA, name="Mexicana", kind="FLAVOR",
         base_ingredients="Chorizo, Jalapeño, Cebolla", topping_value=2, sort_order=3),
    dict(id=CUATRO_QUESOS, name="Cuatro Quesos", kind="FLAVOR",
         base_ingredients="Mozzarella, Gouda, Parmesano, Azul", topping_value=3,
         sort_order=4, is_active=False),
    dict(id=TOCINO, name="Tocino", kind="INGREDIENT", topping_value=1, sort_order=1),
    dict(id=CEBOLLA, name="Cebolla", kind="INGREDIENT", topping_value=1, sort_order=2),
    dict(id=CHAMPINONES, name="Champiñones", kind="INGREDIENT", topping_value=2, sort_order=2),
    dict(id=ANCHOAS, name="Anchoas", kind="INGREDIENT", topping_value=1,
         sort_order=5, is_active=False),
]


@pytest.fixture
def catalog():
    """In-memory catalog with three active flavors and three active ingredients."""
    return Catalog(Customization(**entry) for entry in SEED_CUSTOMIZATIONS)


@pytest.fixture
def config():
    """Four included topping units, 20.00 per extra unit."""
    return PizzaConfig(
        product_id="PIZZA-GRANDE",
        included_topping_units=4,
        extra_unit_cost=Decimal("20.00"),
    )


@pytest.fixture
def db_session():
    """SQLAlchemy session bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(monkeypatch):
    """Shared FastAPI TestClient using an in-memory SQLite DB.

    Uses StaticPool so all connections share the same in-memory database.
    Sets up test admin credentials and seeds the pizza catalog.
    """
    monkeypatch.setattr(config_mod, "ADMIN_USERNAME", TEST_ADMIN_USERNAME)
    monkeypatch.setattr(config_mod, "ADMIN_PASSWORD", TEST_ADMIN_PASSWORD)

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Patch the db module used by the app
    monkeypatch.setattr(db, "engine", engine)
    monkeypatch.setattr(db, "SessionLocal", TestingSessionLocal)

    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    for entry in SEED_CUSTOMIZATIONS:
        session.add(PizzaCustomization(**entry))
    session.commit()
    session.close()

    # Override FastAPI DB dependency
    def override_get_db():
        db_sess = TestingSessionLocal()
        try:
            yield db_sess
        finally:
            db_sess.close()

    app.dependency_overrides[db.get_db] = override_get_db

    # Rate limiting is exercised explicitly by the tests that need it
    pizza_routes.limiter.enabled = False
    pizza_routes.limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def admin_auth():
    """Returns HTTP Basic Auth tuple for admin endpoints."""
    return (TEST_ADMIN_USERNAME, TEST_ADMIN_PASSWORD)
