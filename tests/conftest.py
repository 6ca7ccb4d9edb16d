import os

# must be set before sujaluxe.config is imported
os.environ["SQLALCHEMY_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["OPENAI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import sujaluxe.models  # noqa: F401
from sujaluxe.database import engine
from sujaluxe.main import app
from sujaluxe.models.customer import Customer
from sujaluxe.models.retailer import Retailer
from sujaluxe.notifications import ConnectionRegistry
from sujaluxe.utils.hash import hash_password
from sujaluxe.utils.token import auth_user_for, token_for


@pytest.fixture(autouse=True)
def db():
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    app.state.connections = ConnectionRegistry()
    with TestClient(app) as client:
        yield client


def _add(session, account):
    session.add(account)
    session.commit()
    session.refresh(account)
    return account


@pytest.fixture
def customer(session):
    return _add(session, Customer(
        name="Asha Rao",
        email="asha@example.com",
        password=hash_password("secret123"),
        address="12 MG Road, Bengaluru",
    ))


@pytest.fixture
def other_customer(session):
    return _add(session, Customer(
        name="Vikram Shah",
        email="vikram@example.com",
        password=hash_password("secret123"),
    ))


@pytest.fixture
def retailer(session):
    return _add(session, Retailer(
        business_name="Teak House",
        owner_name="Meera Iyer",
        email="teak@example.com",
        password=hash_password("secret123"),
        contact_number="9800000000",
        address="Jayanagar, Bengaluru",
    ))


@pytest.fixture
def other_retailer(session):
    return _add(session, Retailer(
        business_name="Oak & Co",
        owner_name="Ravi Kumar",
        email="oak@example.com",
        password=hash_password("secret123"),
        contact_number="9811111111",
        address="Indiranagar, Bengaluru",
    ))


def bearer(account) -> dict:
    return {"Authorization": f"Bearer {token_for(auth_user_for(account))}"}


def order_payload(customer_id="C1", items=None, total="200.00"):
    return {
        "order": {
            "customerId": customer_id,
            "totalAmount": total,
            "deliveryAddress": "12 MG Road, Bengaluru",
        },
        "items": items if items is not None else [
            {
                "productId": "P1",
                "retailerId": "R1",
                "productName": "Walnut Chair",
                "quantity": 2,
                "price": "100.00",
                "subtotal": "200.00",
            }
        ],
    }


def notifications_for(client, user_id, user_type):
    response = client.get(
        "/api/notifications", params={"userId": user_id, "userType": user_type}
    )
    assert response.status_code == 200
    return response.json()
