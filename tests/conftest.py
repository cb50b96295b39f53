from decimal import Decimal

import pytest

from storeapi.app import create_app
from storeapi.config import TestConfig
from storeapi.extensions import db as _db
from storeapi.models import Category, Product, Wishlist


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def category(session):
    c = Category(name="Books")
    session.add(c)
    session.commit()
    return c


@pytest.fixture
def product(session, category):
    p = Product(name="Dune", description="Paperback", price=Decimal("12.50"), category_id=category.id)
    session.add(p)
    session.commit()
    return p


@pytest.fixture
def wishlist(session):
    w = Wishlist(name="Birthday")
    session.add(w)
    session.commit()
    return w
