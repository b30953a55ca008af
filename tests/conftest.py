import os

# Configure the app for an in-memory database before any app module is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

from datetime import datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.metrics import BusinessMetrics, get_metrics  # noqa: E402
from app.models import (  # noqa: E402
    Booking,
    BookingStatus,
    Payment,
    PaymentMethod,
    PaymentStatus,
    Pet,
    PetType,
    Review,
    User,
    UserRole,
)
from app.services.notification_service import (  # noqa: E402
    NotificationTransport,
    get_notification_transport,
)
from app.services.payment_gateway import (  # noqa: E402
    ChargeResult,
    PaymentGateway,
    get_payment_gateway,
)


class RecordingTransport(NotificationTransport):
    """Keeps (user_id, type) for every delivered notification"""

    def __init__(self):
        self.delivered = []

    def deliver(self, notification):
        self.delivered.append((notification.user_id, notification.type.value))

    def types(self):
        return [kind for _, kind in self.delivered]


class FakeGateway(PaymentGateway):
    def __init__(self, approve=True):
        self.approve = approve
        self.charges = []
        self.refunds = []

    def charge(self, amount, currency, method):
        self.charges.append((amount, currency, method))
        if not self.approve:
            return ChargeResult(success=False, error="card declined")
        return ChargeResult(success=True, transaction_id=f"txn_test_{len(self.charges)}")

    def refund(self, transaction_id, amount):
        self.refunds.append((transaction_id, amount))
        return ChargeResult(success=True, transaction_id=transaction_id)


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def metrics():
    return BusinessMetrics()


@pytest.fixture
def client(db, transport, gateway, metrics):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notification_transport] = lambda: transport
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_metrics] = lambda: metrics
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role=UserRole.OWNER, first_name=None, **fields):
        counter["n"] += 1
        user = User(
            email=fields.pop("email", f"user{counter['n']}@example.com"),
            first_name=first_name or f"User{counter['n']}",
            last_name=fields.pop("last_name", "Test"),
            role=role,
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def owner(make_user):
    return make_user(UserRole.OWNER, first_name="Olivia")


@pytest.fixture
def sitter(make_user):
    return make_user(UserRole.SITTER, first_name="Sam", hourly_rate=20.0)


@pytest.fixture
def make_pet(db):
    def _make(owner, pet_type=PetType.DOG, name="Rex"):
        pet = Pet(owner_id=owner.id, name=name, type=pet_type)
        db.add(pet)
        db.commit()
        db.refresh(pet)
        return pet

    return _make


@pytest.fixture
def make_booking(db):
    counter = {"n": 0}

    def _make(owner, sitter, status=BookingStatus.PENDING, start=None, created_at=None):
        counter["n"] += 1
        # Each booking gets its own day so slots never overlap by accident
        start = start or datetime(2030, 1, 1, 9, 0) + timedelta(days=counter["n"])
        booking = Booking(
            owner_id=owner.id,
            sitter_id=sitter.id,
            status=status,
            start_date=start,
            end_date=start + timedelta(hours=4),
            total_amount=Decimal("80.00"),
        )
        if created_at is not None:
            booking.created_at = created_at
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make


@pytest.fixture
def make_review(db):
    def _make(booking, reviewer, reviewed, rating):
        review = Review(
            booking_id=booking.id,
            reviewer_id=reviewer.id,
            reviewed_user_id=reviewed.id,
            rating=rating,
        )
        db.add(review)
        db.commit()
        db.refresh(review)
        return review

    return _make


@pytest.fixture
def make_payment(db):
    def _make(booking, amount="50.00", status=PaymentStatus.PAID, created_at=None):
        payment = Payment(
            booking_id=booking.id,
            amount=Decimal(amount),
            payment_method=PaymentMethod.CREDIT_CARD,
            status=status,
        )
        if created_at is not None:
            payment.created_at = created_at
        db.add(payment)
        db.commit()
        db.refresh(payment)
        return payment

    return _make
