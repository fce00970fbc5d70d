"""
Tests for registration and login
"""
import pytest
from sqlalchemy import select

from app.core.exceptions import ErrorKind, ServiceError
from app.core.security import decode_token, verify_password
from app.modules.users.models import User, UserRole
from app.modules.users.schemas import UserRegistrationRequest
from app.modules.users.services import AuthService


def registration_body(**overrides):
    body = {
        "name": "Lena Lender",
        "email": "l@x.com",
        "password": "s3cret-pass",
        "role": "lender",
        "occupation": "Banker",
        "contactNumber": "555-0100",
    }
    body.update(overrides)
    return body


class TestRegister:
    """Tests for POST /api/register"""

    @pytest.mark.integration
    async def test_register_success(self, client, db_session):
        response = await client.post("/api/register", json=registration_body())

        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully"}

        result = await db_session.execute(select(User).where(User.email == "l@x.com"))
        user = result.scalar_one()
        assert user.role == UserRole.LENDER
        assert user.contact_number == "555-0100"
        assert user.hashed_password != "s3cret-pass"
        assert verify_password("s3cret-pass", user.hashed_password)

    @pytest.mark.integration
    async def test_register_duplicate_email(self, client):
        first = await client.post("/api/register", json=registration_body())
        second = await client.post("/api/register", json=registration_body(name="Someone Else"))

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"message": "User already exists"}

    @pytest.mark.integration
    async def test_register_duplicate_email_case_insensitive(self, client):
        await client.post("/api/register", json=registration_body())
        response = await client.post("/api/register", json=registration_body(email="L@X.com"))

        assert response.status_code == 400

    @pytest.mark.integration
    async def test_register_invalid_role(self, client):
        response = await client.post("/api/register", json=registration_body(role="admin"))

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    @pytest.mark.integration
    async def test_register_accepts_snake_case(self, client, db_session):
        body = registration_body()
        body["contact_number"] = body.pop("contactNumber")

        response = await client.post("/api/register", json=body)

        assert response.status_code == 201

    @pytest.mark.integration
    async def test_unique_index_backs_up_precheck(self, db_session, lender, monkeypatch):
        """A duplicate that slips past the lookup still maps to Conflict"""

        async def no_user(db, email):
            return None

        monkeypatch.setattr(AuthService, "get_user_by_email", staticmethod(no_user))
        data = UserRegistrationRequest(
            name="Racer", email=lender.email, password="another-pass", role=UserRole.BORROWER
        )

        with pytest.raises(ServiceError) as exc_info:
            await AuthService.register_user(db_session, data)

        assert exc_info.value.kind == ErrorKind.CONFLICT
        assert exc_info.value.status_code == 400


class TestLogin:
    """Tests for POST /api/login"""

    @pytest.mark.integration
    async def test_login_success(self, client, lender, user_password):
        response = await client.post(
            "/api/login", json={"email": lender.email, "password": user_password}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {
            "id": lender.id,
            "name": "Lena Lender",
            "email": "lender@example.com",
            "role": "lender",
            "occupation": "Engineer",
            "contactNumber": "+1234567890",
        }
        assert "password" not in str(data["user"]).lower()

        payload = decode_token(data["token"])
        assert payload["userId"] == lender.id
        assert payload["role"] == "lender"
        assert "exp" in payload

    @pytest.mark.integration
    async def test_wrong_password_and_unknown_email_look_the_same(self, client, lender, user_password):
        wrong_password = await client.post(
            "/api/login", json={"email": lender.email, "password": "nope-nope"}
        )
        unknown_email = await client.post(
            "/api/login", json={"email": "ghost@example.com", "password": user_password}
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}

    @pytest.mark.integration
    async def test_registered_user_can_login(self, client):
        await client.post("/api/register", json=registration_body(role="borrower"))

        response = await client.post(
            "/api/login", json={"email": "l@x.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 200
        assert decode_token(response.json()["token"])["role"] == "borrower"
