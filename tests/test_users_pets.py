from app.models import PetType, UserRole


def register(client, email="Jane.Doe@Example.com", role="OWNER", **extra):
    body = {"email": email, "firstName": "Jane", "lastName": "Doe", "role": role, **extra}
    return client.post("/users", json=body)


class TestUsers:
    def test_create_normalizes_email_and_phone(self, client):
        response = register(client, phone="(555) 123-4567")

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "jane.doe@example.com"
        assert data["phone"] == "+15551234567"
        assert data["firstName"] == "Jane"
        assert data["rating"] == 0
        assert data["reviewCount"] == 0

    def test_duplicate_email_rejected(self, client):
        assert register(client).status_code == 201

        response = register(client, email="JANE.DOE@example.com")

        assert response.status_code == 400
        assert response.json()["detail"] == "User with this email already exists"

    def test_invalid_email_is_validation_error(self, client):
        assert register(client, email="not-an-email").status_code == 422

    def test_bio_is_escaped(self, client):
        response = register(client, bio="<script>alert(1)</script>")
        assert response.json()["bio"] == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_lookup_by_email(self, client):
        user_id = register(client).json()["id"]

        response = client.get("/users/by-email", params={"email": "JANE.DOE@example.com"})

        assert response.status_code == 200
        assert response.json()["id"] == user_id

    def test_sitters_and_owners_lists(self, client, make_user):
        make_user(UserRole.OWNER)
        make_user(UserRole.SITTER)
        make_user(UserRole.SITTER)

        assert len(client.get("/users/sitters").json()) == 2
        assert len(client.get("/users/owners").json()) == 1

    def test_missing_user_is_404(self, client):
        response = client.get("/users/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_update_and_delete(self, client, owner):
        response = client.put(f"/users/{owner.id}", json={"lastName": "Smith", "hourlyRate": 18.5})
        assert response.status_code == 200
        assert response.json()["lastName"] == "Smith"

        response = client.delete(f"/users/{owner.id}")
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/users/{owner.id}").status_code == 404


class TestPets:
    def test_owner_can_register_pet(self, client, owner):
        response = client.post(
            "/pets", json={"ownerId": owner.id, "name": "Biscuit", "type": "CAT", "age": 3}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["ownerId"] == owner.id
        assert data["type"] == "CAT"
        assert data["owner"]["firstName"] == "Olivia"

    def test_sitter_cannot_own_pets(self, client, sitter):
        response = client.post("/pets", json={"ownerId": sitter.id, "name": "Rex", "type": "DOG"})
        assert response.status_code == 400
        assert response.json()["detail"] == "User must be an owner to create pets"

    def test_unknown_owner(self, client):
        response = client.post("/pets", json={"ownerId": 42, "name": "Rex", "type": "DOG"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Owner not found"

    def test_find_by_owner_and_type(self, client, owner, make_user, make_pet):
        other = make_user(UserRole.OWNER)
        make_pet(owner, PetType.DOG, "Rex")
        make_pet(owner, PetType.CAT, "Tom")
        make_pet(other, PetType.DOG, "Fido")

        assert {p["name"] for p in client.get(f"/pets/owner/{owner.id}").json()} == {"Rex", "Tom"}
        assert {p["name"] for p in client.get("/pets/type/DOG").json()} == {"Rex", "Fido"}

    def test_delete_pet(self, client, owner, make_pet):
        pet = make_pet(owner)
        assert client.delete(f"/pets/{pet.id}").json() == {"message": "Pet deleted successfully"}
        assert client.get(f"/pets/{pet.id}").status_code == 404
