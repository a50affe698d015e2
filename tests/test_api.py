"""Route tests. Token verification is replaced by the ``login`` fixture."""

from fastapi.testclient import TestClient
from google.api_core.exceptions import PermissionDenied

from stray_tracker.main import app


def create(client, **fields):
    response = client.post("/animals/", json={"name": "Tom", **fields})
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestBasics:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_me(self, client):
        body = client.get("/auth/me").json()
        assert body["uid"] == "uid-staff"
        assert body["profile"]["role"] == "staff"

    def test_me_with_legacy_email(self, client, login, services):
        services.store.create_with_id(
            "accounts",
            "uid-clerk",
            {"uid": "uid-clerk", "email": "clerk@barangay.local", "fullName": "Clerk", "role": "staff"},
        )
        login("uid-clerk", "clerk@barangay.local")

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["profile"]["email"] == "clerk@barangay.local"

    def test_token_without_profile_forbidden(self, client, login):
        login("uid-stranger")
        assert client.get("/animals/").status_code == 403


class TestAnimals:
    def test_create_and_get(self, client):
        animal_id = create(client, species="dog", estimatedAge="", weight="12.5")

        body = client.get(f"/animals/{animal_id}").json()

        assert body["species"] == "dog"
        assert body["tagId"].startswith("DOG-")
        assert body["estimatedAge"] is None
        assert body["weight"] == 12.5
        assert body["createdBy"] == "uid-staff"

    def test_get_missing_is_404(self, client):
        assert client.get("/animals/missing").status_code == 404

    def test_invalid_payload(self, client):
        response = client.post("/animals/", json={"name": "Tom", "healthStatus": "asleep"})
        assert response.status_code == 422

    def test_combined_filters(self, client):
        create(client, name="Rex", species="dog", healthStatus="critical")
        create(client, name="Fido", species="dog", healthStatus="healthy")
        create(client, name="Mia", species="cat", healthStatus="critical")

        response = client.get("/animals/", params={"species": "dog", "healthStatus": "critical"})

        assert [a["name"] for a in response.json()["items"]] == ["Rex"]

    def test_search(self, client):
        create(client, name="Tom", tagId="CAT-152980")
        create(client, name="Mia", tagId="CAT-706213")

        items = client.get("/animals/", params={"search": "152"}).json()["items"]

        assert [a["name"] for a in items] == ["Tom"]

    def test_bad_filter_value(self, client):
        assert client.get("/animals/", params={"species": "bird"}).status_code == 422

    def test_patch_and_delete(self, client):
        animal_id = create(client)

        response = client.patch(f"/animals/{animal_id}", json={"healthStatus": "sick"})
        assert response.json()["updated"] == ["healthStatus"]
        assert client.get(f"/animals/{animal_id}").json()["healthStatus"] == "sick"

        assert client.delete(f"/animals/{animal_id}").status_code == 200
        assert client.get(f"/animals/{animal_id}").status_code == 404

    def test_veterinarian_cannot_delete(self, client, login, services):
        animal_id = create(client)
        services.store.create_with_id(
            "accounts",
            "uid-vet",
            {"uid": "uid-vet", "email": "vet@barangay.com", "fullName": "Vet", "role": "veterinarian"},
        )
        login("uid-vet", "vet@barangay.com")

        assert client.delete(f"/animals/{animal_id}").status_code == 403
        assert client.get(f"/animals/{animal_id}").status_code == 200

    def test_patch_missing_is_404(self, client):
        response = client.patch("/animals/ghost", json={"name": "x"})
        assert response.status_code == 404
        assert response.json()["detail"] == "animals/ghost not found"

    def test_backend_failure_message_is_passed_through(self, client, db):
        animal_id = create(client)
        db.fail_next_update = PermissionDenied("Missing or insufficient permissions.")

        response = client.patch(f"/animals/{animal_id}", json={"name": "x"})

        assert response.status_code == 403
        assert "Missing or insufficient permissions." in response.json()["detail"]

    def test_new_form(self, client):
        body = client.post("/animals/new-form", params={"species": "dog"}).json()
        assert body["tagId"].startswith("DOG-")
        assert body["species"] == "dog"

    def test_new_form_rejects_unknown_species(self, client):
        assert client.post("/animals/new-form", params={"species": "bird"}).status_code == 422

    def test_summary(self, client):
        create(client, name="Tom", vaccinated=True)
        create(client, name="Rex", species="dog", healthStatus="injured")

        body = client.get("/animals/summary").json()

        assert body["total"] == 2
        assert body["vaccinated"] == 1
        assert body["atRisk"] == 1
        assert [a["name"] for a in body["atRiskAnimals"]] == ["Rex"]
        assert len(body["recent"]) == 2

    def test_photo_upload(self, client, bucket):
        animal_id = create(client)

        response = client.post(
            f"/animals/{animal_id}/photo",
            files={"file": ("tom.jpg", b"jpeg", "image/jpeg")},
        )

        assert response.status_code == 201
        assert response.json()["stored"] is False
        assert len(bucket.blobs) == 1
        assert client.get(f"/animals/{animal_id}").json()["photoUrl"] is None

    def test_photo_upload_and_store(self, client):
        animal_id = create(client)

        url = client.post(
            f"/animals/{animal_id}/photo",
            params={"store": "true"},
            files={"file": ("tom.jpg", b"jpeg", "image/jpeg")},
        ).json()["url"]

        assert client.get(f"/animals/{animal_id}").json()["photoUrl"] == url

    def test_photo_upload_without_bucket(self, client, services):
        animal_id = create(client)
        services.animals.bucket = None
        unchecked = TestClient(app, raise_server_exceptions=False)

        response = unchecked.post(
            f"/animals/{animal_id}/photo",
            files={"file": ("tom.jpg", b"jpeg", "image/jpeg")},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "No storage bucket configured for photo uploads"}


class TestVisits:
    def test_record_visit_propagates(self, client):
        animal_id = create(client, healthStatus="healthy")

        response = client.post(
            "/visits/",
            json={"animalId": animal_id, "visitType": "vaccination", "vaccinated": True},
        )
        assert response.status_code == 201

        animal = client.get(f"/animals/{animal_id}").json()
        assert animal["vaccinated"] is True
        assert animal["healthStatus"] == "healthy"

        visits = client.get(f"/animals/{animal_id}/visits").json()["items"]
        assert len(visits) == 1
        assert visits[0]["recordedBy"] == "uid-staff"

    def test_missing_animal_id(self, client):
        response = client.post("/visits/", json={"visitType": "checkup"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Animal ID is required"

    def test_animal_id_is_trimmed(self, client):
        animal_id = create(client)

        response = client.post("/visits/", json={"animalId": f"  {animal_id}  "})

        assert response.status_code == 201
        assert response.json()["animalId"] == animal_id
        assert len(client.get(f"/animals/{animal_id}/visits").json()["items"]) == 1


class TestAccounts:
    def test_staff_cannot_manage_accounts(self, client):
        assert client.get("/accounts/").status_code == 403

    def test_admin_creates_and_lists(self, client, login, fake_auth):
        login("uid-admin", "admin@barangay.com")

        response = client.post(
            "/accounts/",
            json={
                "email": "vet@barangay.com",
                "password": "password123",
                "fullName": "Dr. Veterinarian",
                "role": "veterinarian",
            },
        )
        assert response.status_code == 201
        uid = response.json()["id"]
        assert uid in fake_auth.users

        vets = client.get("/accounts/", params={"role": "veterinarian"}).json()["items"]
        assert [a["email"] for a in vets] == ["vet@barangay.com"]

    def test_admin_updates_and_deletes(self, client, login):
        login("uid-admin", "admin@barangay.com")
        uid = client.post(
            "/accounts/",
            json={"email": "x@barangay.com", "password": "secret1", "fullName": "X"},
        ).json()["id"]

        assert client.patch(f"/accounts/{uid}", json={"role": "admin"}).json()["role"] == "admin"
        assert client.delete(f"/accounts/{uid}").status_code == 200
        assert client.patch(f"/accounts/{uid}", json={"fullName": "Y"}).status_code == 404

    def test_duplicate_email_registration(self, client, login):
        login("uid-admin", "admin@barangay.com")
        payload = {"email": "dup@barangay.com", "password": "secret1", "fullName": "Dup"}

        assert client.post("/accounts/", json=payload).status_code == 201
        response = client.post("/accounts/", json=payload)

        assert response.status_code == 502
        assert "already exists" in response.json()["detail"]
