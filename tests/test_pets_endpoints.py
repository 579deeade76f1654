"""
Tests for the pet pages nested under an owner.
"""

from datetime import date, timedelta

import pytest


@pytest.fixture
def owner(owner_factory):
    return owner_factory(pets=[("Leo", "2010-09-07", "cat")])


class TestCreatePet:
    def test_init_creation_form(self, client, owner):
        response = client.get(f"/owners/{owner.id}/pets/new")

        assert response.status_code == 200
        assert response.template.name == "pets/create_or_update_pet_form.html"
        assert response.context["pet"].is_new
        assert response.context["types"] == ["bird", "cat", "dog", "hamster", "lizard", "snake"]

    def test_process_creation_form_success(self, client, repository, owner):
        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "Betty", "birthDate": "2015-02-12", "type": "hamster"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/owners/{owner.id}"
        betty = repository.find_by_id(owner.id).get_pet("Betty")
        assert betty.birth_date == date(2015, 2, 12)
        assert betty.type.name == "hamster"

    def test_creation_flash_message(self, client, owner):
        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "Betty", "birthDate": "2015-02-12", "type": "hamster"},
        )

        assert response.template.name == "owners/owner_details.html"
        assert response.context["message"] == "New Pet has been Added"
        assert [pet.name for pet in response.context["owner"].pets] == ["Betty", "Leo"]

    def test_missing_fields_are_required(self, client, repository, owner):
        response = client.post(f"/owners/{owner.id}/pets/new", data={"name": "  "})

        assert response.status_code == 200
        assert response.template.name == "pets/create_or_update_pet_form.html"
        errors = response.context["errors"]
        assert errors.codes("name") == ["required"]
        assert errors.codes("type") == ["required"]
        assert errors.codes("birthDate") == ["required"]
        assert len(repository.find_by_id(owner.id).pets) == 1

    def test_unknown_type_is_rejected(self, client, owner):
        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "Smaug", "birthDate": "2015-02-12", "type": "dragon"},
        )

        errors = response.context["errors"]
        assert "typeMismatch" in errors.codes("type")
        assert errors.messages("type")[0] == "type not found: dragon"

    def test_duplicate_name_is_rejected(self, client, owner):
        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "leo", "birthDate": "2015-02-12", "type": "cat"},
        )

        errors = response.context["errors"]
        assert errors.codes("name") == ["duplicate"]
        assert errors.messages("name") == ["already exists"]

    def test_future_birth_date_is_rejected(self, client, owner):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "Future", "birthDate": tomorrow, "type": "cat"},
        )

        assert response.context["errors"].codes("birthDate") == ["typeMismatch"]

    def test_padded_name_is_stored_stripped(self, client, repository, owner):
        client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": "  Betty ", "birthDate": "2015-02-12", "type": "hamster"},
        )

        names = [pet.name for pet in repository.find_by_id(owner.id).pets]
        assert names == ["Betty", "Leo"]

    def test_padded_duplicate_name_is_rejected(self, client, repository, owner):
        response = client.post(
            f"/owners/{owner.id}/pets/new",
            data={"name": " Leo ", "birthDate": "2015-02-12", "type": "cat"},
        )

        assert response.context["errors"].codes("name") == ["duplicate"]
        assert len(repository.find_by_id(owner.id).pets) == 1

    def test_unknown_owner_is_404(self, client):
        assert client.get("/owners/999/pets/new").status_code == 404

    def test_owner_id_beyond_integer_range_is_404(self, client):
        assert client.get(f"/owners/{10**19}/pets/new").status_code == 404


class TestUpdatePet:
    def test_init_update_form(self, client, owner):
        pet = owner.pets[0]

        response = client.get(f"/owners/{owner.id}/pets/{pet.id}/edit")

        assert response.status_code == 200
        assert response.context["pet"].name == "Leo"
        assert response.context["selected_type"] == "cat"
        assert 'value="2010-09-07"' in response.text

    def test_process_update_form_success(self, client, repository, owner):
        pet = owner.pets[0]

        response = client.post(
            f"/owners/{owner.id}/pets/{pet.id}/edit",
            data={"name": "Leo", "birthDate": "2010-09-08", "type": "dog"},
        )

        assert response.context["message"] == "Pet details has been edited"
        updated = repository.find_by_id(owner.id).get_pet_by_id(pet.id)
        assert updated.birth_date == date(2010, 9, 8)
        assert updated.type.name == "dog"

    def test_update_without_type_keeps_stored_type(self, client, repository, owner):
        pet = owner.pets[0]

        response = client.post(
            f"/owners/{owner.id}/pets/{pet.id}/edit",
            data={"name": "Leonardo", "birthDate": "2010-09-07"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        updated = repository.find_by_id(owner.id).get_pet_by_id(pet.id)
        assert updated.name == "Leonardo"
        assert updated.type.name == "cat"

    def test_update_to_sibling_name_is_rejected(self, client, repository, owner_factory):
        owner = owner_factory(pets=[("Samantha", "2012-09-04", "cat"), ("Max", "2012-09-04", "cat")])
        max_ = owner.get_pet("Max")

        response = client.post(
            f"/owners/{owner.id}/pets/{max_.id}/edit",
            data={"name": "Samantha", "birthDate": "2012-09-04", "type": "cat"},
        )

        assert response.context["errors"].codes("name") == ["duplicate"]
        assert repository.find_by_id(owner.id).get_pet_by_id(max_.id).name == "Max"

    def test_missing_birth_date_on_edit(self, client, owner):
        pet = owner.pets[0]

        response = client.post(
            f"/owners/{owner.id}/pets/{pet.id}/edit",
            data={"name": "Leo", "type": "cat"},
        )

        errors = response.context["errors"]
        assert errors.codes("birthDate") == ["required"]
        assert response.context["error"] == "There was an error in updating the pet."

    def test_pet_of_another_owner_is_404(self, client, owner, owner_factory):
        other = owner_factory(last_name="Davis", pets=[("Basil", "2012-08-06", "hamster")])

        response = client.get(f"/owners/{owner.id}/pets/{other.pets[0].id}/edit")

        assert response.status_code == 404
        assert response.template.name == "error.html"
