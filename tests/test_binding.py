"""
Tests for form binding: ``BindingResult``, ``bind_owner`` and ``bind_pet``.
"""

from datetime import date

import pytest

from petclinic.app.core.binding import BindingResult
from petclinic.app.schemas.pet import Pet, PetType
from petclinic.app.services.pet_type_formatter import PetTypeFormatter
from petclinic.app.web.forms import bind_owner, bind_pet

VALID_OWNER_FORM = {
    "firstName": "Jean",
    "lastName": "Coleman",
    "address": "105 N. Lake St.",
    "city": "Monona",
    "telephone": "6085552654",
}


class StubOwnerRepository:
    def find_pet_types(self):
        return [PetType(id=1, name="cat"), PetType(id=2, name="dog")]


@pytest.fixture
def formatter():
    return PetTypeFormatter(StubOwnerRepository())


class TestBindingResult:
    def test_reject_value_defaults_message_to_code(self):
        result = BindingResult("pet")
        result.reject_value("name", "required")

        assert result.has_errors()
        assert result.has_field_errors("name")
        assert result.messages("name") == ["required"]

    def test_errors_are_kept_per_field(self):
        result = BindingResult("owner")
        result.reject_value("lastName", "notFound", "not found", "Nobody")

        assert not result.has_field_errors("firstName")
        error = result.get_field_errors("lastName")[0]
        assert error.code == "notFound"
        assert error.rejected_value == "Nobody"


class TestBindOwner:
    def test_valid_form(self):
        owner, result = bind_owner(VALID_OWNER_FORM)

        assert not result.has_errors()
        assert owner.first_name == "Jean"
        assert owner.telephone == "6085552654"
        assert owner.is_new

    def test_id_is_never_bound(self):
        owner, result = bind_owner(dict(VALID_OWNER_FORM, id="99"))

        assert not result.has_errors()
        assert owner.id is None

    def test_values_are_stripped(self):
        owner, _ = bind_owner(dict(VALID_OWNER_FORM, firstName="  Jean  "))
        assert owner.first_name == "Jean"

    @pytest.mark.parametrize("field_name", ["firstName", "lastName", "address", "city", "telephone"])
    def test_blank_field_is_required(self, field_name):
        owner, result = bind_owner(dict(VALID_OWNER_FORM, **{field_name: "   "}))

        assert result.codes(field_name) == ["required"]
        assert len(result.errors) == 1

    def test_missing_fields_are_required(self):
        _, result = bind_owner({})
        assert {error.field for error in result.errors} == set(VALID_OWNER_FORM)

    @pytest.mark.parametrize("telephone", ["608555102", "60855510234", "608-555-10", "phone12345"])
    def test_telephone_must_be_ten_digits(self, telephone):
        owner, result = bind_owner(dict(VALID_OWNER_FORM, telephone=telephone))

        assert result.codes("telephone") == ["telephone"]
        assert result.messages("telephone") == ["Telephone must be a 10-digit number"]
        # the submitted value is kept for re-display
        assert owner.telephone == telephone


class TestBindPet:
    def test_valid_form(self, formatter):
        pet = Pet(owner_id=1)
        result = bind_pet({"name": "Leo", "birthDate": "2010-09-07", "type": "cat"}, pet, formatter)

        assert not result.has_errors()
        assert pet.name == "Leo"
        assert pet.birth_date == date(2010, 9, 7)
        assert pet.type == PetType(id=1, name="cat")

    def test_unknown_type_is_a_type_mismatch(self, formatter):
        pet = Pet()
        result = bind_pet({"name": "Leo", "birthDate": "2010-09-07", "type": "dragon"}, pet, formatter)

        assert result.codes("type") == ["typeMismatch", "required"]
        assert result.messages("type")[0] == "type not found: dragon"
        assert pet.type is None

    def test_bad_date_is_a_type_mismatch(self, formatter):
        pet = Pet()
        result = bind_pet({"name": "Leo", "birthDate": "07/09/2010", "type": "cat"}, pet, formatter)

        assert result.codes("birthDate") == ["typeMismatch", "required"]
        assert pet.birth_date is None

    def test_empty_form_for_new_pet(self, formatter):
        result = bind_pet({}, Pet(), formatter)

        assert result.codes("name") == ["required"]
        assert result.codes("type") == ["required"]
        assert result.codes("birthDate") == ["required"]

    def test_name_is_stripped(self, formatter):
        pet = Pet()
        result = bind_pet({"name": "  Leo ", "birthDate": "2010-09-07", "type": "cat"}, pet, formatter)

        assert not result.has_errors()
        assert pet.name == "Leo"

    def test_existing_pet_may_omit_type(self, formatter):
        pet = Pet(id=5)
        result = bind_pet({"name": "Leo", "birthDate": "2010-09-07"}, pet, formatter)

        assert not result.has_errors()
        assert pet.type is None
