import uuid

import pytest

from catalog import crud
from catalog.exceptions import ValidationFailed
from catalog.schemas.cast_member import CastMemberCreate
from catalog.schemas.category import CategoryCreate
from catalog.schemas.video import VideoCreate
from catalog.validation import attribute_name, error_field, translate_errors, validate


def collect_errors(db, rules, data) -> dict:
    with pytest.raises(ValidationFailed) as excinfo:
        validate(db, rules, data)
    return excinfo.value.errors


@pytest.fixture
def video_data(make_category, make_genre):
    return {
        "title": "TestTitle",
        "description": "TestDescription",
        "year_launched": 2021,
        "opened": True,
        "rating": "12",
        "duration": 8,
        "categories_id": [str(make_category().id)],
        "genres_id": [str(make_genre().id)],
    }


def test_attribute_name():
    assert attribute_name("year_launched") == "year launched"


def test_error_field_strips_request_location():
    assert error_field(("body", "title")) == "title"
    assert error_field(("query", "skip")) == "skip"
    assert error_field(("body",)) == "body"
    assert error_field(("categories_id", 0)) == "categories_id.0"


def test_translate_errors_deduplicates_messages():
    errors = [
        {"type": "missing", "loc": ("name",), "msg": "Field required", "input": {}},
        {"type": "missing", "loc": ("name",), "msg": "Field required", "input": {}},
    ]
    assert translate_errors(errors) == {"name": ["The name field is required."]}


def test_translate_errors_falls_back_to_pydantic_message():
    errors = [{"type": "greater_than_equal", "loc": ("query", "skip"), "msg": "Input should be greater than or equal to 0"}]
    assert translate_errors(errors) == {"skip": ["Input should be greater than or equal to 0"]}


def test_video_required_fields(db):
    errors = collect_errors(db, VideoCreate, {})

    for field in ("title", "description", "year_launched", "rating", "duration", "categories_id", "genres_id"):
        assert errors[field] == [f"The {attribute_name(field)} field is required."]
    assert "opened" not in errors


def test_video_invalid_fields_are_all_reported(db):
    errors = collect_errors(db, VideoCreate, {
        "title": "a" * 256,
        "description": "description",
        "year_launched": "d",
        "opened": 10,
        "rating": "6",
        "duration": "s",
        "categories_id": 123,
        "genres_id": "a",
    })

    assert errors["title"] == ["The title may not be greater than 255 characters."]
    assert errors["year_launched"] == ["The year launched does not match the format Y."]
    assert errors["opened"] == ["The opened field must be true or false."]
    assert errors["rating"] == ["The selected rating is invalid."]
    assert errors["duration"] == ["The duration must be an integer."]
    assert errors["categories_id"] == ["The categories id must be an array."]
    assert errors["genres_id"] == ["The genres id must be an array."]
    assert "description" not in errors


@pytest.mark.parametrize("rating", ["L", "10", "12", "14", "16", "18", 14])
def test_video_accepts_every_rating(db, video_data, rating):
    video_data["rating"] = rating
    assert validate(db, VideoCreate, video_data)["rating"] == str(rating)


@pytest.mark.parametrize("year", [1999, "2021"])
def test_video_accepts_four_digit_years(db, video_data, year):
    video_data["year_launched"] = year
    assert validate(db, VideoCreate, video_data)["year_launched"] == int(year)


@pytest.mark.parametrize("year", [21, "20211", True, "twenty"])
def test_video_rejects_malformed_years(db, video_data, year):
    video_data["year_launched"] = year
    errors = collect_errors(db, VideoCreate, video_data)
    assert errors == {"year_launched": ["The year launched does not match the format Y."]}


def test_video_returns_only_sent_fields(db, video_data):
    del video_data["opened"]
    validated = validate(db, VideoCreate, video_data)
    assert "opened" not in validated
    assert validated["title"] == "TestTitle"


def test_video_empty_relations_are_missing(db, video_data):
    video_data["categories_id"] = []
    errors = collect_errors(db, VideoCreate, video_data)
    assert errors == {"categories_id": ["The categories id field is required."]}


def test_video_unknown_relation_ids(db, video_data):
    video_data["categories_id"].append(str(uuid.uuid4()))
    video_data["genres_id"] = ["not-a-uuid"]

    errors = collect_errors(db, VideoCreate, video_data)

    assert errors == {
        "categories_id": ["The selected categories id is invalid."],
        "genres_id": ["The selected genres id is invalid."],
    }


def test_video_soft_deleted_relation_ids(db, video_data, make_genre):
    genre = make_genre(name="Removed")
    crud.genre.remove(db, db_obj=genre)
    video_data["genres_id"] = [str(genre.id)]

    errors = collect_errors(db, VideoCreate, video_data)
    assert errors == {"genres_id": ["The selected genres id is invalid."]}


def test_relation_errors_collected_with_field_errors(db, video_data):
    video_data["rating"] = "99"
    video_data["categories_id"] = [str(uuid.uuid4())]

    errors = collect_errors(db, VideoCreate, video_data)
    assert set(errors) == {"rating", "categories_id"}


def test_category_name_rules(db):
    assert collect_errors(db, CategoryCreate, {"name": ""}) == {"name": ["The name field is required."]}
    assert collect_errors(db, CategoryCreate, {"name": "   "}) == {"name": ["The name field is required."]}
    assert collect_errors(db, CategoryCreate, {"name": None}) == {"name": ["The name field is required."]}
    assert collect_errors(db, CategoryCreate, {"name": 123}) == {"name": ["The name must be a string."]}


def test_category_is_active_must_be_boolean(db):
    errors = collect_errors(db, CategoryCreate, {"name": "Movies", "is_active": "a"})
    assert errors == {"is_active": ["The is active field must be true or false."]}


def test_category_blank_description_becomes_null(db):
    validated = validate(db, CategoryCreate, {"name": " Movies ", "description": ""})
    assert validated == {"name": "Movies", "description": None}


def test_cast_member_type_rules(db):
    assert validate(db, CastMemberCreate, {"name": "Actor X", "type": "2"}) == {"name": "Actor X", "type": 2}

    errors = collect_errors(db, CastMemberCreate, {"name": "a" * 256, "type": 3})
    assert errors == {
        "name": ["The name may not be greater than 255 characters."],
        "type": ["The selected type is invalid."],
    }


def test_non_object_body(db):
    assert collect_errors(db, CategoryCreate, ["name"]) == {"body": ["The body must be an object."]}


def test_null_on_optional_boolean_is_a_type_error(db, video_data):
    errors = collect_errors(db, CategoryCreate, {"name": "Movies", "is_active": None})
    assert errors == {"is_active": ["The is active field must be true or false."]}

    video_data["opened"] = None
    errors = collect_errors(db, VideoCreate, video_data)
    assert errors == {"opened": ["The opened field must be true or false."]}


def test_null_on_required_field_is_missing(db, video_data):
    video_data["duration"] = None
    video_data["categories_id"] = None

    errors = collect_errors(db, VideoCreate, video_data)

    assert errors == {
        "duration": ["The duration field is required."],
        "categories_id": ["The categories id field is required."],
    }


@pytest.mark.parametrize("value,expected", [(True, True), (False, False), (1, True), (0, False), ("1", True), ("0", False)])
def test_boolean_accepts_only_true_false_zero_one(db, value, expected):
    validated = validate(db, CategoryCreate, {"name": "Movies", "is_active": value})
    assert validated["is_active"] is expected


@pytest.mark.parametrize("value", ["yes", "on", "t", "true", 1.0, 2, [], {}])
def test_boolean_rejects_loose_truthy_values(db, video_data, value):
    video_data["opened"] = value
    errors = collect_errors(db, VideoCreate, video_data)
    assert errors == {"opened": ["The opened field must be true or false."]}


def test_exists_rule_checks_coerced_ids(db, video_data, monkeypatch):
    seen = []

    def record_ids(db, model, ids):
        seen.append(list(ids))
        return []

    monkeypatch.setattr("catalog.validation.find_missing_ids", record_ids)
    category_id = uuid.UUID(video_data["categories_id"][0])
    video_data["categories_id"] = [category_id]

    validate(db, VideoCreate, video_data)

    assert seen[0] == [str(category_id)]
