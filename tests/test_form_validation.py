from form_validation import build_place_payload, validate_place_form


def test_valid_form_has_no_errors():
    assert validate_place_form("Vasa Museum", "Old warship", "Museum", "Djurgården") == {}


def test_every_empty_field_is_reported():
    errors = validate_place_form("", "   ", "", "")
    assert errors == {
        "name": "Name is required",
        "description": "Description is required",
        "category": "Please select a category",
        "address": "Address is required",
    }


def test_length_bounds():
    errors = validate_place_form("n" * 101, "d" * 501, "Park", "a" * 201)
    assert errors["name"] == "Name must be less than 100 characters"
    assert errors["description"] == "Description must be less than 500 characters"
    assert errors["address"] == "Address must be less than 200 characters"
    assert "category" not in errors


def test_lengths_at_the_limit_are_accepted():
    assert validate_place_form("n" * 100, "d" * 500, "Park", "a" * 200) == {}


def test_payload_is_trimmed_with_defaults():
    payload = build_place_payload("  Vasa  ", " Warship ", "Museum", " Djurgården ")
    assert payload == {
        "name": "Vasa",
        "description": "Warship",
        "category": "Museum",
        "location": {"address": "Djurgården", "coordinates": {"lat": 0, "lng": 0}},
        "images": [],
        "submittedBy": "Anonymous",
    }
