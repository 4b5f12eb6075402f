from places_api.models.places_model import (
    ADDRESS_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
)


def validate_place_form(name: str, description: str, category: str, address: str) -> dict:
    """Returns field -> message for every invalid field; empty when the form can be submitted."""
    errors = {}

    if not name.strip():
        errors["name"] = "Name is required"
    elif len(name) > NAME_MAX_LENGTH:
        errors["name"] = f"Name must be less than {NAME_MAX_LENGTH} characters"

    if not description.strip():
        errors["description"] = "Description is required"
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters"

    if not category:
        errors["category"] = "Please select a category"

    if not address.strip():
        errors["address"] = "Address is required"
    elif len(address) > ADDRESS_MAX_LENGTH:
        errors["address"] = f"Address must be less than {ADDRESS_MAX_LENGTH} characters"

    return errors


def build_place_payload(name: str, description: str, category: str, address: str,
                        lat: float = 0, lng: float = 0) -> dict:
    return {
        "name": name.strip(),
        "description": description.strip(),
        "category": category,
        "location": {
            "address": address.strip(),
            "coordinates": {"lat": lat, "lng": lng},
        },
        "images": [],
        "submittedBy": "Anonymous",
    }
