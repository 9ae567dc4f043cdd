import pytest

from dognav.data import Dog
from dognav.errors import MalformedStateError
from dognav.utils.bundle import Bundle, bundle_of


def test_bundle_basic_operations():
    bundle = bundle_of(("screen_name", "HOME"), ("count", 2))

    assert bundle.get_string("screen_name") == "HOME"
    assert bundle.get_int("count") == 2
    assert list(bundle) == ["screen_name", "count"]
    assert len(bundle) == 2
    assert "count" in bundle

    # wrong type or missing key reads as None
    assert bundle.get_string("count") is None
    assert bundle.get_string("missing") is None
    assert bundle.get_bundle("screen_name") is None

    bundle.remove("count")
    assert "count" not in bundle


def test_get_or_throw_names_missing_key():
    bundle = Bundle(screen_name="DETAIL")

    assert bundle.get_string_or_throw("screen_name") == "DETAIL"
    with pytest.raises(MalformedStateError, match="Missing key 'post'"):
        bundle.get_parcelable_or_throw("post", Dog)
    with pytest.raises(MalformedStateError, match="Missing key 'other'"):
        bundle.get_string_or_throw("other")


def test_parcelable_stored_as_nested_bundle(dog):
    bundle = Bundle()
    bundle.put_parcelable("post", dog)

    assert isinstance(bundle["post"], Bundle)
    assert bundle.get_parcelable("post", Dog) == dog
    assert bundle.get_parcelable("nothing", Dog) is None


def test_rejects_unsupported_values():
    bundle = Bundle()
    with pytest.raises(TypeError):
        bundle.put_string("name", 3)
    with pytest.raises(TypeError):
        bundle.put_int("age", True)
    with pytest.raises(TypeError):
        Bundle(items=[1, 2])


def test_checkpoint_dict_restores_equal_bundle(dog):
    bundle = Bundle(screen_name="DETAIL")
    bundle.put_parcelable("post", dog)

    data = bundle.to_dict()
    assert data == {
        "screen_name": "DETAIL",
        "post": {
            "id": 7,
            "name": "Rex",
            "breed": "Beagle",
            "age": 3,
            "description": "Loves walks",
        },
    }
    assert Bundle.from_dict(data) == bundle


def test_from_dict_rejects_bad_data():
    with pytest.raises(MalformedStateError):
        Bundle.from_dict(["screen_name"])
    with pytest.raises(MalformedStateError):
        Bundle.from_dict({1: "HOME"})
    with pytest.raises(MalformedStateError):
        Bundle.from_dict({"screen_name": ["HOME"]})
