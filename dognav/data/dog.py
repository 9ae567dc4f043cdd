"""Dog record carried by the detail screen."""

from __future__ import annotations

from dataclasses import dataclass

from dognav.utils.bundle import Bundle


@dataclass(frozen=True)
class Dog:
    """A dog up for adoption.

    Navigation treats this as an opaque payload; the only contract it relies
    on is :meth:`to_bundle` / :meth:`from_bundle`.
    """

    id: int
    name: str
    breed: str = ""
    age: int = 0
    description: str = ""

    def to_bundle(self) -> Bundle:
        bundle = Bundle()
        bundle.put_int("id", self.id)
        bundle.put_string("name", self.name)
        bundle.put_string("breed", self.breed)
        bundle.put_int("age", self.age)
        bundle.put_string("description", self.description)
        return bundle

    @classmethod
    def from_bundle(cls, bundle: Bundle) -> "Dog":
        dog_id = bundle.get_int("id")
        name = bundle.get_string("name")
        if dog_id is None:
            raise KeyError("id")
        if name is None:
            raise KeyError("name")
        age = bundle.get_int("age")
        if age is not None and age < 0:
            raise ValueError(f"age must not be negative, got {age}")
        return cls(
            id=dog_id,
            name=name,
            breed=bundle.get_string("breed") or "",
            age=age or 0,
            description=bundle.get_string("description") or "",
        )


__all__ = ["Dog"]
