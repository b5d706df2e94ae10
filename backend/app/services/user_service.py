# backend/app/services/user_service.py
"""
Servicio de usuarios.

La unicidad de username y email es responsabilidad del almacén, que rechaza
los duplicados con DuplicateKeyError; el servicio solo completa los valores
por defecto.
"""

from app.services.base_service import ResourceService, Record

DEFAULT_AVATAR = "https://placehold.co/200x200?text=Avatar"


def slugify_name(name: str) -> str:
    """'Ana María López' -> 'anamaríalópez'"""
    return "".join(name.lower().split())


class UserService(ResourceService):
    entity = "user"
    collection = "users"

    def apply_defaults(self, data: Record) -> Record:
        slug = slugify_name(data["name"])
        data.setdefault("username", slug)
        data.setdefault("email", f"{slug}@example.com")
        data.setdefault("avatar", DEFAULT_AVATAR)
        return data
