# backend/app/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Esta capa implementa el patrón Service Layer para el dominio de productos,
coordinando el almacén de productos con las colecciones de categorías y
marcas a través del RelationshipValidator.

Responsabilidades principales:
- Valores por defecto (descripción, stock 0, imagen genérica, activo)
- Validación de referencias antes de cualquier escritura:
  * Alta: categoryId y brandId deben existir (categoría primero)
  * Actualización: solo se validan las referencias presentes en el cuerpo,
    para permitir ediciones parciales sin revalidar el resto
- Serialización de escrituras: el alta y la actualización bloquean también
  categorías y marcas, de modo que ninguna de ellas pueda eliminarse entre
  la validación y la escritura

Los productos no tienen dependientes, así que su borrado no requiere
comprobaciones adicionales.
"""

from app.services.base_service import ResourceService, Record

DEFAULT_DESCRIPTION = "Sin descripción"
DEFAULT_IMAGE = "https://placehold.co/400x300?text=Producto"


class ProductService(ResourceService):
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Errores posibles además de NotFoundError:
    - DanglingReferenceError(field="categoryId" | "brandId")
    - DuplicateIdentifierError si el ID explícito ya existe
    """

    entity = "product"
    collection = "products"

    create_locks = ("categories", "brands", "products")
    update_locks = ("categories", "brands", "products")

    def apply_defaults(self, data: Record) -> Record:
        data.setdefault("description", DEFAULT_DESCRIPTION)
        data.setdefault("stock", 0)
        data.setdefault("image", DEFAULT_IMAGE)
        data.setdefault("active", True)
        return data

    async def validate_create(self, data: Record) -> None:
        await self.validator.validate_product_references(
            category_id=data["category_id"],
            brand_id=data["brand_id"],
        )

    async def validate_update(self, entity_id: int, changes: Record) -> None:
        await self.validator.validate_product_references(
            category_id=changes.get("category_id"),
            brand_id=changes.get("brand_id"),
        )
