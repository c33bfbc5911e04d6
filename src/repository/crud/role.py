from src.models.db.role import Role
from src.models.schemas.role import RoleInCreate, RoleSearchFilters
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import Page, field_equals, text_search


class RoleCRUDRepository(SoftDeleteCRUDRepository[Role]):
    collection_name = "roles"
    not_found_code = "ROLE_NOT_FOUND"
    not_found_message = "Ruolo non trovato"
    exists_code = "ROLE_EXISTS"
    exists_message = "Ruolo con questo nome o codice esiste già"
    unique_fields = ("name", "code")
    read_only_fields = frozenset({"is_system", "user_count"})

    async def create_role(self, *, role_create: RoleInCreate) -> Role:
        new_role = Role(
            id=self.collection.next_id(),
            **role_create.model_dump(),
            is_system=False,
            user_count=0,
        )
        return await self.create(record=new_role)

    async def search_roles(self, *, filters: RoleSearchFilters, page: int, page_size: int) -> Page[Role]:
        return await self.read_page(
            predicates=[
                text_search(("name", "description"), filters.search_text),
                field_equals("is_active", filters.is_active),
                field_equals("has_hr_access", filters.has_hr_access),
                field_equals("has_technical_access", filters.has_technical_access),
                field_equals("has_admin_access", filters.has_admin_access),
                field_equals("has_candidate_access", filters.has_candidate_access),
            ],
            page=page,
            page_size=page_size,
            show_deleted=filters.show_deleted,
        )
