from src.models.db.department import Department
from src.models.schemas.department import DepartmentInCreate, DepartmentSearchFilters
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import Page, field_equals, text_search


class DepartmentCRUDRepository(SoftDeleteCRUDRepository[Department]):
    collection_name = "departments"
    not_found_code = "DEPARTMENT_NOT_FOUND"
    not_found_message = "Dipartimento non trovato"
    exists_code = "DEPARTMENT_EXISTS"
    exists_message = "Dipartimento con questo nome esiste già"
    unique_fields = ("name",)

    async def create_department(self, *, department_create: DepartmentInCreate) -> Department:
        new_department = Department(id=self.collection.next_id(), **department_create.model_dump())
        return await self.create(record=new_department)

    async def search_departments(
        self, *, filters: DepartmentSearchFilters, page: int, page_size: int
    ) -> Page[Department]:
        return await self.read_page(
            predicates=[
                text_search(("name", "description"), filters.search_text),
                field_equals("is_active", filters.is_active),
            ],
            page=page,
            page_size=page_size,
            show_deleted=filters.show_deleted,
        )
