from proma.schemas.base import CamelModel


class CategoryResponse(CamelModel):
    id: int
    name: str
