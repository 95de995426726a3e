from pydantic import BaseModel, constr
import typing as t

DataT = t.TypeVar("DataT")

# blank and whitespace-only values count as missing
RequiredStr = constr(strip_whitespace=True, min_length=1)


class DataResponse(BaseModel, t.Generic[DataT]):
    data: DataT


class Page(BaseModel, t.Generic[DataT]):
    data: t.List[DataT]
    total: int
    page: int
    pageSize: int
    totalPages: int


class Message(BaseModel):
    message: str


class Error(BaseModel):
    error: str
    message: t.Optional[str] = None
