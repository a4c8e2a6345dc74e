"""Request and response bodies of the JSON API.

Wire names are camelCase; Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.selectshop.entities.core.user import User
from src.selectshop.entities.service.folder import FolderSummary
from src.selectshop.entities.service.product import Product

# Largest value a 64-bit integer column holds
MAX_DB_INT = 2**63 - 1


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(ApiModel):
    message: str
    status_code: int = Field(alias="statusCode")


class FolderRequest(ApiModel):
    folder_names: list[str] = Field(alias="folderNames")


class FolderResponse(ApiModel):
    id: int
    name: str

    @classmethod
    def from_summary(cls, summary: FolderSummary) -> "FolderResponse":
        return cls(id=summary.id, name=summary.name)


class ProductCreateRequest(ApiModel):
    title: str
    image: str
    link: str
    lprice: int = Field(ge=0, le=MAX_DB_INT)


class ProductMyPriceRequest(ApiModel):
    myprice: int = Field(ge=0, le=MAX_DB_INT)


class ProductFolderRequest(ApiModel):
    folder_id: int = Field(alias="folderId", ge=1, le=MAX_DB_INT)


class ProductResponse(ApiModel):
    id: int
    title: str
    image: str
    link: str
    lprice: int
    myprice: int
    folders: list[FolderResponse] = Field(default_factory=list)

    @classmethod
    def from_product(
        cls, product: Product, folders: list[FolderSummary] | None = None
    ) -> "ProductResponse":
        return cls(
            id=product.id,
            title=product.title,
            image=product.image,
            link=product.link,
            lprice=product.lprice,
            myprice=product.myprice,
            folders=[FolderResponse.from_summary(f) for f in folders or []],
        )


class SignupRequest(ApiModel):
    username: str
    password: str
    email: str
    admin: bool = False
    admin_token: str = Field(default="", alias="adminToken")


class LoginRequest(ApiModel):
    username: str
    password: str


class UserResponse(ApiModel):
    id: int
    username: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username, email=user.email, role=str(user.role))


class TokenResponse(ApiModel):
    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="Bearer", alias="tokenType")
