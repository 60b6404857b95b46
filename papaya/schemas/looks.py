from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict


class WardrobeItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    slug: str
    image: Optional[str] = None
    sex: str
    category_id: Optional[int] = None


class LookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    slug: str
    image: Optional[str] = None
    desc: Optional[str] = None
    sex: Literal["male", "female", "unisex"]
    items: List[WardrobeItemOut] = []
    is_from_wardrobe: bool = False


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    slug: str


class FeedOut(BaseModel):
    page: int
    looks: List[LookOut]
    categories: List[CategoryOut]


class CategoryFeedOut(BaseModel):
    page: int
    looks: List[LookOut]
    category: CategoryOut


class LookDetailOut(BaseModel):
    look: LookOut
    is_liked: bool
    is_disliked: bool
    is_saved: bool


class SuccessOut(BaseModel):
    success: bool = True


class SetWardrobeIn(BaseModel):
    wardrobe: List[int] = []
