"""
Request body schemas (Pydantic) for the local API.
Create models require every field the store requires; patch models carry only what was sent.
"""
import datetime as dt
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class RecipeInput(BaseModel):
    """Schema for recipe creation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time: int = Field(..., ge=0)
    cook_time: int = Field(..., ge=0)
    servings: int = Field(..., ge=1)
    tags: List[str] = Field(default_factory=list)
    image: str = ""

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]


class RecipePatch(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[List[str]] = None
    prep_time: Optional[int] = Field(None, ge=0)
    cook_time: Optional[int] = Field(None, ge=0)
    servings: Optional[int] = Field(None, ge=1)
    tags: Optional[List[str]] = None
    image: Optional[str] = None


class MealsInput(BaseModel):
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None
    snacks: Optional[List[str]] = None

    def to_meals(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class MealPlanInput(BaseModel):
    """Schema for meal plan creation."""
    date: Union[dt.date, dt.datetime]
    meals: MealsInput = Field(default_factory=MealsInput)


class MealPlanPatch(BaseModel):
    date: Optional[Union[dt.date, dt.datetime]] = None
    meals: Optional[MealsInput] = None


class MealSlotInput(BaseModel):
    """Schema for assigning one meal slot (recipe_id None clears it)."""
    recipe_id: Optional[str] = None


class InventoryItemInput(BaseModel):
    """Schema for inventory item creation."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = ""
    quantity: float = Field(..., ge=0)
    unit: str = Field(..., max_length=20)
    expiry_date: Optional[dt.date] = None

    @field_validator('name', 'unit', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class InventoryItemPatch(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    expiry_date: Optional[dt.date] = None


class ShoppingItemInput(BaseModel):
    """Schema for shopping list item creation (always starts unchecked)."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = ""
    quantity: float = Field(1, ge=0)
    unit: str = Field("item", max_length=20)


class ShoppingItemPatch(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    checked: Optional[bool] = None


def changes_from(patch: BaseModel, nullable: tuple = ()) -> Dict[str, Any]:
    """Fields the client actually sent; null is only kept for nullable fields."""
    sent = patch.model_dump(exclude_unset=True)
    return {k: v for k, v in sent.items() if v is not None or k in nullable}
