"""Recipe domain entity: name, description, ingredient lines, instructions, times, servings, tags, image."""
from typing import Any, Dict, List, Optional
from kitchen.domain.Entity import Entity


def _unique(values) -> List[str]:
    seen = set()
    out = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def _whole_number(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return value


def _text_lines(name: str, values: Any) -> List[str]:
    if not isinstance(values, (list, tuple)) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"{name} must be a list of strings, got {values!r}")
    return list(values)


class Recipe(Entity):
    FIELDS = ("name", "description", "ingredients", "instructions",
              "prep_time", "cook_time", "servings", "tags", "image")
    OPTIONAL = {"tags": (), "image": ""}

    def __init__(self, id: str, name: str, description: str, ingredients: List[str],
                 instructions: List[str], prep_time: int, cook_time: int, servings: int,
                 tags: Optional[List[str]] = None, image: str = ""):
        prep_time = _whole_number("prep_time", prep_time)
        cook_time = _whole_number("cook_time", cook_time)
        servings = _whole_number("servings", servings)
        if prep_time < 0 or cook_time < 0:
            raise ValueError(f"Times cannot be negative: prep={prep_time}, cook={cook_time}")
        if servings < 1:
            raise ValueError(f"Servings must be positive: {servings}")
        if not isinstance(name, str) or not isinstance(description, str) or not isinstance(image, str):
            raise ValueError("Recipe name, description and image must be text")
        self.id = id
        self.name = name
        self.description = description
        self.ingredients = _text_lines("ingredients", ingredients)
        self.instructions = _text_lines("instructions", instructions)
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.servings = servings
        # Tags behave like a set; keep first-seen order for display
        self.tags = _unique(_text_lines("tags", tags if tags is not None else []))
        self.image = image

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, description, any tag or any ingredient."""
        q = query.lower()
        return (q in self.name.lower()
                or q in self.description.lower()
                or any(q in tag.lower() for tag in self.tags)
                or any(q in ing.lower() for ing in self.ingredients))

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {self.total_time} min - Tags: {', '.join(self.tags)}"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        return Recipe(
            id=str(data["id"]),
            name=data["name"],
            description=data["description"],
            ingredients=data["ingredients"],
            instructions=data["instructions"],
            prep_time=data["prepTime"],
            cook_time=data["cookTime"],
            servings=data["servings"],
            tags=data["tags"],
            image=data["image"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "tags": list(self.tags),
            "image": self.image,
        }
