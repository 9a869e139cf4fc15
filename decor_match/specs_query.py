from __future__ import annotations

"""
Query builder for the "shop by specs" flow.

Unlike the photo flow, the user fills in a form, so the query is assembled
from explicit fields in a fixed order:

    colour -> fabric/material -> category + variant -> seating -> dimensions

followed by the optional 'easy returns' / 'budget' modifiers.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, field_validator

Number = Union[int, float, str]


class SpecsFormData(BaseModel):
    category: str
    width: Optional[Number] = None
    length: Optional[Number] = None
    depth: Optional[Number] = None
    height: Optional[Number] = None
    seating: Optional[Number] = None
    size: Optional[str] = None
    shape: Optional[str] = None
    orientation: Optional[str] = None
    fabric: Optional[str] = None
    material: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None
    easy_returns: bool = False
    lowest_price: bool = False

    @field_validator(
        "width", "length", "depth", "height", "seating",
        "size", "shape", "orientation", "fabric", "material", "color", "style",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _fmt(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _category_parts(data: SpecsFormData) -> List[str]:
    parts: List[str] = []
    category = data.category

    if category == "sofa":
        # "sectional sofa sofa" reads badly
        if data.shape and data.shape != "sofa":
            parts.append(f"{data.shape} sectional sofa")
        else:
            parts.append("sectional sofa")
        if data.seating:
            parts.append(f"{_fmt(data.seating)} seater")
        if data.width:
            parts.append(f"under {_fmt(data.width)} inches")

    elif category == "dining-table":
        parts.append(f"{data.shape} dining table" if data.shape else "dining table")
        if data.seating:
            parts.append(f"{_fmt(data.seating)} seater")
        if data.length:
            parts.append(f"under {_fmt(data.length)} inches")

    elif category == "rug":
        if data.shape and data.shape != "rug":
            parts.append(f"{data.shape} area rug")
        else:
            parts.append("area rug")
        # rugs are sized in feet
        if data.width and data.length:
            parts.append(f"under {_fmt(data.width)}x{_fmt(data.length)} feet")

    elif category == "bed":
        parts.append(f"{data.size} bed frame" if data.size else "bed frame")
        if data.style:
            parts.append(data.style)
        if data.height:
            parts.append(f"under {_fmt(data.height)} inches high")

    elif category == "desk":
        if data.style and data.style != "desk":
            parts.append(f"{data.style} desk")
        else:
            parts.append("desk")
        if data.width:
            parts.append(f"under {_fmt(data.width)} inches wide")
        if data.depth:
            parts.append(f"under {_fmt(data.depth)} inches deep")

    elif category:
        # Categories without a template: use the label as typed.
        parts.append(category.replace("-", " "))

    return parts


def build_specs_query(data: SpecsFormData) -> str:
    parts: List[str] = []

    if data.color:
        parts.append(data.color)

    if data.fabric:
        parts.append(data.fabric)
    elif data.material:
        parts.append(data.material)

    parts.extend(_category_parts(data))

    query = " ".join(p.strip() for p in parts if p and p.strip())
    if data.easy_returns:
        query += " easy returns"
    if data.lowest_price:
        query += " budget"
    return query.strip()
