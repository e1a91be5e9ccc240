"""Path element model handed over by the document walker."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathElement(BaseModel):
    tag: str = "path"
    attributes: dict[str, str] = Field(default_factory=dict)
    # Document-order index, used to label elements that have no id
    index: int = 0

    @property
    def label(self) -> str:
        for name, value in self.attributes.items():
            if name.lower() == "id" and value:
                return value
        return f"{self.tag}[{self.index}]"
