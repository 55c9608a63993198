from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

HINTS_PER_ELEMENT = 3


class ElementIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="nome", max_length=60)
    symbol: str = Field(..., alias="simbolo", min_length=1, max_length=3)
    level: int = Field(default=1, alias="nivel", ge=1)
    hints: list[str] = Field(..., alias="dicas")
    image_url: str | None = Field(default=None, alias="imagemUrl", max_length=2048)
    distribution_image_url: str | None = Field(default=None, alias="imgDistribuicao", max_length=2048)

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        out = value.strip()
        if not out:
            raise ValueError("Selecione um elemento valido.")
        return out

    @field_validator("symbol")
    @classmethod
    def _normalize_symbol(cls, value: str) -> str:
        out = value.strip()
        if not out:
            raise ValueError("Selecione um elemento valido.")
        return out[0].upper() + out[1:].lower()

    @field_validator("hints")
    @classmethod
    def _three_hints(cls, value: list[str]) -> list[str]:
        out = [h.strip() for h in value]
        if len(out) != HINTS_PER_ELEMENT or not all(out):
            raise ValueError(f"Preencha as {HINTS_PER_ELEMENT} dicas.")
        return out


class ElementOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str = Field(serialization_alias="nome")
    symbol: str = Field(serialization_alias="simbolo")
    level: int = Field(serialization_alias="nivel")
    hints: list[str] = Field(serialization_alias="dicas")
    image_url: str | None = Field(default=None, serialization_alias="imagemUrl")
    distribution_image_url: str | None = Field(default=None, serialization_alias="imgDistribuicao")
    created_at: datetime
    updated_at: datetime
