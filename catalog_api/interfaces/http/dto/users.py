from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class CreateUserRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    email: StrictStr = ""
    password: StrictStr = ""


class GenerateTokenRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: StrictStr = ""
    password: StrictStr = ""


class GenerateTokenResponseDTO(BaseModel):
    access_token: str
