"""
/**
 * @file pollyglot/models/translate_request_model.py
 * @description Translation request/response models (Pydantic).
 */
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    target_language: str = Field(..., alias="targetLanguage")

    @field_validator("text", "target_language")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TranslateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    backend: str
