"""Modelos del dominio (Pydantic v2).

Estos modelos describen *qué* se instala, no *cómo* se obtiene el contenido
ni cómo se ejecuta la DDL.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class InstallationRequest(BaseModel):
    """Petición validada de instalación de un módulo MLE.

    Se crea solo tras una validación correcta y se consume una vez por el
    instalador.
    """

    model_config = ConfigDict(frozen=True)

    module_name: str = Field(
        ...,
        min_length=1,
        description="Nombre del módulo MLE en la base de datos.",
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Código fuente del módulo (texto UTF-8).",
    )
    version: str | None = Field(
        default=None,
        description="Versión opcional, se emite como literal en la DDL.",
    )


class ValidationOutcome(BaseModel):
    """Resultado etiquetado de la validación de argumentos."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    request: InstallationRequest | None = None

    @model_validator(mode="after")
    def _request_iff_valid(self) -> "ValidationOutcome":
        if self.valid != (self.request is not None):
            raise ValueError("a valid outcome carries a request, an invalid one does not")
        return self

    @classmethod
    def invalid(cls) -> "ValidationOutcome":
        return cls(valid=False)

    @classmethod
    def of(cls, request: InstallationRequest) -> "ValidationOutcome":
        return cls(valid=True, request=request)


class Statement(BaseModel):
    """Sentencia tal como la escribió el usuario en el shell."""

    model_config = ConfigDict(frozen=True)

    sql: str = Field(
        default="",
        description="Texto crudo de la sentencia.",
    )
