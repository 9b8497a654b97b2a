"""Base classes and shared types for weight & balance contracts.

Unit conventions (all contracts and API responses):
- **Masses**: kilograms (kg) — suffix ``_kg``
- **Lever arms**: meters (m) — suffix ``_m``
- **Centers of gravity**: millimeters (mm) aft of datum — suffix ``_mm``
- **Mass moments**: kilogram-meters (kg·m) — suffix ``_kgm``
- **Fuel volumes**: liters — suffix ``_liters``
- **Canvas sizes**: pixels — suffix ``_px``

Measures keep the unit they were entered in and convert to the canonical
unit on access, so a loading sheet can be echoed back exactly as typed.
"""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wnb.errors import InvalidInputError

M = TypeVar("M", bound="ValueModel")

# Finite float (rejects NaN and +/-inf)
Finite = Annotated[float, Field(allow_inf_nan=False)]
NonNegativeFinite = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class ValueModel(BaseModel):
    """Base model for immutable weight & balance values.

    - Instances are frozen and hashable; "changing" a value means building a new one.
    - ``to_dict()`` produces a JSON-safe dict (enums as their string values).
    - ``from_dict()`` hydrates from such a dict.
    - ``create()`` builds an instance and reports bad input as ``InvalidInputError``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls: type[M], data: dict[str, Any]) -> M:
        """Create model instance from a dict produced by ``to_dict()``."""
        return cls.model_validate(data)

    @classmethod
    def create(cls: type[M], **data: Any) -> M:
        """Validate keyword data, raising ``InvalidInputError`` on rejection."""
        try:
            return cls(**data)
        except ValidationError as exc:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or cls.__name__}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidInputError(f"Invalid {cls.__name__}: {reasons}") from exc
