from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictStr

from catalog_api.domain.products.repositories import INT64_MAX, INT64_MIN


class ProductInputDTO(BaseModel):
    """Body of product create and update requests.

    Only types are checked here; empty names and non-positive prices are
    rejected by the entity so callers see the domain error codes.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    price: StrictFloat = 0.0


class ProductsQueryDTO(BaseModel):
    page: int = 0
    limit: int = 0
    sort: str = "asc"

    @classmethod
    def from_args(cls, args) -> ProductsQueryDTO:
        return cls(
            page=_to_int(args.get("page")),
            limit=_to_int(args.get("limit")),
            sort=args.get("sort") or "asc",
        )


def _to_int(raw: str | None) -> int:
    """Parse a query integer; anything unparseable or outside int64 becomes 0."""

    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        return 0
    if not INT64_MIN <= value <= INT64_MAX:
        return 0
    return value
