"""Export JSON schemas for the public request/response models."""

import json
from pathlib import Path

from backend.tenancy.models import (
    Kindergarten,
    OrganizationCreate,
    OrganizationWithKindergartens,
    User,
    UserCreate,
)


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    for model in (
        OrganizationCreate,
        OrganizationWithKindergartens,
        UserCreate,
        User,
        Kindergarten,
    ):
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        print(f"Exported {model.__name__} schema to {path}")


if __name__ == "__main__":
    main()
