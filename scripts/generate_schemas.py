"""Generate the JSON schema of the core document model into schemas/."""

import json
from pathlib import Path

from gltfext.kernel.schema import GltfRoot


def generate_schemas():
    """Generate JSON schemas for the core schema entities."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    root_schema = GltfRoot.model_json_schema(by_alias=True)
    root_schema_path = schemas_dir / "gltf_root.schema.json"
    with open(root_schema_path, 'w', encoding='utf-8') as f:
        json.dump(root_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {root_schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
