#!/usr/bin/env python3
"""Export OpenAPI schema from FastAPI app without running the server."""

import json
import sys
from pathlib import Path
from typing import Optional

from backend.main import app

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent.parent / "openapi.json"


def export_openapi(output_path: Optional[Path] = None) -> Path:
    """Export the OpenAPI schema to a JSON file and return its path."""

    # Get the OpenAPI schema from the FastAPI app
    openapi_schema = app.openapi()

    output_path = Path(output_path or DEFAULT_OUTPUT)
    output_path.write_text(
        json.dumps(openapi_schema, ensure_ascii=False, indent=2)
    )

    print(f"OpenAPI schema exported to: {output_path.resolve()}")
    print(f"   Total endpoints: {len(openapi_schema.get('paths', {}))}")

    # Print some basic info about the schema
    if 'info' in openapi_schema:
        info = openapi_schema['info']
        print(f"   API Version: {info.get('version', 'N/A')}")
        print(f"   Title: {info.get('title', 'N/A')}")

    return output_path


if __name__ == "__main__":
    export_openapi(sys.argv[1] if len(sys.argv) > 1 else None)
