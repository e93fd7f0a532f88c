"""
Write the OpenAPI document to interfaces/openapi.json.

Usage:
    python -m src.api.generate_openapi
"""

import json
import os

from src.api.main import app


def main(output_dir: str = "interfaces") -> str:
    schema = app.openapi()
    # The HTML fragment route has no JSON schema; document its media type.
    schema["x-html-fragments"] = [
        {
            "path": "/api/v1/fragments/comments/skeleton",
            "summary": "Comment list loading skeleton",
            "media_type": "text/html",
        },
    ]

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, "openapi.json")
    with open(output_path, "w") as f:
        json.dump(schema, f, indent=2)
    return output_path


if __name__ == "__main__":
    print(main())
