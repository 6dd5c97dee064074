"""
Merging example: serve every spec in a folder as one API.

Demonstrates:
- Loading all YAML/JSON specs under a directory
- Merging them (first path wins, later components win)
- Reproducible data with a fixed seed

The same server is available from the command line:

    openapi-mock --path examples/specs --seed 42
"""

import logging
from pathlib import Path

from fastapi_openapi_mock import (
    MockServerConfig,
    create_app,
    load_specs_from_path,
    merge_specs,
)

logging.basicConfig(level=logging.INFO)

SPECS_DIR = Path(__file__).parent / "specs"

config = MockServerConfig(spec_path=str(SPECS_DIR), seed=42)
document = merge_specs(load_specs_from_path(config.spec_path))
app = create_app(document, config=config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port)

    # Test with:
    # curl -H "X-API-Key: k" "http://localhost:3000/users?page=1"
    # curl http://localhost:3000/users/42
    # curl -H "Authorization: Basic dXNlcjpwYXNz" http://localhost:3000/orders
    # curl http://localhost:3000/orders/7
    # curl -X OPTIONS -i http://localhost:3000/users
