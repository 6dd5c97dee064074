"""
Basic usage example of fastapi-openapi-mock.

Demonstrates:
- Building a mock server from an in-memory OpenAPI document
- Schema-driven bodies with property-name hints
- Request body fields echoed back into the mock response
"""

from fastapi_openapi_mock import create_app

document = {
    "openapi": "3.0.0",
    "info": {"title": "Basic Mock Example", "version": "1.0.0"},
    "paths": {
        "/profile": {
            "get": {
                "responses": {
                    "200": {
                        "description": "Current profile",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "fullName": {"type": "string"},
                                        "email": {"type": "string"},
                                        "phone": {"type": "string"},
                                        "jobTitle": {"type": "string"},
                                        "balance": {"type": "number"},
                                    },
                                }
                            }
                        },
                    }
                }
            },
            "put": {
                "responses": {
                    "200": {
                        "description": "Updated profile",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "fullName": {"type": "string"},
                                        "email": {"type": "string"},
                                    },
                                }
                            }
                        },
                    }
                }
            },
        }
    },
}

app = create_app(document)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=3000)

    # Test with:
    # curl http://localhost:3000/profile
    # curl -X PUT -H "Content-Type: application/json" \
    #      -d '{"fullName": "Jane Doe"}' http://localhost:3000/profile
    # open http://localhost:3000/api-docs
