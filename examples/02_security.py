"""
Security example showing how declared requirements gate mock responses.

Demonstrates:
- API key in a header, query parameter and cookie
- Alternative requirements (any one may pass)
- Combined schemes (all must pass)
- Opting an operation out with ``security: []``
"""

from fastapi_openapi_mock import MockServerConfig, create_app

ok = {"200": {"description": "OK"}}

document = {
    "openapi": "3.0.0",
    "info": {"title": "Security Example", "version": "1.0.0"},
    "security": [{"headerKey": []}],
    "components": {
        "securitySchemes": {
            "headerKey": {"type": "apiKey", "in": "header", "name": "X-API-Key"},
            "queryKey": {"type": "apiKey", "in": "query", "name": "api_key"},
            "session": {"type": "apiKey", "in": "cookie", "name": "session"},
            "bearer": {"type": "http", "scheme": "bearer"},
            "oauth": {"type": "oauth2", "flows": {}},
        }
    },
    "paths": {
        # Inherits the document-wide requirement
        "/default": {"get": {"responses": ok}},
        # Either a bearer token OR a session cookie
        "/either": {
            "get": {"security": [{"bearer": []}, {"session": []}], "responses": ok}
        },
        # Header key AND query key
        "/both": {
            "get": {"security": [{"headerKey": [], "queryKey": []}], "responses": ok}
        },
        "/oauth": {"get": {"security": [{"oauth": []}], "responses": ok}},
        "/public": {"get": {"security": [], "responses": ok}},
    },
}

app = create_app(document, config=MockServerConfig(seed=1))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=3000)

    # Test with:
    # curl http://localhost:3000/default                        -> 400
    # curl -H "X-API-Key: k" http://localhost:3000/default      -> 200
    # curl --cookie "session=abc" http://localhost:3000/either  -> 200
    # curl -H "X-API-Key: k" "http://localhost:3000/both?api_key=q"
    # curl -H "Authorization: Bearer t" http://localhost:3000/oauth
    # curl http://localhost:3000/public
