from fastapi_openapi_mock.cli import main

main()
