"""Server side: ASGI response sending and the uvicorn runner."""
