"""ASGI server glue: request handling, response sending, serving."""
