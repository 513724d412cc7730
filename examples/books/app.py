"""Books: route groups, global middleware and a custom 404.

Demonstrates:
- Route groups built with ``new_group`` and registered in bulk
- Path parameters (``:bookId``, ``:userId``)
- Global middleware: request logging and an ``X-Auth`` check
- A custom not-found handler

Middleware cannot stop the chain: the auth check only flags the
request, and handlers decide what to do with the flag.

Run:
    cd examples/books && python app.py
"""

import logging

from onion import App, AppConfig, Context, new_group
from onion.middleware import RequestLogger

app = App(AppConfig(port=3333))


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


def auth(ctx: Context) -> None:
    """Mark requests that carry an ``X-Auth`` token."""
    if ctx.request.headers.get("x-auth"):
        ctx.response.headers["X-Authenticated"] = "yes"


app.use(RequestLogger())
app.use(auth)


# ---------------------------------------------------------------------------
# Book routes
# ---------------------------------------------------------------------------


def get_all_books(ctx: Context) -> None:
    ctx.string(200, "GET /books -> returning all books")


def get_book(ctx: Context) -> None:
    ctx.string(200, f"GET /books/{ctx.param('bookId')} -> single book")


async def create_book(ctx: Context) -> None:
    data = await ctx.request.json()
    ctx.json(201, {"created": data.get("title", "")})


def update_book(ctx: Context) -> None:
    ctx.string(200, f"PUT /books/{ctx.param('bookId')} -> updating a book")


def delete_book(ctx: Context) -> None:
    if ctx.response.headers.get("X-Authenticated") != "yes":
        ctx.string(401, "Unauthorized!")
        return
    ctx.string(200, f"DELETE /books/{ctx.param('bookId')} -> deleting a book")


book_routes = (
    new_group("books")
    .get("/", get_all_books)
    .get("/:bookId", get_book)
    .post("/", create_book)
    .put("/:bookId", update_book)
    .delete("/:bookId", delete_book)
    .routes()
)


# ---------------------------------------------------------------------------
# User routes
# ---------------------------------------------------------------------------


def get_user(ctx: Context) -> None:
    ctx.json(200, {"id": ctx.param("userId")})


def get_user_book(ctx: Context) -> None:
    ctx.json(200, {"user": ctx.param("userId"), "book": ctx.param("bookId")})


user_routes = (
    new_group("users")
    .get("/:userId", get_user)
    .get("/:userId/books/:bookId", get_user_book)
    .routes()
)

app.use_routes(user_routes, book_routes)


@app.not_found_handler
def not_found(ctx: Context) -> None:
    ctx.string(404, "Custom 404 message!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run()
