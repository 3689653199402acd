"""
worddict API Server.

Run with: uv run uvicorn worddict.server.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from worddict import config
from worddict.server.deps import open_dictionary
from worddict.server.routes import dictionary


def setup_logging():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("worddict API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    open_dictionary()
    print_routes(app)
    yield


app = FastAPI(title="worddict API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dictionary.router)


@app.get("/")
async def root():
    return {"name": "worddict API", "version": "0.1.0"}
