"""FastAPI application for the mdblocks render API."""

from fastapi import FastAPI

from mdblocks import __version__
from server.routers.render import router as render_router

app = FastAPI(title="mdblocks", version=__version__)
app.include_router(render_router)
