"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel

from interest_calc import __version__


class PingResponse(BaseModel):
    message: str = "pong"
    version: str = __version__
