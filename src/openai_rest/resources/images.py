"""
images.py

PURPOSE: Image generation from a prompt (POST /images/generations).
"""

from typing import Literal

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result

ImageSize = Literal["256x256", "512x512", "1024x1024"]
ImageResponseFormat = Literal["url", "b64_json"]


class ImageCreate(Record):
    prompt: str
    n: int | None = None
    size: ImageSize | None = None
    response_format: ImageResponseFormat | None = None
    user: str | None = None


class ImageData(Record):
    """One generated image; which field is set depends on response_format."""

    url: str | None = None
    b64_json: str | None = None


class ImageResponse(Record):
    created: int
    data: list[ImageData]


async def create_image(client: OpenAIClient, request: ImageCreate) -> Result[ImageResponse]:
    """Generate images for a prompt."""
    return await client.request("POST", "images/generations", ImageResponse, body=request)
