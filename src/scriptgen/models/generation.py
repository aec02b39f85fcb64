"""Wire models for the inference server's /api/generate endpoint."""

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = False


class GenerationReply(BaseModel):
    """Reply body; fields other than model and response are ignored.

    A null field decodes like a missing one.
    """

    model: str | None = ""
    response: str | None = ""
