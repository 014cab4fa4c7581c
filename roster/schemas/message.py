from pydantic import BaseModel


class MessageResponse(BaseModel):
    status: str = "success"
    message: str


class ParticipantGithub(BaseModel):
    name: str
    github: str
