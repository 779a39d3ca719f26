from pydantic import BaseModel


class ChatRequest(BaseModel):
    # Validated caller input; message is trimmed and non-empty
    message: str


class ChatReply(BaseModel):
    # Always a string: the extracted reply or the fallback sentinel
    text: str

    def to_response(self) -> dict:
        return {"reply": self.text}
