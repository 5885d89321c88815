from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.factory import ModelClientFactory
from ringkas.llm.models import GenerationResponse, Message

__all__ = ["BaseModelClient", "GenerationResponse", "Message", "ModelClientFactory"]
