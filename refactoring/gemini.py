import logging
from google import genai
from google.genai import types
from config import Config
from constants import MSG_NO_VALID_RESPONSE, TEMPERATURE
from refactoring.errors import ErrorKind, RefactorError

logger = logging.getLogger(__name__)


def extract_text(response):
    """
    Returns the text of the first part of the first candidate,
    or None if the response does not carry one.
    """
    candidates = getattr(response, "candidates", None) if response is not None else None
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    if content is None:
        return None

    parts = getattr(content, "parts", None)
    if not parts:
        return None

    return getattr(parts[0], "text", None)


class GeminiClient:
    def __init__(self, client, model_name: str, temperature: float = TEMPERATURE):
        self.client = client
        self.model_name = model_name
        self.temperature = temperature

    @classmethod
    def from_config(cls, config: Config) -> "GeminiClient":
        client = genai.Client(
            vertexai=True,
            project=config.project_id,
            location=config.location,
        )
        return cls(client, config.model_name)

    def generate_text(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=[
                types.Content(role="user", parts=[types.Part.from_text(text=prompt)])
            ],
            config=types.GenerateContentConfig(temperature=self.temperature),
        )

        text = extract_text(response)
        if text is None:
            logger.error(f"Model {self.model_name} returned no usable content.")
            raise RefactorError(ErrorKind.UPSTREAM_PROTOCOL, MSG_NO_VALID_RESPONSE)
        return text
