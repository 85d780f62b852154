import logging
import threading

import google.generativeai as genai

from .errors import RemoteProviderError

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response"


class ChatClient:
    """
    Single-turn passthrough to Gemini.

    Each message starts a fresh chat with empty history. The model handle is
    created lazily on first use so the app can start without a credential.
    """

    def __init__(self, api_key: str = "", model_name: str = "gemini-1.5-flash", model=None):
        self.api_key = api_key
        self.model_name = model_name
        self._model = model
        self._lock = threading.Lock()

    def _get_model(self):
        if self._model is None:
            with self._lock:
                if self._model is None:
                    if not self.api_key:
                        raise RemoteProviderError("GEMINI_API_KEY is not configured")
                    genai.configure(api_key=self.api_key)
                    self._model = genai.GenerativeModel(model_name=self.model_name)
        return self._model

    def send(self, message: str) -> str:
        try:
            model = self._get_model()
            chat = model.start_chat(history=[])
            result = chat.send_message(message)
        except RemoteProviderError:
            raise
        except Exception as exc:
            raise RemoteProviderError(f"Gemini request failed: {exc}") from exc
        return extract_text(result)


def extract_text(result) -> str:
    """First candidate's first text part, or NO_RESPONSE when the reply carries none."""
    try:
        text = result.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError):
        return NO_RESPONSE
    return text or NO_RESPONSE
