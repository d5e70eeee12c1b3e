import logging

from google import genai
from google.genai import types

from tidydesk.common.errors import SummarizationError

logger = logging.getLogger(__name__)


class NoteSummarizer:
    """Extension Flask autour d'un client Gemini.

    Le client est construit à la première demande puis réutilisé; aucun
    résultat n'est mis en cache. Toute erreur du SDK ou du transport devient
    une SummarizationError (message générique côté client).
    """

    def __init__(self, app=None):
        self.api_key = None
        self.model_name = None
        self.system_prompt = None
        self._client = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.api_key = app.config.get("GOOGLE_API_KEY")
        self.model_name = app.config.get("GEMINI_MODEL", "gemini-2.0-flash")
        self.system_prompt = app.config.get("SUMMARY_SYSTEM_PROMPT")
        self._client = None
        app.extensions["summarizer"] = self

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _model(self):
        if self._client is not None:
            return self._client
        if not self.api_key:
            logger.warning("llm_not_configured", extra={"model": self.model_name})
            raise SummarizationError()

        self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        client = self._model()
        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(system_instruction=self.system_prompt),
            )
        except Exception as e:
            logger.error(
                "summary_generation_failed",
                extra={"model": self.model_name, "error": type(e).__name__},
            )
            raise SummarizationError() from e

        # text vaut None si la réponse a été bloquée
        if not response.text:
            logger.error("summary_empty", extra={"model": self.model_name})
            raise SummarizationError()
        return response.text
