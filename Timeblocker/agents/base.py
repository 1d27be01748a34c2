import os

import ollama


class LlmWrapper:
    def __init__(
        self,
        model: str = "gemma3:27b",
        temperature: float = 0.0,
        host: str = None,
        api_key: str = "",
    ):
        self.model = model
        self.temperature = temperature
        # Prefer an explicit host; fall back to env var; then a safe default.
        self.host = host or os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
        self.client = ollama.Client(host=self.host, headers=headers)

    def chat(
        self,
        messages: list[dict],
        model: str | None = None,
        json_mode: bool = False,
    ) -> str:
        """
        Send chat messages to the LLM and return the response content as a string.

        ``model`` overrides the wrapper's default model for this call only.
        With ``json_mode`` the server is asked to constrain its reply to a
        JSON object.

        The Ollama client returns a ChatResponse object with structure:
        - response.message.content (the actual text response)
        """
        model = model or self.model
        try:
            response = self.client.chat(
                model=model,
                messages=messages,
                format="json" if json_mode else None,
                options={"temperature": self.temperature},
            )

            # Ollama returns a ChatResponse object (or dict in some versions)
            if hasattr(response, "message"):
                return response.message.content
            elif isinstance(response, dict) and "message" in response:
                message = response["message"]
                if isinstance(message, dict):
                    return message.get("content", "")
                elif hasattr(message, "content"):
                    return message.content

            if isinstance(response, dict) and "content" in response:
                return response["content"]

            raise ValueError(
                f"Unable to extract content from response. "
                f"Type: {type(response)}, "
                f"Is dict: {isinstance(response, dict)}"
            )
        except Exception as e:
            raise RuntimeError(
                f"LLM chat failed (model: {model}, host: {self.host}): {str(e)}"
            ) from e
