# Role: Minimal wrapper around Gemini API. Centralizes model name, temperature, output limit and error handling,
# so the rest of the code calls a single method: generate_text(prompt, system_instruction=...).

import json
import os
from typing import Optional

from google import genai

import chat_samples.config as config
from chat_samples.models.errors import UpstreamError


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.5,
        max_output_tokens: int = 1024,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Model, temperature and output limit are configurable for experiments.
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        self.client = genai.Client(api_key=self.api_key)

    def generate_text(self, prompt: str, system_instruction: Optional[str] = None) -> str:
        # 1) Validate prompt
        # 2) Call Gemini (single text completion, no retry)
        # 3) Validate non-empty response
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must be non-empty.")

        generation_config = {
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
        }
        if system_instruction:
            generation_config["system_instruction"] = system_instruction

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=generation_config,
            )
        except Exception as e:
            if config.DEBUG:
                print("\n!!! GEMINI ERROR !!!")
                print(repr(e))
                print("!!! END ERROR !!!\n")
            raise UpstreamError(f"Gemini API call failed: {e}") from e

        text = getattr(resp, "text", None)
        if not text:
            raise UpstreamError("Gemini returned an empty response.")

        if config.DEBUG:
            print(json.dumps({"message": "generate_text", "prompt": prompt, "response": text}, ensure_ascii=False))

        return text.strip()
