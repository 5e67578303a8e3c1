from typing import Any

import httpx
import openai

from talentscout.analysis.client_base import BaseAnalysisClient
from talentscout.analysis.exceptions import AnalysisError, AnalysisNetworkError
from talentscout.ingestion.models import InlineData

_PDF_MEDIA_TYPE = "application/pdf"


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        seed: int | None,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        attachment: InlineData | None = None,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                seed=seed,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "resume_analysis",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, attachment)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str, attachment: InlineData | None
    ) -> str | list[dict[str, Any]]:
        if attachment is None:
            return user_prompt
        data_uri = f"data:{attachment.mime_type};base64,{attachment.base64_data}"
        if attachment.mime_type == _PDF_MEDIA_TYPE:
            file_part: dict[str, Any] = {
                "type": "file",
                "file": {"filename": "profile.pdf", "file_data": data_uri},
            }
        else:
            file_part = {"type": "image_url", "image_url": {"url": data_uri}}
        return [{"type": "text", "text": user_prompt}, file_part]
