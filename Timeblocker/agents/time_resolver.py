"""
Natural-language fallback for time expressions the pattern resolver cannot read.

Resolution runs as two ordered stages against the language model: first the
duration, then the start datetime given that duration (and, when scheduling a
chain, the previous task's end time). Either stage can fail on its own; a
failure is logged, reported through ``notify`` and turns into an unresolved
result for that one task.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..shared.models import Duration, to_local_naive
from .base import LlmWrapper
from .config import TimeblockerConfig
from .prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)


class ResolutionStage(str, Enum):
    DURATION = "duration"
    DATETIME = "datetime"
    DONE = "done"


class TimeResolutionError(Exception):
    """A resolution stage could not produce its value"""

    def __init__(self, stage: ResolutionStage, message: str):
        super().__init__(f"{stage.value} stage: {message}")
        self.stage = stage


class DatetimeReply(BaseModel):
    model_config = ConfigDict(extra="ignore")

    start: datetime = Field(alias="datetime")


@dataclass
class ResolutionState:
    """Progress of one time expression through the stages"""

    time_expression: str
    previous_end: Optional[datetime] = None
    stage: ResolutionStage = ResolutionStage.DURATION
    duration_reply: str = ""
    duration: Optional[Duration] = None
    start: Optional[datetime] = None


def json_from(text: str) -> dict | None:
    """Parse a JSON object from a model reply, tolerating fences and prose"""
    if not text:
        return None
    try:
        data = json.loads(text.strip())
        return data if isinstance(data, dict) else None
    except json.JSONDecodeError:
        pass

    m = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", text, re.DOTALL)
    if m:
        try:
            return json.loads(m.group(1))
        except json.JSONDecodeError:
            pass

    m = re.search(r"\{.*?\}", text, re.DOTALL)
    if m:
        try:
            return json.loads(m.group(0))
        except json.JSONDecodeError:
            pass

    logger.warning(f"No valid JSON found in response. Response text: {text}")
    return None


class NaturalLanguageTimeResolver:
    """Resolves free-form time expressions with two language-model exchanges"""

    def __init__(
        self,
        llm: LlmWrapper,
        config: TimeblockerConfig,
        notify: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.llm = llm
        self.config = config
        self.notify = notify
        self.clock = clock

    async def resolve(
        self, time_expression: str, previous_end: datetime | None = None
    ) -> tuple[datetime | None, Duration | None]:
        """Return (start, duration), or (None, None) if either stage fails"""
        state = ResolutionState(time_expression=time_expression, previous_end=previous_end)
        try:
            while state.stage is not ResolutionStage.DONE:
                await self._advance(state)
        except TimeResolutionError as e:
            logger.error(f"Unable to resolve '{time_expression}': {e}")
            if self.notify:
                self.notify(f"Unable to generate datetime:\n\n{e}")
            return None, None
        return state.start, state.duration

    async def _advance(self, state: ResolutionState):
        prompts = PromptBuilder(state.time_expression)
        if state.stage is ResolutionStage.DURATION:
            state.duration_reply = await self._ask(
                state.stage, prompts.duration_messages(), self.config.duration_model
            )
            state.duration = self._parse_duration(state.duration_reply)
            state.stage = ResolutionStage.DATETIME
        elif state.stage is ResolutionStage.DATETIME:
            reply = await self._ask(
                state.stage,
                prompts.datetime_messages(
                    state.duration_reply, self.clock(), state.previous_end
                ),
                self.config.datetime_model,
            )
            state.start = self._parse_datetime(reply)
            state.stage = ResolutionStage.DONE

    async def _ask(self, stage: ResolutionStage, messages: list[dict], model: str) -> str:
        try:
            reply = await asyncio.to_thread(
                self.llm.chat, messages, model=model, json_mode=True
            )
        except Exception as e:
            raise TimeResolutionError(stage, str(e)) from e
        reply = (reply or "").strip()
        if not reply:
            raise TimeResolutionError(stage, "LLM result is empty")
        logger.debug(f"{stage.value} reply: {reply}")
        return reply

    def _parse_duration(self, reply: str) -> Duration:
        data = json_from(reply)
        if data is None:
            raise TimeResolutionError(ResolutionStage.DURATION, f"reply is not JSON: {reply}")
        try:
            duration = Duration.model_validate(data)
        except ValidationError as e:
            raise TimeResolutionError(ResolutionStage.DURATION, f"invalid duration: {e}") from e
        if not duration.is_resolved:
            raise TimeResolutionError(ResolutionStage.DURATION, f"no duration in reply: {reply}")
        return duration

    def _parse_datetime(self, reply: str) -> datetime:
        data = json_from(reply)
        if data is None:
            raise TimeResolutionError(ResolutionStage.DATETIME, f"reply is not JSON: {reply}")
        try:
            parsed = DatetimeReply.model_validate(data)
        except ValidationError as e:
            raise TimeResolutionError(ResolutionStage.DATETIME, f"invalid datetime: {e}") from e
        return to_local_naive(parsed.start)
