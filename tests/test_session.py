from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest

from core import AnalysisErrorKind, OutputFormat, TrendAnalysisResult
from intelligence.agents import TrendAnalystAgent
from intelligence.llm.base import BaseLLM, LLMResponse, Message
from intelligence.pipeline import NO_DATA_ADVISORY
from ui.session import TrendSession
from utils.exceptions import AnalysisFailedError


class _QueueLLM(BaseLLM):
    """Replies with queued payloads; a queued exception is raised instead."""

    def __init__(self, *replies: Any):
        super().__init__(model="queue")
        self.replies = list(replies)
        self.prompts: List[str] = []
        self.gate: Optional[asyncio.Event] = None

    @property
    def provider(self) -> str:
        return "fake"

    async def acomplete(
        self,
        messages: List[Message],
        response_schema: Optional[Dict[str, Any]] = None,
        response_mime_type: Optional[str] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        self.prompts.append(messages[-1].content)
        if self.gate is not None:
            await self.gate.wait()
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(content=json.dumps(reply), model=self.model, usage={})


def _item(platform: str, topics: int = 1) -> Dict[str, Any]:
    return {
        "platform": platform,
        "time_frame": {"month": None, "day": None},
        "selected_topic": "AI videos",
        "trending_topics": [
            {"topic": f"topic {i}", "keywords": [{"keyword": "k", "viral_percentage": 70}]}
            for i in range(topics)
        ],
        "error": None,
    }


def test_toggle_platform_flips_only_the_target():
    session = TrendSession(agent=TrendAnalystAgent(llm=_QueueLLM()))
    session.toggle_platform("tiktok")
    session.toggle_platform("instagram")

    assert [p.id for p in session.platforms if p.selected] == ["tiktok"]
    assert session.has_selection


@pytest.mark.asyncio
async def test_analyze_without_platforms_sets_verbatim_error():
    llm = _QueueLLM()
    session = TrendSession(agent=TrendAnalystAgent(llm=llm))
    session.results = TrendAnalysisResult(platform="stale")
    session.toggle_platform("instagram")

    outcome = await session.analyze_trends()

    assert outcome is None
    assert session.error == "Please select at least one social media platform."
    assert session.results is None
    assert llm.prompts == []
    assert not session.is_loading


@pytest.mark.asyncio
async def test_per_platform_success_populates_results():
    llm = _QueueLLM({"result": [_item("Instagram"), _item("TikTok")]})
    session = TrendSession(agent=TrendAnalystAgent(llm=llm))
    session.toggle_platform("tiktok")
    session.month = "July"

    outcome = await session.analyze_trends()

    assert outcome.ok
    assert session.is_per_platform_result and not session.is_aggregated_result
    assert [r.platform for r in session.results] == ["Instagram", "TikTok"]
    assert session.error is None and session.advisory is None
    assert "Instagram, TikTok" in llm.prompts[0]
    assert "Month: July, Day: not specified" in llm.prompts[0]


@pytest.mark.asyncio
async def test_aggregated_empty_result_sets_advisory_not_error():
    llm = _QueueLLM({"result": _item("Aggregated", topics=0)})
    session = TrendSession(agent=TrendAnalystAgent(llm=llm), output_format=OutputFormat.AGGREGATED)

    outcome = await session.analyze_trends()

    assert outcome.no_data
    assert session.is_aggregated_result
    assert session.advisory == NO_DATA_ADVISORY
    assert session.error is None


@pytest.mark.asyncio
async def test_failure_clears_previous_results():
    llm = _QueueLLM({"result": [_item("Instagram")]}, TimeoutError("deadline exceeded"))
    session = TrendSession(agent=TrendAnalystAgent(llm=llm))

    await session.analyze_trends()
    assert session.results

    outcome = await session.analyze_trends()

    assert outcome.error_kind == AnalysisErrorKind.ANALYSIS_FAILED
    assert session.error == AnalysisFailedError.DEFAULT_MESSAGE
    assert session.results is None
    assert not session.is_loading


@pytest.mark.asyncio
async def test_submit_is_ignored_while_query_in_flight():
    llm = _QueueLLM({"result": [_item("Instagram")]})
    llm.gate = asyncio.Event()
    session = TrendSession(agent=TrendAnalystAgent(llm=llm))

    first = asyncio.create_task(session.analyze_trends())
    await asyncio.sleep(0)
    assert session.is_loading

    assert await session.analyze_trends() is None

    llm.gate.set()
    outcome = await first

    assert outcome.ok
    assert len(llm.prompts) == 1
    assert not session.is_loading


@pytest.mark.asyncio
async def test_no_platform_submit_drops_previous_outcome():
    llm = _QueueLLM({"result": [_item("Instagram")]})
    session = TrendSession(agent=TrendAnalystAgent(llm=llm))

    await session.analyze_trends()
    assert session.last_outcome is not None

    session.toggle_platform("instagram")
    assert await session.analyze_trends() is None

    assert session.last_outcome is None
    assert session.results is None
    assert session.advisory is None
    assert session.error == "Please select at least one social media platform."
