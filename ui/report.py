"""Terminal rendering of trend analysis outcomes with Rich."""

from __future__ import annotations

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from core import AnalysisOutcome, TrendAnalysisResult, TrendingTopic


BAR_WIDTH = 20


def viral_bar_color(percentage: float) -> str:
    if percentage > 85:
        return "green"
    if percentage > 60:
        return "yellow"
    return "blue"


def viral_bar(percentage: float, width: int = BAR_WIDTH) -> Text:
    filled = int(round(width * max(0.0, min(percentage, 100.0)) / 100))
    bar = Text("█" * filled, style=viral_bar_color(percentage))
    bar.append("░" * (width - filled), style="dim")
    bar.append(f" {percentage:g}%")
    return bar


def _topic_table(topic: TrendingTopic) -> Table:
    table = Table(title=Text(topic.topic), title_justify="left", show_header=True, expand=True)
    table.add_column("Keyword")
    table.add_column("Virality")
    for kw in topic.keywords:
        table.add_row(Text(kw.keyword), viral_bar(kw.viral_percentage))
    return table


def _topic_details(topic: TrendingTopic) -> Text:
    text = Text()
    if topic.hashtags:
        text.append("Hashtags: ", style="bold")
        text.append(" ".join(topic.hashtags) + "\n", style="cyan")
    if topic.popular_audio:
        text.append("Popular audio: ", style="bold")
        text.append(", ".join(topic.popular_audio) + "\n")
    for res in topic.verified_resources:
        text.append("• ")
        text.append(res.description or res.url)
        text.append(f" ({res.url})\n", style=Style(link=res.url) if res.url else "")
    return text


def render_result(result: TrendAnalysisResult) -> Panel:
    """One panel per platform (or the aggregated result)."""
    frame = ", ".join(
        part for part in (result.time_frame.month, result.time_frame.day) if part
    ) or "any time"
    parts = []
    if result.error:
        parts.append(Text(result.error, style="bold red"))
    for topic in result.trending_topics:
        parts.append(_topic_table(topic))
        parts.append(_topic_details(topic))
    if not parts:
        parts.append(Text("No trending topics.", style="dim"))
    return Panel(
        Group(*parts),
        title=Text.assemble((result.platform, "bold"), "  ", result.selected_topic),
        subtitle=Text(frame),
        border_style="blue",
    )


def render_outcome(outcome: AnalysisOutcome, console: Optional[Console] = None) -> None:
    console = console or Console()

    if not outcome.ok:
        console.print(Panel(Text(outcome.error or ""), title="Error", border_style="red"))
        return

    if outcome.advisory:
        console.print(Text(outcome.advisory, style="yellow"))

    for result in outcome.results:
        console.print(render_result(result))
