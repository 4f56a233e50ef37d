"""
Demo Script - run one trend analysis against Gemini and print the report.

Requires LLM_GEMINI_API_KEY (or GEMINI_API_KEY) in the environment or .env.
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from rich.console import Console
from rich.panel import Panel

from core import OutputFormat
from intelligence import TrendAnalystAgent
from ui import TrendSession, render_outcome
from utils import setup_logger


console = Console()


async def demo_trend_session():
    session = TrendSession(agent=TrendAnalystAgent())
    session.toggle_platform("tiktok")
    session.topic = "AI videos"

    for output_format in (OutputFormat.PER_PLATFORM, OutputFormat.AGGREGATED):
        session.output_format = output_format
        selected = ", ".join(p.name for p in session.platforms if p.selected)
        console.print(Panel.fit(
            f"[bold blue]Trend analysis[/bold blue]\n"
            f"Platforms: [yellow]{selected}[/yellow]\n"
            f"Topic: [yellow]{session.topic}[/yellow]  Format: [yellow]{output_format.value}[/yellow]",
            border_style="blue",
        ))
        outcome = await session.analyze_trends()
        if outcome is None:
            console.print(f"[red]{session.error}[/red]")
            continue
        render_outcome(outcome, console=console)


if __name__ == "__main__":
    setup_logger()
    asyncio.run(demo_trend_session())
