#!/usr/bin/env python3
"""
Run the support chat API server.

Usage:
    python scripts/run_server.py
    python scripts/run_server.py --port 3001 --reload
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn
from rich.console import Console

from support_chat.config.settings import get_settings


console = Console()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run the support chat API")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", "-p", type=int, default=3001, help="Port (default: 3001)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()
    settings = get_settings()

    console.print(f"\n[bold]Server running on http://{args.host}:{args.port}[/bold]")
    console.print(f"   Health check: http://{args.host}:{args.port}/health")
    console.print(f"   API endpoint: http://{args.host}:{args.port}/chat/message")
    console.print("\n[bold]Environment check:[/bold]")
    console.print(
        f"   DATABASE_URL: {'[green]Loaded[/]' if settings.database_url else '[red]Missing[/]'}"
    )
    console.print(
        f"   LLM API key:  {'[green]Loaded[/]' if settings.has_llm_credentials else '[yellow]Missing (mock mode)[/]'}\n"
    )

    if not settings.database_url:
        console.print("[red]DATABASE_URL is required to start the server.[/red]")
        sys.exit(1)

    uvicorn.run(
        "support_chat.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
