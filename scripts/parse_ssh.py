#!/usr/bin/env python3
"""
Parse a small SSH connection block with the configured model
"""
import asyncio
import logging
import sys

from netparse import extract
from netparse.settings import settings
from netparse.shapes import SSHConnection

RAW_SSH = """
    user: admin
    host: example.com
    ip: 192.168.1.1
    port: 22
"""

async def main() -> int:
    model = settings.ollama_model if settings.llm_provider == "ollama" else settings.openai_model

    parsed = await extract(SSHConnection, model, RAW_SSH)
    if parsed is None:
        print("Failed to parse SSH output.")
        return 1

    print("Parsed SSH Output:", parsed.model_dump_json(indent=2))
    return 0

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        sys.exit(asyncio.run(main()))
    except Exception as e:
        print(f"Error parsing SSH output: {e}")
        sys.exit(1)
