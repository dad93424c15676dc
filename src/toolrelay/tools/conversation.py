"""Conversational-control tools.

Neither tool performs I/O; the agent loop interprets them. They only
acknowledge the call in a fixed template.
"""

from __future__ import annotations


async def ask_followup_question(question: str) -> str:
    return f"Follow-up question asked: {question}"


async def attempt_completion(result: str, command: str | None = None) -> str:
    response = f"Completion attempted with result: {result}"
    if command:
        response += f"\nCommand to be executed: {command}"
    return response
