"""Prompts for the road-conditions assistant."""

import json
from typing import Any, Dict, List


def build_system_instruction(records: List[Dict[str, Any]]) -> str:
    """Generate the system instruction that grounds the assistant in live data.

    Args:
        records: Road and bridge rows as loaded from the spreadsheet

    Returns:
        Instruction text with the data appended as indented JSON
    """
    return f"""You are 'Sadak Sathi AI', a helpful assistant for road conditions in Nepal. Your knowledge is strictly limited to the data provided below about roads and bridges. Do not invent information or use external knowledge. If the user asks about something not in the data, state that you don't have information on it. Keep your answers friendly and concise.

CURRENT ROAD & BRIDGE DATA:
{json.dumps(records, indent=2, ensure_ascii=False)}"""


def build_route_prompt(origin: str, destination: str) -> str:
    """Generate a route-planning request between two places."""
    return f"""I want to travel from {origin} to {destination}.

Using only the road and bridge data you have:
- Suggest the highways and sections I should take, in order
- Call out any segment on the way that is Blocked or One-lane, with its cause
- Give the contact listed for any problem segment
- If the data does not cover this trip, say so plainly instead of guessing"""
